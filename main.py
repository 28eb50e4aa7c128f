#!/usr/bin/env python3
"""
Spire of the Path - Entry Point (terminal)
═══════════════════════════════════════════════════════════════════════════

Gra w terminalu: plansza rysowana tekstem, komendy z klawiatury.

Użycie:
    python main.py                       # Losowy seed
    python main.py --seed 12345          # Konkretny seed
    python main.py --config my.yaml      # Nadpisania konfiguracji
    python main.py --save-log out.json   # Zapis logu zdarzeń po wyjściu

Komendy:
    m q r s              krok w stronę pola
    t q r s              teleport na pole
    b q r s q r s        linia barier od pola do pola
    n                    następny poziom (po końcu poziomu)
    quit                 wyjście
"""

import argparse
import sys
from typing import List, Optional

from spire.core.config_loader import ConfigLoader
from spire.core.hex_coord import HexCoord
from spire.game import Game, GameConfig, GameState, render_board


HELP = "Komendy: m q r s | t q r s | b q r s q r s | n | quit"

END_MESSAGES = {
    GameState.SUCCESS: "🏆 Dotarłeś do wyjścia! Wpisz 'n' aby przejść dalej.",
    GameState.FAILURE: "💀 Wróg cię dopadł. Wpisz 'n' aby zacząć od nowa.",
    GameState.STUCK: "🧱 Brak drogi do wyjścia i brak teleportów. Wpisz 'n' aby zacząć od nowa.",
}


def _coords(values: List[str], count: int) -> Optional[List[HexCoord]]:
    if len(values) != 3 * count:
        return None
    try:
        numbers = [int(v) for v in values]
        return [HexCoord(*numbers[i:i + 3]) for i in range(0, len(numbers), 3)]
    except ValueError:
        return None


def run_command(game: Game, line: str) -> str:
    """
    Wykonuje jedną komendę tekstową.

    Returns:
        str: Komunikat dla gracza
    """
    parts = line.split()
    if not parts:
        return HELP

    command, args = parts[0].lower(), parts[1:]

    if command == "n":
        if not game.state.is_terminal():
            return "Poziom jeszcze trwa."
        game.next_level()
        return f"Poziom {game.level}, wrogów: {len(game.enemies)}"

    if command in ("m", "t"):
        coords = _coords(args, 1)
        if coords is None:
            return HELP
        if command == "m":
            applied = game.move_player_toward(coords[0])
        else:
            applied = game.teleport_to(coords[0])
        return "OK" if applied else "Nie można."

    if command == "b":
        coords = _coords(args, 2)
        if coords is None:
            return HELP
        return "OK" if game.place_barrier(coords[0], coords[1]) else "Nie można."

    return HELP


def print_status(game: Game) -> None:
    print(render_board(game))
    print()
    print(
        f"Poziom {game.level} | tura {game.turn} | teleporty: {game.teleports} | "
        f"gracz {game.player} | wyjście {game.exit}"
    )
    if game.state in END_MESSAGES:
        print(END_MESSAGES[game.state])


def main():
    """Główna funkcja."""
    parser = argparse.ArgumentParser(
        description="Spire of the Path - hex puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Ziarno losowości (domyślnie: losowe)"
    )
    parser.add_argument(
        "--data",
        default="data/",
        help="Folder z defaults.yaml (domyślnie: data/)"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Plik YAML z nadpisaniami konfiguracji gry"
    )
    parser.add_argument(
        "--save-log",
        default=None,
        help="Zapisz log zdarzeń ostatniego poziomu do pliku JSON po zakończeniu"
    )

    args = parser.parse_args()

    loader = ConfigLoader(args.data)
    if args.config:
        config_data = loader.load_game_config_file(args.config)
    else:
        config_data = loader.load_game_config()

    game = Game(GameConfig.from_dict(config_data), seed=args.seed)

    print("=" * 60)
    print("SPIRE OF THE PATH")
    print("=" * 60)
    print(f"Seed: {game.rng.seed}")
    print(HELP)
    print()

    while True:
        print_status(game)
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if line in ("quit", "exit", "q"):
            break
        print(run_command(game, line))
        print()

    if args.save_log:
        game.logger.save(args.save_log)
        print(f"📄 Log zapisany: {args.save_log}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
