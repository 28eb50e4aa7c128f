"""
Tryb zdolności po stronie UI.

Kliknięcie w pole znaczy co innego zależnie od wybranego trybu:

    MOVE      -> krok gracza w stronę pola
    TELEPORT  -> teleport na pole (po sukcesie powrót do MOVE)
    BARRIER   -> 1. kliknięcie: początek linii
                 2. kliknięcie: koniec linii, stawianie (powrót do MOVE)

To tylko księgowanie wyboru - reguły gry żyją w Game.
"""

from __future__ import annotations
from enum import Enum
from typing import List, Optional

from ..core.hex_coord import HexCoord
from .game import Game


class AbilityMode(Enum):
    MOVE = "move"
    TELEPORT = "teleport"
    BARRIER = "barrier"


class AbilityController:
    """
    Attributes:
        game (Game): Sterowana gra
        mode (AbilityMode): Aktualny tryb kliknięcia
        barrier_start (Optional[HexCoord]): Początek linii w trybie BARRIER
    """

    def __init__(self, game: Game):
        self.game = game
        self.mode = AbilityMode.MOVE
        self.barrier_start: Optional[HexCoord] = None

    def toggle_ability_mode(self, mode: AbilityMode) -> AbilityMode:
        """
        Włącza tryb, albo wraca do MOVE jeśli był już aktywny.

        Returns:
            AbilityMode: Tryb po przełączeniu
        """
        if self.mode == mode:
            self.mode = AbilityMode.MOVE
        else:
            self.mode = mode
        self.barrier_start = None
        return self.mode

    def reset(self) -> None:
        """Powrót do MOVE bez wybranego początku linii (np. po next_level)."""
        self.mode = AbilityMode.MOVE
        self.barrier_start = None

    def select(self, coord: HexCoord) -> bool:
        """
        Obsługuje kliknięcie w pole.

        Returns:
            bool: True jeśli kliknięcie wykonało akcję w grze
        """
        if self.mode == AbilityMode.TELEPORT:
            applied = self.game.teleport_to(coord)
            if applied:
                self.mode = AbilityMode.MOVE
            return applied

        if self.mode == AbilityMode.BARRIER:
            if self.barrier_start is None:
                if coord in self.game.grid:
                    self.barrier_start = coord
                return False
            start, self.barrier_start = self.barrier_start, None
            self.mode = AbilityMode.MOVE
            return self.game.place_barrier(start, coord)

        return self.game.move_player_toward(coord)

    def preview(self, coord: HexCoord) -> List[HexCoord]:
        """
        Pola podświetlane pod kursorem.

        BARRIER z wybranym początkiem -> linia barier,
        TELEPORT -> pole jeśli jest poprawnym celem,
        w pozostałych przypadkach pusto.
        """
        if self.mode == AbilityMode.BARRIER and self.barrier_start is not None:
            return self.game.barrier_line(self.barrier_start, coord)
        if self.mode == AbilityMode.TELEPORT and coord in self.game.teleport_targets():
            return [coord]
        return []
