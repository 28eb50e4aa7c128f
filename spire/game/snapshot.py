"""
Widok planszy tylko do odczytu (dla renderowania).

Snapshot jest liczony na żądanie z aktualnego stanu Game - nie ma
tu żadnego automatycznego śledzenia zależności. UI woła
game.snapshot() po każdej akcji i rysuje z wyniku.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple, TYPE_CHECKING

from ..core.cell import Terrain
from ..core.hex_coord import HexCoord
from .state import GameState

if TYPE_CHECKING:
    from .game import Game


# Znaki planszy tekstowej
SYMBOLS = {
    "player": "@",
    "enemy": "E",
    "exit": "X",
    "barrier": "#",
    "open": ".",
}


@dataclass(frozen=True)
class CellView:
    """Jedno pole z flagami wyliczonymi z pozycji w grze."""
    coord: HexCoord
    terrain: Terrain
    is_player: bool = False
    is_exit: bool = False
    is_enemy: bool = False

    @property
    def symbol(self) -> str:
        if self.is_player:
            return SYMBOLS["player"]
        if self.is_enemy:
            return SYMBOLS["enemy"]
        if self.is_exit:
            return SYMBOLS["exit"]
        return SYMBOLS[self.terrain.value]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.coord.key,
            "q": self.coord.q,
            "r": self.coord.r,
            "s": self.coord.s,
            "terrain": self.terrain.value,
            "is_player": self.is_player,
            "is_exit": self.is_exit,
            "is_enemy": self.is_enemy,
        }


@dataclass(frozen=True)
class BoardSnapshot:
    """
    Niemutowalny obraz planszy w danej chwili.

    Attributes:
        cells (Tuple[CellView, ...]): Pola w kolejności Game.ring_hexes()
        state (GameState): Stan poziomu
        level (int): Numer poziomu
        turn (int): Numer tury
        teleports (int): Pozostałe ładunki teleportu
        player (HexCoord): Pole gracza
        exit (HexCoord): Pole wyjścia
        enemies (Tuple[Tuple[str, HexCoord], ...]): (id, pole) wrogów
    """
    cells: Tuple[CellView, ...]
    state: GameState
    level: int
    turn: int
    teleports: int
    player: HexCoord
    exit: HexCoord
    enemies: Tuple[Tuple[str, HexCoord], ...]

    @classmethod
    def from_game(cls, game: Game) -> BoardSnapshot:
        enemy_cells = {e.position for e in game.enemies}
        views = tuple(
            CellView(
                coord=cell.coord,
                terrain=cell.terrain,
                is_player=cell.coord == game.player,
                is_exit=cell.coord == game.exit,
                is_enemy=cell.coord in enemy_cells,
            )
            for cell in game.cells()
        )
        return cls(
            cells=views,
            state=game.state,
            level=game.level,
            turn=game.turn,
            teleports=game.teleports,
            player=game.player,
            exit=game.exit,
            enemies=tuple((e.id, e.position) for e in game.enemies),
        )

    @property
    def num_enemies(self) -> int:
        return len(self.enemies)

    def view_at(self, coord: HexCoord) -> CellView:
        """
        Raises:
            KeyError: Jeśli pola nie ma w snapshocie
        """
        for view in self.cells:
            if view.coord == coord:
                return view
        raise KeyError(coord.key)

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot w formacie JSON (API)."""
        return {
            "state": self.state.value,
            "level": self.level,
            "turn": self.turn,
            "teleports": self.teleports,
            "player": self.player.key,
            "exit": self.exit.key,
            "enemies": [{"id": eid, "position": pos.key} for eid, pos in self.enemies],
            "cells": [view.to_dict() for view in self.cells],
        }


def render_board(game: Game) -> str:
    """
    Plansza jako tekst (terminal).

    Legenda:
        @ = gracz, E = wróg, X = wyjście, # = bariera, . = wolne pole
    """
    views = {view.coord: view for view in game.snapshot().cells}
    return game.grid.debug_print(lambda coord, cell: views[coord].symbol)
