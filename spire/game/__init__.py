"""
Game module - silnik tur.

Zawiera:
- Game / GameConfig: Plansza, akcje gracza, rozstrzyganie tury
- GameState: Stan poziomu
- Enemy: Wróg na planszy
- BoardSnapshot: Widok planszy dla UI
- AbilityController: Tryb kliknięcia (ruch / teleport / bariera)
"""

from .state import GameState
from .enemy import Enemy
from .game import Game, GameConfig, BoardSetupError
from .snapshot import BoardSnapshot, CellView, render_board
from .controller import AbilityController, AbilityMode

__all__ = [
    "GameState", "Enemy", "Game", "GameConfig", "BoardSetupError",
    "BoardSnapshot", "CellView", "render_board",
    "AbilityController", "AbilityMode",
]
