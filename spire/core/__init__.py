"""
Core module - podstawowe komponenty silnika.

Zawiera:
- HexCoord: System współrzędnych cube
- HexGrid: Mapa współrzędna -> pole
- Cell / Terrain: Pole planszy i jego teren
- find_path: Wyszukiwanie ścieżki o jednolitym koszcie
- GameRNG: Deterministyczny generator losowości
- ConfigLoader: Wczytywanie konfiguracji z defaults
- layout: Geometria ekranowa (hex -> piksele)
"""

from .hex_coord import HexCoord, ORIGIN
from .hex_grid import HexGrid
from .cell import Cell, Terrain
from .pathfinding import find_path, find_next_step
from .rng import GameRNG
from .config_loader import ConfigLoader
from .layout import hex_to_pixel, hexagon_points, polygon_points

__all__ = [
    "HexCoord", "ORIGIN", "HexGrid", "Cell", "Terrain",
    "find_path", "find_next_step", "GameRNG", "ConfigLoader",
    "hex_to_pixel", "hexagon_points", "polygon_points",
]
