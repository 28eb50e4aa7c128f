"""
Geometria ekranowa dla warstwy UI.

Czyste funkcje: współrzędna hexa -> piksele, oraz wierzchołki
sześciokąta do narysowania (np. jako SVG <polygon points="...">).
Nie dotykają stanu gry.

Hexy są "pointy-top" (wierzchołek u góry):

    x = cx + R * sqrt(3) * (q + r / 2)
    y = cy + R * 3/2 * r

Wierzchołki sześciokąta o środku (cx, cy) i promieniu R:
    kąt_i = 60° * i + 30°,  i = 0..5
    punkt_i = (cx + R cos kąt_i, cy + R sin kąt_i), połówki w górę
"""

from __future__ import annotations
import math
from typing import List, Tuple

from .hex_coord import HexCoord


Point = Tuple[float, float]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def hex_to_pixel(coord: HexCoord, radius: float, origin: Point = (0.0, 0.0)) -> Point:
    """
    Środek hexa w pikselach.

    Args:
        coord: Współrzędna hexa
        radius: Promień hexa w pikselach
        origin: Piksel odpowiadający hexowi (0, 0, 0)
    """
    cx, cy = origin
    x = cx + radius * math.sqrt(3) * (coord.q + coord.r / 2)
    y = cy + radius * 3 / 2 * coord.r
    return (x, y)


def hexagon_points(cx: float, cy: float, size: float) -> List[Tuple[int, int]]:
    """6 wierzchołków sześciokąta zaokrąglonych do pełnych pikseli."""
    points = []
    for i in range(6):
        angle = math.pi / 180 * (60 * i + 30)
        points.append((
            _round_half_up(cx + size * math.cos(angle)),
            _round_half_up(cy + size * math.sin(angle)),
        ))
    return points


def polygon_points(coord: HexCoord, radius: float, origin: Point = (0.0, 0.0)) -> str:
    """
    Wierzchołki w formacie atrybutu SVG: "x1,y1 x2,y2 ...".
    """
    cx, cy = hex_to_pixel(coord, radius, origin)
    return " ".join(f"{x},{y}" for x, y in hexagon_points(cx, cy, radius))


def fit_radius(width: float, height: float, ring_size: int) -> int:
    """
    Promień hexa, przy którym plansza mieści się w oknie.

    Args:
        width, height: Rozmiar obszaru rysowania
        ring_size: Liczba pierścieni planszy
    """
    return _round_half_up(min(width, height) / ring_size / 4)
