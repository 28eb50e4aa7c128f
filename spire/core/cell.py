"""
Pole planszy (Cell) i jego teren.

Cell przechowuje TYLKO:
- swoją współrzędną (stałą)
- teren (OPEN / BARRIER)

Zajętość (gracz, wróg) NIE jest trzymana w Cell - wynika z pozycji
w obiekcie Game. Dzięki temu jest jedno źródło prawdy o pozycjach.

Relacja Cell -> Grid / Game:
    Cell nie trzyma wskaźnika na siatkę ani na grę. Zapytania, które
    potrzebują kontekstu (neighbors, circle, line_to, is_empty),
    dostają go jako argument od wywołującego.

Przykład użycia:
    >>> cell = grid.get(HexCoord(0, 0, 0))
    >>> cell.is_pathable
    True
    >>> [c.coord for c in cell.neighbors(grid)]
    [HexCoord(q=1, r=-1, s=0), ...]
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Protocol, TYPE_CHECKING

from .hex_coord import HexCoord

if TYPE_CHECKING:
    from .hex_grid import HexGrid


class Terrain(Enum):
    """Teren pola."""

    OPEN = "open"
    BARRIER = "barrier"

    def __str__(self) -> str:
        return self.value


class Occupancy(Protocol):
    """Cokolwiek, co wie gdzie stoją gracz i wrogowie (zwykle Game)."""

    def is_occupied(self, coord: HexCoord) -> bool:
        ...


@dataclass(eq=False)
class Cell:
    """
    Pojedyncze pole planszy.

    Attributes:
        coord (HexCoord): Pozycja pola (nie zmienia się)
        terrain (Terrain): Aktualny teren

    Note:
        eq=False - dwa pola porównujemy po tożsamości, siatka
        gwarantuje jedno pole na współrzędną.
    """
    coord: HexCoord
    terrain: Terrain = field(default=Terrain.OPEN)

    # ─────────────────────────────────────────────────────────────────────────
    # PREDYKATY
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_pathable(self) -> bool:
        """
        Czy przez pole można przejść.

        Bariera blokuje zawsze, nawet dla jednostki, która na niej stoi.
        """
        return self.terrain == Terrain.OPEN

    @property
    def is_barrier(self) -> bool:
        return self.terrain == Terrain.BARRIER

    def is_empty(self, occupancy: Occupancy) -> bool:
        """
        Czy pole jest wolne: przechodnie i nikt na nim nie stoi.

        Args:
            occupancy: Źródło pozycji gracza i wrogów (Game)
        """
        return self.is_pathable and not occupancy.is_occupied(self.coord)

    # ─────────────────────────────────────────────────────────────────────────
    # ZAPYTANIA PRZESTRZENNE
    # ─────────────────────────────────────────────────────────────────────────

    def neighbors(self, grid: HexGrid) -> List[Cell]:
        """
        Sąsiednie pola obecne w siatce.

        Pola na krawędzi mają mniej niż 6 sąsiadów.
        """
        result = []
        for coord in self.coord.neighbors():
            cell = grid.get(coord)
            if cell is not None:
                result.append(cell)
        return result

    def circle(self, grid: HexGrid, radius: int) -> List[Cell]:
        """
        Wszystkie pola w odległości <= radius (łącznie z tym polem).
        """
        result = []
        for coord in HexCoord.disk(self.coord, 0, radius + 1):
            cell = grid.get(coord)
            if cell is not None:
                result.append(cell)
        return result

    def line_to(self, grid: HexGrid, other: Cell) -> List[Cell]:
        """
        Pola na linii prostej do `other`, zatrzymując się na przeszkodzie.

        Zbiera pola dopóki są przechodnie. Pierwsze nieprzechodnie
        (lub poza siatką) kończy linię - nic za nim nie jest zwracane.

        Returns:
            List[Cell]: Pola od self (włącznie) do przeszkody (bez niej)
        """
        result: List[Cell] = []
        for coord in HexCoord.line_between(self.coord, other.coord):
            cell = grid.get(coord)
            if cell is None or not cell.is_pathable:
                break
            result.append(cell)
        return result

    def __repr__(self) -> str:
        return f"Cell({self.coord}, {self.terrain})"
