"""
Siatka hexagonalna (HexGrid) - mapa współrzędna -> pole.

HexGrid:
- Trzyma dokładnie jedno Cell na współrzędną
- Jest budowana raz na poziom (z generatora, np. HexCoord.disk)
- Nie zmienia rozmiaru w trakcie poziomu

Brak pola pod współrzędną to "poza planszą", nie błąd:
    get() zwraca None i wywołujący ma to odfiltrować.

Przykład użycia:
    >>> grid = HexGrid.from_coords(HexCoord.disk(ORIGIN, 0, 7))
    >>> len(grid)
    127
    >>> grid.get(HexCoord(10, -10, 0)) is None
    True
"""

from __future__ import annotations
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .cell import Cell, Terrain
from .hex_coord import HexCoord


class HexGrid:
    """
    Mapa HexCoord -> Cell.

    Attributes:
        _cells (Dict[HexCoord, Cell]): Pola siatki

    Note:
        Kolejność iteracji nie jest częścią kontraktu.
    """

    def __init__(self) -> None:
        self._cells: Dict[HexCoord, Cell] = {}

    @classmethod
    def from_coords(cls, coords: Iterable[HexCoord]) -> HexGrid:
        """
        Buduje siatkę z otwartymi polami pod podanymi współrzędnymi.

        Args:
            coords: Generator współrzędnych (np. dysk)
        """
        grid = cls()
        for coord in coords:
            grid.set(coord, Cell(coord))
        return grid

    # ─────────────────────────────────────────────────────────────────────────
    # DOSTĘP
    # ─────────────────────────────────────────────────────────────────────────

    def get(self, coord: HexCoord) -> Optional[Cell]:
        """
        Zwraca pole pod współrzędną.

        Returns:
            Optional[Cell]: Pole lub None jeśli poza siatką
        """
        return self._cells.get(coord)

    def set(self, coord: HexCoord, cell: Cell) -> None:
        """
        Instaluje (lub zastępuje) pole pod współrzędną.

        Raises:
            ValueError: Jeśli cell.coord nie zgadza się z coord
        """
        if cell.coord != coord:
            raise ValueError(f"Cell at {cell.coord} cannot be stored under {coord}")
        self._cells[coord] = cell

    def is_valid(self, coord: HexCoord) -> bool:
        """Czy współrzędna należy do siatki."""
        return coord in self._cells

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    # ─────────────────────────────────────────────────────────────────────────
    # ITERACJA
    # ─────────────────────────────────────────────────────────────────────────

    def items(self) -> Iterator[Tuple[HexCoord, Cell]]:
        """
        Leniwa iteracja po parach (współrzędna, pole).

        Każde wywołanie zwraca nowy iterator, więc przejście
        można powtórzyć. Siatka nie zmienia rozmiaru w trakcie
        poziomu, więc zmiana terenu pola w pętli jest bezpieczna.
        """
        return iter(self._cells.items())

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells.values())

    def coords(self) -> List[HexCoord]:
        return list(self._cells.keys())

    def cells_with(self, terrain: Terrain) -> List[Cell]:
        """Pola o danym terenie."""
        return [cell for cell in self._cells.values() if cell.terrain == terrain]

    # ─────────────────────────────────────────────────────────────────────────
    # DEBUG
    # ─────────────────────────────────────────────────────────────────────────

    def debug_print(
        self,
        marker: Optional[Callable[[HexCoord, Cell], str]] = None,
    ) -> str:
        """
        Tekstowa reprezentacja siatki (wiersze po r).

        Legenda domyślna:
            . = otwarte pole
            # = bariera

        Args:
            marker: Opcjonalna funkcja (coord, cell) -> znak,
                np. żeby narysować gracza i wrogów
        """
        if not self._cells:
            return ""
        if marker is None:
            marker = lambda coord, cell: "#" if cell.is_barrier else "."
        rows: Dict[int, List[HexCoord]] = {}
        for coord in self._cells:
            rows.setdefault(coord.r, []).append(coord)

        min_q = min(c.q + c.r / 2 for c in self._cells)
        lines = []
        for r in sorted(rows):
            row = sorted(rows[r], key=lambda c: c.q)
            indent = int((row[0].q + r / 2 - min_q) * 2)
            marks = [marker(c, self._cells[c]) for c in row]
            lines.append(" " * indent + " ".join(marks))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"HexGrid(cells={len(self._cells)})"
