"""
Wyszukiwanie ścieżki o jednolitym koszcie na siatce hexagonalnej.

Każdy ruch na sąsiedni hex kosztuje 1, więc algorytm to w praktyce
BFS zapisany jako best-first search z kolejką priorytetową:

    1. Frontier (heapq) posortowany po (koszt, licznik odkrycia)
    2. Zdejmij węzeł o najniższym koszcie
       (przy remisie: ten odkryty najwcześniej)
    3. Jeśli to cel - odtwórz ścieżkę z mapy rodziców
    4. Dodaj sąsiadów, którzy są przechodni (is_pathable)

Wyjątek od reguły przechodności:
    Start i cel są ZAWSZE dopuszczalne, nawet jeśli ich teren
    nie jest otwarty. Gracz, wróg lub wyjście może więc stać na
    "specjalnym" polu i nadal być punktem ścieżki.

Wynik:
    - Lista współrzędnych od kroku PO starcie do celu (włącznie)
    - [] gdy start == cel
    - None gdy cel jest nieosiągalny (lub start/cel poza siatką)

Funkcja jest czysta - nie modyfikuje siatki i przy niezmienionym
terenie zwraca zawsze ten sam wynik.

Przykład użycia:
    >>> grid = HexGrid.from_coords(HexCoord.disk(ORIGIN, 0, 4))
    >>> path = find_path(grid, HexCoord(0, 0, 0), HexCoord(2, -2, 0))
    >>> path
    [HexCoord(q=1, r=-1, s=0), HexCoord(q=2, r=-2, s=0)]
"""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import heapq
import itertools

from .hex_coord import HexCoord
from .hex_grid import HexGrid


def find_path(
    grid: HexGrid,
    start: HexCoord,
    goal: HexCoord,
) -> Optional[List[HexCoord]]:
    """
    Znajduje najkrótszą ścieżkę między dwoma hexami.

    Args:
        grid: Siatka z informacją o terenie
        start: Pozycja startowa
        goal: Pozycja docelowa

    Returns:
        Optional[List[HexCoord]]: Ścieżka bez startu, z celem.
            None jeśli ścieżka nie istnieje.

    Complexity:
        Time: O(n log n) gdzie n = liczba odwiedzonych hexów
        Space: O(n) dla kosztów i rodziców
    """
    if start not in grid or goal not in grid:
        return None

    if start == goal:
        return []

    counter = itertools.count()
    frontier: List[Tuple[int, int, HexCoord]] = [(0, next(counter), start)]
    costs: Dict[HexCoord, int] = {start: 0}
    parents: Dict[HexCoord, HexCoord] = {}

    while frontier:
        cost, _, current = heapq.heappop(frontier)

        # Nieaktualny wpis (znaleziono tańszą drogę wcześniej)
        if cost > costs[current]:
            continue

        if current == goal:
            return _reconstruct_path(parents, start, goal)

        for neighbor in current.neighbors():
            cell = grid.get(neighbor)
            if cell is None:
                continue
            if not cell.is_pathable and neighbor != goal and neighbor != start:
                continue

            new_cost = cost + 1
            if neighbor not in costs or new_cost < costs[neighbor]:
                costs[neighbor] = new_cost
                parents[neighbor] = current
                heapq.heappush(frontier, (new_cost, next(counter), neighbor))

    return None


def _reconstruct_path(
    parents: Dict[HexCoord, HexCoord],
    start: HexCoord,
    goal: HexCoord,
) -> List[HexCoord]:
    """
    Odtwarza ścieżkę od goal do start używając mapy rodziców.

    Returns:
        List[HexCoord]: Ścieżka od kroku po starcie do goal
    """
    path = [goal]
    current = goal

    while parents[current] != start:
        current = parents[current]
        path.append(current)

    path.reverse()
    return path


def find_next_step(
    grid: HexGrid,
    start: HexCoord,
    goal: HexCoord,
) -> Optional[HexCoord]:
    """
    Tylko pierwszy krok ścieżki do celu.

    Jednostki w grze ruszają się o jedno pole na turę,
    więc cała ścieżka nie jest potrzebna.

    Returns:
        Optional[HexCoord]: Następny hex lub None (brak ścieżki / już w celu)
    """
    path = find_path(grid, start, goal)
    if not path:
        return None
    return path[0]
