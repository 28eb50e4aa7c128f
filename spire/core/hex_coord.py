"""
System współrzędnych hexagonalnych (Cube Coordinates).

Używamy pełnych Cube Coordinates (q, r, s) gdzie zawsze:
    q + r + s = 0

Układ sąsiadów (kolejność stała - od niej zależy chodzenie po pierścieniu):
    Indeks   (dq, dr, ds)
    ─────────────────────
    0        (+1, -1,  0)
    1        (+1,  0, -1)
    2        ( 0, +1, -1)
    3        (-1, +1,  0)
    4        (-1,  0, +1)
    5        ( 0, -1, +1)

Odległość między hexami:
    distance = (|dq| + |dr| + |ds|) / 2

    Ponieważ dq + dr + ds = 0, suma modułów jest zawsze parzysta,
    więc wynik jest liczbą całkowitą.

Pierścień i dysk:
    ring(center, 0)     -> [center]
    ring(center, n)     -> 6 * n hexów, start w center + dir[4] * n
    disk(center, a, b)  -> ring(a) + ring(a+1) + ... + ring(b-1)

Przykład użycia:
    >>> a = HexCoord(0, 0, 0)
    >>> b = HexCoord(2, -1, -1)
    >>> a.distance(b)
    2
    >>> len(HexCoord.ring(a, 3))
    18
"""

from __future__ import annotations
from dataclasses import dataclass
import math
from typing import List, Tuple


# Kierunki sąsiadów w układzie cube
HEX_DIRECTIONS: List[Tuple[int, int, int]] = [
    (+1, -1, 0),
    (+1, 0, -1),
    (0, +1, -1),
    (-1, +1, 0),
    (-1, 0, +1),
    (0, -1, +1),
]


@dataclass(frozen=True)
class HexCoord:
    """
    Współrzędna hexagonalna w systemie cube (q, r, s).

    Klasa jest niemutowalna (frozen=True). Równość i hash liczone
    z trójki (q, r, s), więc może być kluczem w słowniku.

    Attributes:
        q (int): Pierwsza oś
        r (int): Druga oś
        s (int): Trzecia oś

    Raises:
        ValueError: Jeśli q + r + s != 0
    """
    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise ValueError(
                f"Invalid cube coordinates: {self.q} + {self.r} + {self.s} != 0"
            )

    # ─────────────────────────────────────────────────────────────────────────
    # WŁAŚCIWOŚCI
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def cube(self) -> Tuple[int, int, int]:
        """Krotka (q, r, s)."""
        return (self.q, self.r, self.s)

    @property
    def key(self) -> str:
        """
        Kanoniczny klucz tekstowy "q,r,s".

        Używany w API i logach jako stabilny identyfikator pola.
        """
        return f"{self.q},{self.r},{self.s}"

    @classmethod
    def from_key(cls, key: str) -> HexCoord:
        """
        Odtwarza współrzędną z klucza "q,r,s".

        Raises:
            ValueError: Jeśli klucz jest niepoprawny
        """
        parts = key.split(",")
        if len(parts) != 3:
            raise ValueError(f"Invalid hex key: {key!r}")
        q, r, s = (int(p) for p in parts)
        return cls(q, r, s)

    # ─────────────────────────────────────────────────────────────────────────
    # ARYTMETYKA
    # ─────────────────────────────────────────────────────────────────────────

    def add(self, other: HexCoord) -> HexCoord:
        """Dodawanie współrzędnych."""
        return HexCoord(self.q + other.q, self.r + other.r, self.s + other.s)

    def subtract(self, other: HexCoord) -> HexCoord:
        """Odejmowanie współrzędnych."""
        return HexCoord(self.q - other.q, self.r - other.r, self.s - other.s)

    def scale(self, amount: int) -> HexCoord:
        """Mnożenie przez skalar."""
        return HexCoord(self.q * amount, self.r * amount, self.s * amount)

    def __add__(self, other: HexCoord) -> HexCoord:
        return self.add(other)

    def __sub__(self, other: HexCoord) -> HexCoord:
        return self.subtract(other)

    def __mul__(self, amount: int) -> HexCoord:
        return self.scale(amount)

    # ─────────────────────────────────────────────────────────────────────────
    # SĄSIEDZI I ODLEGŁOŚĆ
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def direction(index: int) -> HexCoord:
        """
        Wektor jednostkowy dla kierunku.

        Args:
            index: Indeks kierunku (0-5)

        Raises:
            IndexError: Jeśli index nie jest w zakresie 0-5
        """
        return HexCoord(*HEX_DIRECTIONS[index])

    def neighbor(self, direction: int) -> HexCoord:
        """Sąsiad w podanym kierunku (0-5)."""
        return self.add(HexCoord.direction(direction))

    def neighbors(self) -> List[HexCoord]:
        """Wszystkich 6 sąsiadów w kolejności HEX_DIRECTIONS."""
        return [self.neighbor(i) for i in range(6)]

    def distance(self, other: HexCoord) -> int:
        """
        Odległość w krokach między dwoma hexami.

        Example:
            >>> HexCoord(0, 0, 0).distance(HexCoord(3, -6, 3))
            6
        """
        dq = abs(self.q - other.q)
        dr = abs(self.r - other.r)
        ds = abs(self.s - other.s)
        return (dq + dr + ds) // 2

    # ─────────────────────────────────────────────────────────────────────────
    # PIERŚCIEŃ, DYSK, LINIA
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def ring(center: HexCoord, radius: int) -> List[HexCoord]:
        """
        Hexy dokładnie w odległości `radius` od centrum.

        Note:
            - radius=0 zwraca [center]
            - radius=n zwraca 6*n hexów (dla n > 0)
        """
        if radius == 0:
            return [center]

        results: List[HexCoord] = []
        current = center.add(HexCoord.direction(4).scale(radius))
        for direction in range(6):
            for _ in range(radius):
                results.append(current)
                current = current.neighbor(direction)
        return results

    @staticmethod
    def disk(center: HexCoord, start_radius: int, end_radius: int) -> List[HexCoord]:
        """
        Pierścienie od start_radius do end_radius (bez end_radius).

        Example:
            >>> len(HexCoord.disk(HexCoord(0, 0, 0), 0, 2))
            7
        """
        results: List[HexCoord] = []
        for radius in range(start_radius, end_radius):
            results.extend(HexCoord.ring(center, radius))
        return results

    @staticmethod
    def line_between(a: HexCoord, b: HexCoord) -> List[HexCoord]:
        """
        Hexy tworzące linię prostą od a do b (włącznie z oboma końcami).

        Interpolacja liniowa w przestrzeni cube, każda próbka
        zaokrąglana przez cube_round.

        Example:
            >>> HexCoord.line_between(HexCoord(0, 0, 0), HexCoord(2, -2, 0))
            [HexCoord(q=0, r=0, s=0), HexCoord(q=1, r=-1, s=0), HexCoord(q=2, r=-2, s=0)]
        """
        n = a.distance(b)
        if n == 0:
            return [a]

        results: List[HexCoord] = []
        for i in range(n + 1):
            t = i / n
            results.append(cube_round(
                a.q + (b.q - a.q) * t,
                a.r + (b.r - a.r) * t,
                a.s + (b.s - a.s) * t,
            ))
        return results

    # ─────────────────────────────────────────────────────────────────────────
    # REPREZENTACJA
    # ─────────────────────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"({self.q}, {self.r}, {self.s})"


ORIGIN = HexCoord(0, 0, 0)


def cube_round(q: float, r: float, s: float) -> HexCoord:
    """
    Zaokrągla współrzędne cube do najbliższego hexa.

    Algorytm:
    1. Zaokrąglij każdą współrzędną do najbliższej int (połówki w górę)
    2. Znajdź współrzędną z największym błędem zaokrąglenia
       (remis rozstrzygany w kolejności q, r, s)
    3. Wylicz ją z pozostałych dwóch, żeby q + r + s = 0
    """
    rq = math.floor(q + 0.5)
    rr = math.floor(r + 0.5)
    rs = math.floor(s + 0.5)

    dq = abs(rq - q)
    dr = abs(rr - r)
    ds = abs(rs - s)

    if dq >= dr and dq >= ds:
        rq = -rr - rs
    elif dr >= ds:
        rr = -rq - rs
    else:
        rs = -rq - rr

    return HexCoord(int(rq), int(rr), int(rs))
