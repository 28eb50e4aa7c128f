"""
Deterministyczny generator liczb losowych (RNG).

Rozmieszczenie wrogów na planszy jest losowe, ale musi być
powtarzalne - ten sam seed daje tę samą planszę. To pozwala na:
- Testy jednostkowe scenariuszy
- Odtworzenie poziomu z logu zdarzeń
- Debugowanie zgłoszonych plansz

GameRNG opakowuje Pythonowy random.Random.

Jak używać:
    - Każda gra (Game) ma WŁASNĄ instancję GameRNG
    - NIE używaj globalnego random - jest współdzielony

Przykład użycia:
    >>> rng = GameRNG(seed=12345)
    >>> rng.shuffle_take([1, 2, 3, 4, 5], 2)  # zawsze to samo dla seed=12345
    [...]
"""

from __future__ import annotations
import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar('T')


class GameRNG:
    """
    Deterministyczny generator losowości dla gry.

    Attributes:
        seed (int): Ziarno użyte do inicjalizacji
        _rng (random.Random): Wewnętrzny generator

    Example:
        >>> rng1 = GameRNG(42)
        >>> rng2 = GameRNG(42)
        >>> rng1.shuffle_take(range(10), 3) == rng2.shuffle_take(range(10), 3)
        True
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Tworzy nowy generator.

        Args:
            seed: Ziarno losowości. None = losowe ziarno
                (zapamiętane w self.seed, więc grę da się odtworzyć).
        """
        if seed is None:
            seed = random.SystemRandom().randint(0, 2**31 - 1)
        self.seed = seed
        self._rng = random.Random(seed)

    # ─────────────────────────────────────────────────────────────────────────
    # PODSTAWOWE METODY
    # ─────────────────────────────────────────────────────────────────────────

    def shuffle(self, seq: List[T]) -> None:
        """Tasuje listę w miejscu (modyfikuje oryginalną)."""
        self._rng.shuffle(seq)

    # ─────────────────────────────────────────────────────────────────────────
    # METODY SPECYFICZNE DLA GRY
    # ─────────────────────────────────────────────────────────────────────────

    def shuffle_take(self, seq: Sequence[T], k: int) -> List[T]:
        """
        Losuje do k unikalnych elementów (tasowanie + wzięcie prefiksu).

        W przeciwieństwie do random.sample NIE rzuca wyjątku gdy
        k > len(seq) - zwraca wtedy wszystkie elementy w losowej kolejności.

        Args:
            seq: Sekwencja kandydatów
            k: Ile elementów wybrać

        Returns:
            List[T]: min(k, len(seq)) elementów bez powtórzeń
        """
        pool = list(seq)
        self.shuffle(pool)
        return pool[:max(k, 0)]

    # ─────────────────────────────────────────────────────────────────────────
    # STAN
    # ─────────────────────────────────────────────────────────────────────────

    def get_state(self) -> tuple:
        """Aktualny stan RNG (do zapisania/odtworzenia)."""
        return self._rng.getstate()

    def set_state(self, state: tuple) -> None:
        """Ustawia stan RNG zapisany przez get_state()."""
        self._rng.setstate(state)

    def __repr__(self) -> str:
        return f"GameRNG(seed={self.seed})"
