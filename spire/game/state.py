"""
Stan gry (maszyna stanów poziomu).

STANY:
═══════════════════════════════════════════════════════════════════

    IN_PROGRESS (Gra trwa)
    ─────────────────────────────────────────────────────────────
    Jedyny stan, w którym gracz może wykonywać akcje.

    Wyjście (w end_turn):
        -> SUCCESS (gracz stoi na wyjściu)
        -> FAILURE (wróg wszedł na pole gracza)
        -> STUCK   (brak teleportów i brak ścieżki do wyjścia)

    SUCCESS / FAILURE / STUCK
    ─────────────────────────────────────────────────────────────
    Stany końcowe. Akcje są odrzucane (no-op).
    Jedyne wyjście to next_level(), które buduje nowy poziom:
        SUCCESS       -> poziom + 1
        FAILURE/STUCK -> poziom 1

DIAGRAM TRANZYCJI:
═══════════════════════════════════════════════════════════════════

                 ┌───────────────┐
     setup ────► │  IN_PROGRESS  │ ◄──── next_level()
                 └───────┬───────┘
          ┌──────────────┼──────────────┐
          ▼              ▼              ▼
    ┌──────────┐   ┌──────────┐   ┌──────────┐
    │ SUCCESS  │   │ FAILURE  │   │  STUCK   │
    └──────────┘   └──────────┘   └──────────┘
"""

from __future__ import annotations
from enum import Enum


class GameState(Enum):
    """Stan poziomu. Dokładnie jeden obowiązuje w danej chwili."""

    IN_PROGRESS = "in-progress"
    SUCCESS = "success"
    FAILURE = "failure"
    STUCK = "stuck"

    def is_terminal(self) -> bool:
        """Czy to stan końcowy (akcje gracza zablokowane)."""
        return self != GameState.IN_PROGRESS

    def __str__(self) -> str:
        return self.value
