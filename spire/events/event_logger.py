"""
System logowania zdarzeń gry do formatu JSON.

Każde zdarzenie (ruch gracza, teleport, bariera, ruch wroga, zmiana
stanu) jest zapisywane z numerem tury i pełnym kontekstem. Log może
być odtworzony w wizualizacji albo dołączony do zgłoszenia błędu.

TYPY ZDARZEŃ:
═══════════════════════════════════════════════════════════════════

    LEVEL_START
    ─────────────────────────────────────────────────────────────
    Początek poziomu (po setup_board).
    Data: level, player, exit, enemies, barriers

    LEVEL_END
    ─────────────────────────────────────────────────────────────
    Poziom zakończony stanem końcowym.
    Data: level, state, turns

    PLAYER_MOVE
    ─────────────────────────────────────────────────────────────
    Gracz zrobił krok.
    Data: from "q,r,s", to "q,r,s"

    PLAYER_TELEPORT
    ─────────────────────────────────────────────────────────────
    Gracz się teleportował.
    Data: from, to, charges_left

    BARRIER_PLACED
    ─────────────────────────────────────────────────────────────
    Postawiono linię barier.
    Data: cells (lista kluczy)

    ENEMY_SPAWN / ENEMY_MOVE
    ─────────────────────────────────────────────────────────────
    Pojawienie się / ruch wroga.
    Data: at / from, to

    STATE_CHANGE
    ─────────────────────────────────────────────────────────────
    Zmiana stanu gry.
    Data: from_state, to_state

    ACTION_REJECTED
    ─────────────────────────────────────────────────────────────
    Akcja gracza była niedozwolona (no-op).
    Data: action, reason

FORMAT LOGU:
═══════════════════════════════════════════════════════════════════

{
    "metadata": {
        "version": "1.0",
        "seed": 12345,
        "ring_size": 7,
        "timestamp": "2024-01-01T12:00:00"
    },
    "events": [
        {"turn": 0, "type": "LEVEL_START", "data": {...}},
        {"turn": 1, "type": "PLAYER_MOVE", "actor_id": "player",
         "data": {"from": "-3,6,-3", "to": "-2,5,-3"}},
        ...
    ]
}
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional
from datetime import datetime
import json
from pathlib import Path


class EventType(Enum):
    """Typ zdarzenia w grze."""

    # Poziom
    LEVEL_START = auto()
    LEVEL_END = auto()

    # Gracz
    PLAYER_MOVE = auto()
    PLAYER_TELEPORT = auto()
    BARRIER_PLACED = auto()
    ACTION_REJECTED = auto()

    # Wrogowie
    ENEMY_SPAWN = auto()
    ENEMY_MOVE = auto()

    # Stan
    STATE_CHANGE = auto()


@dataclass
class GameEvent:
    """
    Pojedyncze zdarzenie w grze.

    Attributes:
        turn (int): Numer tury kiedy zdarzenie nastąpiło
        event_type (EventType): Typ zdarzenia
        actor_id (Optional[str]): Kto wykonał akcję ("player", id wroga)
        data (Dict): Dodatkowe dane specyficzne dla typu zdarzenia
    """
    turn: int
    event_type: EventType
    actor_id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serializuje zdarzenie do słownika."""
        result: Dict[str, Any] = {
            "turn": self.turn,
            "type": self.event_type.name,
        }

        if self.actor_id:
            result["actor_id"] = self.actor_id
        if self.data:
            result["data"] = self.data

        return result


class EventLogger:
    """
    Logger zdarzeń gry.

    Zbiera wszystkie zdarzenia i może je zapisać do pliku JSON.

    Attributes:
        events (List[GameEvent]): Lista wszystkich zdarzeń
        metadata (Dict): Metadane gry

    Example:
        >>> logger = EventLogger(seed=12345, ring_size=7)
        >>> logger.log_move(turn=1, actor_id="player", from_key="0,0,0", to_key="1,-1,0")
        >>> logger.save("output/game_12345.json")
    """

    def __init__(self, seed: int, ring_size: int = 7):
        """
        Args:
            seed: Ziarno losowości gry
            ring_size: Rozmiar planszy
        """
        self.events: List[GameEvent] = []
        self.metadata: Dict[str, Any] = {
            "version": "1.0",
            "seed": seed,
            "ring_size": ring_size,
            "timestamp": datetime.now().isoformat(),
        }

    # ─────────────────────────────────────────────────────────────────────────
    # LOGOWANIE OGÓLNE
    # ─────────────────────────────────────────────────────────────────────────

    def log(self, event: GameEvent) -> None:
        """Dodaje zdarzenie do logu."""
        self.events.append(event)

    def log_event(
        self,
        turn: int,
        event_type: EventType,
        actor_id: Optional[str] = None,
        **data: Any,
    ) -> GameEvent:
        """
        Tworzy i loguje zdarzenie.

        Args:
            turn: Numer tury
            event_type: Typ zdarzenia
            actor_id: Kto działał
            **data: Dodatkowe dane

        Returns:
            GameEvent: Utworzone zdarzenie
        """
        event = GameEvent(
            turn=turn,
            event_type=event_type,
            actor_id=actor_id,
            data=dict(data),
        )
        self.log(event)
        return event

    # ─────────────────────────────────────────────────────────────────────────
    # POMOCNICZE METODY LOGOWANIA
    # ─────────────────────────────────────────────────────────────────────────

    def log_level_start(self, turn: int, level: int, board: Dict[str, Any]) -> None:
        """Loguje start poziomu."""
        self.log_event(turn, EventType.LEVEL_START, level=level, **board)

    def log_level_end(self, turn: int, level: int, state: str) -> None:
        """Loguje koniec poziomu."""
        self.log_event(turn, EventType.LEVEL_END, level=level, state=state, turns=turn)

    def log_move(self, turn: int, actor_id: str, from_key: str, to_key: str) -> None:
        """Loguje krok gracza lub wroga."""
        event_type = EventType.PLAYER_MOVE if actor_id == "player" else EventType.ENEMY_MOVE
        self.log_event(turn, event_type, actor_id=actor_id, **{"from": from_key, "to": to_key})

    def log_teleport(self, turn: int, from_key: str, to_key: str, charges_left: int) -> None:
        """Loguje teleport gracza."""
        self.log_event(
            turn,
            EventType.PLAYER_TELEPORT,
            actor_id="player",
            charges_left=charges_left,
            **{"from": from_key, "to": to_key},
        )

    def log_barrier(self, turn: int, cells: List[str]) -> None:
        """Loguje postawienie linii barier."""
        self.log_event(turn, EventType.BARRIER_PLACED, actor_id="player", cells=cells)

    def log_spawn(self, turn: int, enemy_id: str, at_key: str) -> None:
        """Loguje pojawienie się wroga."""
        self.log_event(turn, EventType.ENEMY_SPAWN, actor_id=enemy_id, at=at_key)

    def log_state_change(self, turn: int, from_state: str, to_state: str) -> None:
        """Loguje zmianę stanu gry."""
        self.log_event(turn, EventType.STATE_CHANGE, from_state=from_state, to_state=to_state)

    def log_rejected(self, turn: int, action: str, reason: str) -> None:
        """Loguje odrzuconą akcję gracza."""
        self.log_event(turn, EventType.ACTION_REJECTED, actor_id="player", action=action, reason=reason)

    # ─────────────────────────────────────────────────────────────────────────
    # SERIALIZACJA
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """Cały log jako słownik gotowy do JSON."""
        return {
            "metadata": self.metadata,
            "events": [e.to_dict() for e in self.events],
        }

    def save(self, filepath: str) -> None:
        """
        Zapisuje log do pliku JSON.

        Tworzy brakujące katalogi nadrzędne.
        """
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def to_json(self, indent: Optional[int] = 2) -> str:
        """
        Log jako string JSON.

        Args:
            indent: Wcięcie (None = compact)
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    # ─────────────────────────────────────────────────────────────────────────
    # ZAPYTANIA
    # ─────────────────────────────────────────────────────────────────────────

    def get_events(self) -> List[Dict[str, Any]]:
        """Wszystkie zdarzenia jako słowniki."""
        return [e.to_dict() for e in self.events]

    def get_events_by_type(self, event_type: EventType) -> List[GameEvent]:
        """Zdarzenia danego typu."""
        return [e for e in self.events if e.event_type == event_type]

    def clear(self) -> None:
        """Czyści listę zdarzeń (metadane zostają)."""
        self.events.clear()
