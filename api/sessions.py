"""
Magazyn sesji gry w pamięci.

Każda sesja to jedna Game + jej AbilityController, własność jednego
klienta. Brak współdzielenia między sesjami. Przy przekroczeniu
limitu najstarsza sesja jest usuwana.
"""

from __future__ import annotations
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Optional
import uuid

from spire.game import AbilityController, Game, GameConfig


@dataclass
class GameSession:
    id: str
    game: Game
    controller: AbilityController


class SessionStore:
    """
    Attributes:
        max_sessions (int): Limit sesji trzymanych w pamięci
        _sessions (OrderedDict[str, GameSession]): Sesje od najstarszej
    """

    def __init__(self, max_sessions: int = 256):
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()

    def create(self, config_data: Dict[str, Any], seed: Optional[int] = None) -> GameSession:
        """
        Tworzy nową grę.

        Args:
            config_data: Konfiguracja gry (ConfigLoader.load_game_config)
            seed: Ziarno losowości (None = losowe)
        """
        game = Game(GameConfig.from_dict(config_data), seed=seed)
        session = GameSession(
            id=uuid.uuid4().hex,
            game=game,
            controller=AbilityController(game),
        )
        self._sessions[session.id] = session

        while len(self._sessions) > self.max_sessions:
            self._sessions.popitem(last=False)

        return session

    def get(self, session_id: str) -> Optional[GameSession]:
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)
