"""
Wróg na planszy.

Wróg to tylko tożsamość + współrzędna pola, na którym stoi.
Pozycję zmienia wyłącznie silnik gry (Game.end_turn).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

from ..core.hex_coord import HexCoord


@dataclass
class Enemy:
    """
    Attributes:
        id (str): Identyfikator (unikalny w obrębie poziomu)
        position (HexCoord): Pole, na którym stoi
    """
    id: str
    position: HexCoord

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "position": self.position.key}
