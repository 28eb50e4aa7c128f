"""
Games router - tworzenie gry i akcje gracza.

Odrzucona akcja (zajęte pole, brak ścieżki, brak ładunków...) NIE jest
błędem HTTP - odpowiedź ma "applied": false i aktualny snapshot.
Błędy HTTP:
    404 - nieznana sesja
    422 - niepoprawne dane wejściowe (pydantic / zła współrzędna)
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Tuple
from pathlib import Path

from spire.core.config_loader import ConfigLoader
from spire.core.hex_coord import HexCoord
from spire.game import AbilityMode, BoardSetupError
from api.sessions import GameSession, SessionStore


router = APIRouter()

DATA_PATH = Path(__file__).parent.parent.parent / "data"
_loader = ConfigLoader(str(DATA_PATH))
_store = SessionStore(_loader.get_defaults().get("api", {}).get("max_sessions", 256))


# ═══════════════════════════════════════════════════════════════════════════
# REQUEST/RESPONSE MODELS
# ═══════════════════════════════════════════════════════════════════════════

class GameConfigOverrides(BaseModel):
    """
    Nadpisania defaults.yaml (sekcja `game`).

    Pominięte pola zostają z defaults. Współrzędne jako [q, r, s].
    """
    ring_size: Optional[int] = Field(None, ge=1)
    mountain_radius: Optional[int] = Field(None, ge=0)
    player_start: Optional[Tuple[int, int, int]] = None
    exit: Optional[Tuple[int, int, int]] = None
    teleport_charges: Optional[int] = Field(None, ge=0)
    teleport_radius: Optional[int] = Field(None, ge=0)
    enemies_per_level: Optional[int] = Field(None, ge=0)
    enemy_positions: Optional[List[Tuple[int, int, int]]] = None
    extra_barriers: Optional[List[Tuple[int, int, int]]] = None


class NewGameRequest(BaseModel):
    """Request utworzenia gry."""
    seed: Optional[int] = None
    config: GameConfigOverrides = GameConfigOverrides()


class TargetRequest(BaseModel):
    """Pojedyncze pole docelowe [q, r, s]."""
    target: List[int] = Field(min_length=3, max_length=3)


class BarrierRequest(BaseModel):
    """Linia barier od start do end."""
    start: List[int] = Field(min_length=3, max_length=3)
    end: List[int] = Field(min_length=3, max_length=3)


class ModeRequest(BaseModel):
    """Przełączenie trybu zdolności."""
    mode: AbilityMode


# ═══════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════

def _session(game_id: str) -> GameSession:
    session = _store.get(game_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Game '{game_id}' not found")
    return session


def _coord(values: List[int]) -> HexCoord:
    try:
        return HexCoord(*values)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _response(session: GameSession, applied: Optional[bool] = None) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        "id": session.id,
        "mode": session.controller.mode.value,
        "board": session.game.snapshot().to_dict(),
    }
    if applied is not None:
        result["applied"] = applied
    return result


# ═══════════════════════════════════════════════════════════════════════════
# ENDPOINTS
# ═══════════════════════════════════════════════════════════════════════════

@router.post("/games")
async def create_game(request: NewGameRequest) -> Dict[str, Any]:
    """
    Tworzy nową grę (poziom 1).

    Args:
        request.seed: Ziarno losowości (None = losowe)
        request.config: Nadpisania konfiguracji z defaults.yaml
    """
    config_data = _loader.load_game_config(request.config.model_dump(exclude_none=True))
    try:
        session = _store.create(config_data, seed=request.seed)
    except (BoardSetupError, TypeError, ValueError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    result = _response(session)
    result["seed"] = session.game.rng.seed
    return result


@router.get("/games/{game_id}")
async def get_game(game_id: str) -> Dict[str, Any]:
    """Aktualny snapshot planszy."""
    return _response(_session(game_id))


@router.delete("/games/{game_id}")
async def delete_game(game_id: str) -> Dict[str, Any]:
    if not _store.delete(game_id):
        raise HTTPException(status_code=404, detail=f"Game '{game_id}' not found")
    return {"deleted": game_id}


@router.post("/games/{game_id}/move")
async def move(game_id: str, request: TargetRequest) -> Dict[str, Any]:
    session = _session(game_id)
    applied = session.game.move_player_toward(_coord(request.target))
    return _response(session, applied)


@router.post("/games/{game_id}/teleport")
async def teleport(game_id: str, request: TargetRequest) -> Dict[str, Any]:
    session = _session(game_id)
    applied = session.game.teleport_to(_coord(request.target))
    return _response(session, applied)


@router.post("/games/{game_id}/barrier")
async def barrier(game_id: str, request: BarrierRequest) -> Dict[str, Any]:
    session = _session(game_id)
    applied = session.game.place_barrier(_coord(request.start), _coord(request.end))
    return _response(session, applied)


@router.post("/games/{game_id}/mode")
async def toggle_mode(game_id: str, request: ModeRequest) -> Dict[str, Any]:
    """Przełącza tryb kliknięcia (ruch / teleport / bariera)."""
    session = _session(game_id)
    session.controller.toggle_ability_mode(request.mode)
    return _response(session)


@router.post("/games/{game_id}/select")
async def select(game_id: str, request: TargetRequest) -> Dict[str, Any]:
    """Kliknięcie w pole - interpretowane wg aktualnego trybu."""
    session = _session(game_id)
    applied = session.controller.select(_coord(request.target))
    return _response(session, applied)


@router.post("/games/{game_id}/next-level")
async def next_level(game_id: str) -> Dict[str, Any]:
    session = _session(game_id)
    session.game.next_level()
    session.controller.reset()
    return _response(session)


@router.get("/games/{game_id}/events")
async def get_events(game_id: str) -> Dict[str, Any]:
    """Log zdarzeń gry."""
    session = _session(game_id)
    return session.game.logger.to_dict()


@router.get("/board-config")
async def get_board_config() -> Dict[str, Any]:
    """Konfiguracja planszy z defaults.yaml."""
    return {
        **_loader.get_game_defaults(),
        "coordinate_system": "cube",
        "orientation": "pointy-top",
    }
