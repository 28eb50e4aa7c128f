"""
Testy API (FastAPI TestClient).
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi.testclient import TestClient

from api.main import app
from api.sessions import SessionStore


SCRIPTED = {"enemy_positions": [[3, -3, 0]]}


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def game_id(client):
    response = client.post("/api/games", json={"seed": 12345, "config": SCRIPTED})
    assert response.status_code == 200
    return response.json()["id"]


# ═══════════════════════════════════════════════════════════════════════════
# TEST: SESJE
# ═══════════════════════════════════════════════════════════════════════════

def test_health(client):
    assert client.get("/api/health").json() == {"status": "healthy"}


def test_create_game(client):
    response = client.post("/api/games", json={"seed": 7})
    data = response.json()

    assert response.status_code == 200
    assert data["seed"] == 7
    assert data["mode"] == "move"
    assert data["board"]["state"] == "in-progress"
    assert data["board"]["level"] == 1
    assert len(data["board"]["enemies"]) == 1
    assert len(data["board"]["cells"]) == 127


def test_create_game_with_bad_config(client):
    response = client.post("/api/games", json={"config": {"exit": [2, -2, 0]}})
    assert response.status_code == 422


@pytest.mark.parametrize("config", [
    {"teleport_radius": "x"},
    {"teleport_radius": -1},
    {"player_start": [1, 2]},
    {"enemy_positions": [[1, "a", -1]]},
])
def test_create_game_with_wrongly_typed_config_is_422(client, config):
    response = client.post("/api/games", json={"config": config})
    assert response.status_code == 422


def test_numeric_string_override_is_coerced(client):
    """Liczba podana jako tekst ("6") jest zamieniana na int przy tworzeniu gry."""
    created = client.post(
        "/api/games", json={"config": {"teleport_radius": "6", "enemy_positions": []}},
    ).json()

    response = client.post(
        f"/api/games/{created['id']}/teleport", json={"target": [0, 3, -3]},
    )

    assert response.status_code == 200
    assert response.json()["applied"] is True


def test_get_and_delete(client, game_id):
    assert client.get(f"/api/games/{game_id}").json()["id"] == game_id
    assert client.delete(f"/api/games/{game_id}").status_code == 200
    assert client.get(f"/api/games/{game_id}").status_code == 404


def test_unknown_game_is_404(client):
    response = client.post("/api/games/nope/move", json={"target": [0, 0, 0]})
    assert response.status_code == 404


def test_session_store_evicts_oldest():
    store = SessionStore(max_sessions=2)
    config = {"enemy_positions": []}
    first = store.create(config, seed=1)
    store.create(config, seed=2)
    store.create(config, seed=3)

    assert len(store) == 2
    assert store.get(first.id) is None


# ═══════════════════════════════════════════════════════════════════════════
# TEST: AKCJE
# ═══════════════════════════════════════════════════════════════════════════

def test_move(client, game_id):
    response = client.post(f"/api/games/{game_id}/move", json={"target": [-2, 5, -3]})
    data = response.json()

    assert data["applied"] is True
    assert data["board"]["player"] == "-2,5,-3"
    assert data["board"]["turn"] == 1


def test_rejected_action_is_not_http_error(client, game_id):
    response = client.post(f"/api/games/{game_id}/teleport", json={"target": [3, -6, 3]})
    assert response.status_code == 200
    assert response.json()["applied"] is False
    assert response.json()["board"]["teleports"] == 1


def test_invalid_cube_is_422(client, game_id):
    response = client.post(f"/api/games/{game_id}/move", json={"target": [1, 1, 1]})
    assert response.status_code == 422


def test_wrong_length_is_422(client, game_id):
    response = client.post(f"/api/games/{game_id}/move", json={"target": [1, -1]})
    assert response.status_code == 422


def test_barrier(client, game_id):
    response = client.post(
        f"/api/games/{game_id}/barrier",
        json={"start": [-3, 0, 3], "end": [-6, 3, 3]},
    )
    data = response.json()
    barriers = [c["key"] for c in data["board"]["cells"] if c["terrain"] == "barrier"]

    assert data["applied"] is True
    assert "-5,2,3" in barriers
    assert len(barriers) == 16


def test_mode_and_select(client, game_id):
    response = client.post(f"/api/games/{game_id}/mode", json={"mode": "teleport"})
    assert response.json()["mode"] == "teleport"

    response = client.post(f"/api/games/{game_id}/select", json={"target": [0, 3, -3]})
    data = response.json()

    assert data["applied"] is True
    assert data["mode"] == "move"
    assert data["board"]["player"] == "0,3,-3"
    assert data["board"]["teleports"] == 0


def test_unknown_mode_is_422(client, game_id):
    response = client.post(f"/api/games/{game_id}/mode", json={"mode": "fly"})
    assert response.status_code == 422


def test_next_level_after_failure(client):
    created = client.post(
        "/api/games", json={"seed": 1, "config": {"enemy_positions": [[-1, 4, -3]]}},
    ).json()
    game_id = created["id"]

    lost = client.post(f"/api/games/{game_id}/move", json={"target": [-2, 5, -3]}).json()
    assert lost["board"]["state"] == "failure"

    data = client.post(f"/api/games/{game_id}/next-level").json()
    assert data["board"]["state"] == "in-progress"
    assert data["board"]["level"] == 1
    assert data["board"]["turn"] == 0


def test_events(client, game_id):
    client.post(f"/api/games/{game_id}/move", json={"target": [-2, 5, -3]})
    data = client.get(f"/api/games/{game_id}/events").json()

    assert data["metadata"]["seed"] == 12345
    types = [e["type"] for e in data["events"]]
    assert "PLAYER_MOVE" in types
    assert "ENEMY_MOVE" in types


def test_board_config(client):
    data = client.get("/api/board-config").json()
    assert data["ring_size"] == 7
    assert data["coordinate_system"] == "cube"
