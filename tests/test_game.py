"""
Testy dla silnika gry (Game).

Testuje:
- Setup planszy (góra, gracz, wyjście, losowanie wrogów)
- Akcje gracza: ruch, teleport, bariera
- Rozstrzyganie tury: SUCCESS, FAILURE, STUCK
- Przejście poziomu
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from spire.core.cell import Terrain
from spire.core.hex_coord import HexCoord, ORIGIN
from spire.events.event_logger import EventType
from spire.game import BoardSetupError, Game, GameConfig, GameState


PLAYER = HexCoord(-3, 6, -3)
EXIT = HexCoord(3, -6, 3)
FAR = (3, -3, 0)


# ═══════════════════════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════════════════════

def make_game(**overrides) -> Game:
    """Gra z domyślną planszą i nadpisaną konfiguracją."""
    return Game(GameConfig(**overrides), seed=12345)


@pytest.fixture
def game():
    """Poziom 1 z jednym, odległym wrogiem."""
    return make_game(enemy_positions=[FAR])


@pytest.fixture
def corridor_game():
    """
    Mała plansza: zewnętrzny pierścień to jedyny korytarz.

    Wschodnia połowa pierścienia zablokowana z góry,
    zachodnia zostaje jako jedyna droga do wyjścia.
    """
    return make_game(
        ring_size=4,
        player_start=(0, 3, -3),
        exit=(0, -3, 3),
        teleport_charges=0,
        enemy_positions=[],
        extra_barriers=[(3, -1, -2)],
    )


def pass_turn(game: Game, barrier_at) -> None:
    """Zużywa turę stawiając pojedynczą barierę daleko od akcji."""
    coord = HexCoord(*barrier_at)
    assert game.place_barrier(coord, coord)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: SETUP
# ═══════════════════════════════════════════════════════════════════════════

def test_fresh_board_layout(game):
    assert len(game.grid) == 127
    assert game.player == PLAYER
    assert game.exit == EXIT
    assert game.state == GameState.IN_PROGRESS
    assert game.level == 1
    assert game.teleports == 1
    assert game.turn == 0


def test_mountain_ring_is_barrier(game):
    for coord in HexCoord.ring(ORIGIN, 2):
        assert game.grid.get(coord).terrain == Terrain.BARRIER
    assert len(game.grid.cells_with(Terrain.BARRIER)) == 12


def test_random_enemy_placement_respects_rules():
    """Wrogowie: różne, wolne pola, nie wyjście, nie obok gracza."""
    game = Game(GameConfig(enemies_per_level=10), seed=99)

    positions = [e.position for e in game.enemies]
    assert len(positions) == 10
    assert len(set(positions)) == 10
    for coord in positions:
        cell = game.grid.get(coord)
        assert cell.is_pathable
        assert coord != game.exit
        assert coord.distance(game.player) > 1


def test_enemy_count_follows_level():
    game = Game(GameConfig(), seed=1, level=3)
    assert len(game.enemies) == 3


def test_same_seed_same_board():
    a = Game(GameConfig(enemies_per_level=4), seed=2024)
    b = Game(GameConfig(enemies_per_level=4), seed=2024)
    assert [e.position for e in a.enemies] == [e.position for e in b.enemies]


def test_fewer_enemies_when_candidates_run_out():
    """Gdy brakuje pól, stawiamy mniej wrogów zamiast błędu."""
    game = Game(GameConfig(
        ring_size=4,
        player_start=(0, 3, -3),
        exit=(0, -3, 3),
        enemies_per_level=100,
    ), seed=5)
    # 18 pól pierścienia 3 - gracz - wyjście - 2 sąsiadów gracza + 7 pól w środku
    assert len(game.enemies) == 21


def test_missing_exit_is_fatal():
    with pytest.raises(BoardSetupError):
        make_game(exit=(7, -7, 0))


def test_exit_on_mountain_is_fatal():
    with pytest.raises(BoardSetupError):
        make_game(exit=(2, -2, 0))


def test_scripted_enemy_next_to_player_is_fatal():
    with pytest.raises(BoardSetupError):
        make_game(enemy_positions=[(-2, 5, -3)])


def test_config_from_dict_converts_lists():
    config = GameConfig.from_dict({
        "ring_size": 5,
        "player_start": [-2, 4, -2],
        "exit": [2, -4, 2],
        "enemy_positions": [[1, -4, 3]],
        "unknown_key": "ignored",
    })
    assert config.ring_size == 5
    assert config.player_start == (-2, 4, -2)
    assert config.enemy_positions == [(1, -4, 3)]
    assert config.num_enemies(level=7) == 1


def test_config_rejects_wrongly_typed_numbers():
    """Liczba jako tekst to błąd od razu, nie przy pierwszym teleporcie."""
    with pytest.raises(TypeError):
        GameConfig(teleport_radius="6")
    with pytest.raises(TypeError):
        GameConfig.from_dict({"ring_size": 7.5})
    with pytest.raises(TypeError):
        GameConfig(enemies_per_level=True)
    with pytest.raises(TypeError):
        GameConfig(seed="abc")


# ═══════════════════════════════════════════════════════════════════════════
# TEST: RUCH
# ═══════════════════════════════════════════════════════════════════════════

def test_move_one_step_keeps_game_in_progress(game):
    """Krok na wolne sąsiednie pole, wróg daleko - gra trwa."""
    target = HexCoord(-2, 5, -3)

    assert game.move_player_toward(target)

    assert game.player == target
    assert game.state == GameState.IN_PROGRESS
    assert game.turn == 1
    # wróg zrobił jeden krok w stronę gracza
    assert game.enemies[0].position.distance(HexCoord(*FAR)) == 1


def test_move_toward_far_target_takes_single_step(game):
    assert game.move_player_toward(EXIT)
    assert game.player.distance(PLAYER) == 1
    assert game.player.distance(EXIT) == 11


def test_move_off_board_is_noop(game):
    assert not game.move_player_toward(HexCoord(10, -10, 0))
    assert game.player == PLAYER
    assert game.turn == 0


def test_move_to_own_cell_is_noop(game):
    assert not game.move_player_toward(PLAYER)
    assert game.turn == 0


def test_move_into_enemy_is_noop():
    game = make_game(enemy_positions=[(0, 3, -3)])
    pass_turn(game, FAR)
    pass_turn(game, (3, -4, 1))
    enemy_cell = game.enemies[0].position
    assert enemy_cell == HexCoord(-2, 5, -3)

    assert not game.move_player_toward(enemy_cell)
    assert game.player == PLAYER
    assert game.state == GameState.IN_PROGRESS


# ═══════════════════════════════════════════════════════════════════════════
# TEST: TELEPORT
# ═══════════════════════════════════════════════════════════════════════════

def test_teleport_consumes_charge(game):
    target = HexCoord(0, 3, -3)

    assert game.teleport_to(target)

    assert game.player == target
    assert game.teleports == 0
    assert game.turn == 1


def test_teleport_without_charges_is_noop(game):
    assert game.teleport_to(HexCoord(0, 3, -3))
    assert not game.teleport_to(HexCoord(0, 4, -4))
    assert game.player == HexCoord(0, 3, -3)


def test_teleport_out_of_range_is_noop(game):
    assert not game.teleport_to(HexCoord(3, -3, 0))
    assert game.teleports == 1


def test_teleport_ignores_obstacles():
    """Teleport przeskakuje barierę, której ruch nie przejdzie."""
    game = make_game(enemy_positions=[FAR])
    target = HexCoord(0, 0, 0)  # środek góry - otoczony barierami
    assert PLAYER.distance(target) == 6
    assert game.teleport_to(target)
    assert game.player == target
    # ostatni ładunek zużyty, z wnętrza góry nie ma wyjścia
    assert game.state == GameState.STUCK


def test_teleport_onto_enemy_is_noop():
    game = make_game(enemy_positions=[(0, 3, -3)])
    assert not game.teleport_to(HexCoord(0, 3, -3))
    assert game.teleports == 1


def test_teleport_targets(game):
    targets = game.teleport_targets()
    assert PLAYER not in targets
    assert all(PLAYER.distance(t) <= 6 for t in targets)
    assert all(game.grid.get(t).is_pathable for t in targets)


def test_teleport_onto_exit_wins():
    game = make_game(player_start=(0, -3, 3), enemy_positions=[])
    assert game.teleport_to(EXIT)
    assert game.state == GameState.SUCCESS


# ═══════════════════════════════════════════════════════════════════════════
# TEST: BARIERY
# ═══════════════════════════════════════════════════════════════════════════

def test_barrier_line(game):
    start = HexCoord(-3, 0, 3)
    end = HexCoord(-6, 3, 3)

    assert game.place_barrier(start, end)

    for q in range(-6, -2):
        assert game.grid.get(HexCoord(q, -q - 3, 3)).is_barrier
    assert game.turn == 1


def test_barrier_does_not_cross_mountain(game):
    """Linia przez górę kończy się na niej - środek zostaje otwarty."""
    assert game.place_barrier(HexCoord(-3, 3, 0), HexCoord(3, -3, 0))

    assert game.grid.get(HexCoord(-3, 3, 0)).is_barrier
    assert game.grid.get(HexCoord(-1, 1, 0)).is_pathable
    assert game.grid.get(HexCoord(3, -3, 0)).is_pathable


def test_barrier_stops_before_enemy():
    game = make_game(enemy_positions=[(-3, 2, 1)])
    assert game.place_barrier(HexCoord(-3, 0, 3), HexCoord(-3, 4, -1))

    assert game.grid.get(HexCoord(-3, 0, 3)).is_barrier
    assert game.grid.get(HexCoord(-3, 1, 2)).is_barrier
    assert not game.grid.get(HexCoord(-3, 2, 1)).is_barrier
    assert not game.grid.get(HexCoord(-3, 4, -1)).is_barrier


def test_barrier_from_player_cell_is_noop(game):
    assert not game.place_barrier(PLAYER, HexCoord(0, 3, -3))
    assert game.turn == 0


def test_barrier_on_exit_is_noop(game):
    assert not game.place_barrier(EXIT, EXIT)
    assert game.grid.get(EXIT).is_pathable


def test_barrier_from_existing_barrier_is_noop(game):
    mountain = HexCoord.ring(ORIGIN, 2)[0]
    assert not game.place_barrier(mountain, HexCoord(-6, 0, 6))


# ═══════════════════════════════════════════════════════════════════════════
# TEST: ROZSTRZYGANIE TURY
# ═══════════════════════════════════════════════════════════════════════════

def test_reaching_exit_is_success_and_next_level_adds_enemy():
    game = Game(GameConfig(player_start=(2, -5, 3)), seed=7)
    assert len(game.enemies) == 1

    assert game.move_player_toward(EXIT)
    assert game.state == GameState.SUCCESS

    game.next_level()

    assert game.level == 2
    assert game.state == GameState.IN_PROGRESS
    assert len(game.enemies) == 2
    assert game.player == HexCoord(2, -5, 3)


def test_enemy_reaching_player_is_failure_and_halts_others():
    """Wróg wchodzi na gracza -> FAILURE, kolejni wrogowie stoją."""
    game = make_game(enemy_positions=[(-1, 4, -3), FAR])

    assert game.move_player_toward(HexCoord(-2, 5, -3))

    assert game.state == GameState.FAILURE
    assert game.enemies[0].position == game.player
    assert game.enemies[1].position == HexCoord(*FAR)


def test_enemies_move_in_list_order_and_do_not_stack():
    """Pierwszy wróg ma drogę zablokowaną przez drugiego - stoi."""
    game = make_game(enemy_positions=[(0, 3, -3), (-1, 4, -3)])

    pass_turn(game, FAR)

    assert game.enemies[0].position == HexCoord(0, 3, -3)
    assert game.enemies[1].position == HexCoord(-2, 5, -3)
    assert game.state == GameState.IN_PROGRESS


def test_barrier_across_only_corridor_is_stuck(corridor_game):
    game = corridor_game
    assert game.path_to_exit() is not None

    assert game.place_barrier(HexCoord(-3, 1, 2), HexCoord(-3, 1, 2))

    assert game.path_to_exit() is None
    assert game.state == GameState.STUCK


def test_blocked_corridor_with_teleport_is_not_stuck():
    game = make_game(
        ring_size=4,
        player_start=(0, 3, -3),
        exit=(0, -3, 3),
        teleport_charges=1,
        enemy_positions=[],
        extra_barriers=[(3, -1, -2)],
    )
    assert game.place_barrier(HexCoord(-3, 1, 2), HexCoord(-3, 1, 2))
    assert game.state == GameState.IN_PROGRESS


def test_actions_rejected_after_game_over(corridor_game):
    game = corridor_game
    game.place_barrier(HexCoord(-3, 1, 2), HexCoord(-3, 1, 2))
    assert game.state == GameState.STUCK
    turn = game.turn

    assert not game.move_player_toward(HexCoord(-1, 3, -2))
    assert not game.place_barrier(HexCoord(-2, 3, -1), HexCoord(-2, 3, -1))
    assert game.end_turn() == GameState.STUCK
    assert game.turn == turn
    assert game.player == HexCoord(0, 3, -3)


def test_next_level_after_failure_resets_to_level_one():
    game = Game(GameConfig(enemy_positions=[(-1, 4, -3)]), seed=3, level=4)
    game.move_player_toward(HexCoord(-2, 5, -3))
    assert game.state == GameState.FAILURE

    game.next_level()

    assert game.level == 1
    assert game.teleports == 1
    assert game.state == GameState.IN_PROGRESS
    assert game.player == PLAYER
    assert game.turn == 0


def test_next_level_restores_teleports(game):
    game.teleport_to(HexCoord(0, 3, -3))
    assert game.teleports == 0
    game.next_level()
    assert game.teleports == 1


# ═══════════════════════════════════════════════════════════════════════════
# TEST: LOG ZDARZEŃ
# ═══════════════════════════════════════════════════════════════════════════

def test_events_logged_for_turn(game):
    game.move_player_toward(HexCoord(-2, 5, -3))

    logger = game.logger
    assert len(logger.get_events_by_type(EventType.LEVEL_START)) == 1
    assert len(logger.get_events_by_type(EventType.ENEMY_SPAWN)) == 1
    moves = logger.get_events_by_type(EventType.PLAYER_MOVE)
    assert moves[0].data == {"from": "-3,6,-3", "to": "-2,5,-3"}
    assert len(logger.get_events_by_type(EventType.ENEMY_MOVE)) == 1


def test_rejected_action_is_logged(game):
    game.teleport_to(EXIT)
    rejected = game.logger.get_events_by_type(EventType.ACTION_REJECTED)
    assert rejected[-1].data == {"action": "teleport", "reason": "out_of_range"}


def test_state_change_logged():
    game = make_game(enemy_positions=[(-1, 4, -3)])
    game.move_player_toward(HexCoord(-2, 5, -3))
    changes = game.logger.get_events_by_type(EventType.STATE_CHANGE)
    assert changes[-1].data == {"from_state": "in-progress", "to_state": "failure"}
    assert game.logger.get_events_by_type(EventType.LEVEL_END)


def test_next_level_starts_fresh_event_log():
    """Log zdarzeń obejmuje tylko bieżący poziom - sesja nie rośnie bez końca."""
    game = make_game(enemy_positions=[(-1, 4, -3)])
    game.move_player_toward(HexCoord(-2, 5, -3))
    assert game.logger.get_events_by_type(EventType.LEVEL_END)

    game.next_level()

    assert len(game.logger.get_events_by_type(EventType.LEVEL_START)) == 1
    assert not game.logger.get_events_by_type(EventType.LEVEL_END)
    assert not game.logger.get_events_by_type(EventType.PLAYER_MOVE)
    assert game.logger.metadata["seed"] == 12345


def test_repeated_levels_keep_log_bounded():
    game = make_game(enemy_positions=[FAR])
    for _ in range(20):
        game.move_player_toward(HexCoord(-2, 5, -3))
        game.next_level()
    # LEVEL_START + ENEMY_SPAWN
    assert len(game.logger.events) == 2
