"""
Silnik gry: plansza, akcje gracza i rozstrzyganie tury.

Game jest korzeniem agregatu - posiada siatkę, pozycję gracza,
wyjście, wrogów, ładunki teleportu, numer poziomu i stan.
Cała mutacja idzie przez metody akcji poniżej, nigdy przez
bezpośrednie grzebanie w Cell.terrain czy Enemy.position.

SETUP POZIOMU (setup_board):
═══════════════════════════════════════════════════════════════════

    1. Siatka = dysk pierścieni 0..ring_size-1 wokół (0, 0, 0)
    2. Pierścień o promieniu mountain_radius -> BARRIER ("góra")
    3. Gracz i wyjście na przeciwnych krańcach zewnętrznego pierścienia
    4. Wrogowie (enemies_per_level * poziom) losowani bez powtórzeń
       spośród pól: wolnych, nie-wyjścia, nie-sąsiadujących z graczem
       (jeśli kandydatów brakuje - stawiamy mniej)

AKCJE GRACZA (każda zwraca True jeśli została wykonana):
═══════════════════════════════════════════════════════════════════

    move_player_toward(target)
    ─────────────────────────────────────────────────────────────
    Ścieżka gracz -> target. Jeśli istnieje i pierwszy krok jest
    wolny, gracz robi JEDEN krok. Potem end_turn().

    teleport_to(target)
    ─────────────────────────────────────────────────────────────
    Zużywa ładunek. Target w promieniu teleport_radius i wolny.
    Ignoruje ścieżki i przeszkody. Potem end_turn().

    place_barrier(start, end)
    ─────────────────────────────────────────────────────────────
    Linia start -> end (Cell.line_to, zatrzymuje się na barierze),
    ucięta przed pierwszym zajętym polem lub wyjściem. Wszystkie
    pola linii -> BARRIER. Potem end_turn().

ROZSTRZYGANIE TURY (end_turn):
═══════════════════════════════════════════════════════════════════

    1. Gracz na wyjściu -> SUCCESS, koniec
    2. Każdy wróg (w kolejności listy):
         - ścieżka wróg -> gracz
         - pierwszy krok to gracz albo wolne pole -> krok
         - wróg na polu gracza -> FAILURE, pozostali już się nie ruszają
    3. Brak teleportów i brak ścieżki gracz -> wyjście -> STUCK
    4. W przeciwnym razie IN_PROGRESS

Przykład użycia:
    >>> game = Game(seed=12345)
    >>> game.move_player_toward(HexCoord(-2, 5, -3))
    True
    >>> game.state
    <GameState.IN_PROGRESS: 'in-progress'>
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple

from ..core.cell import Cell, Terrain
from ..core.hex_coord import HexCoord, ORIGIN
from ..core.hex_grid import HexGrid
from ..core.pathfinding import find_path
from ..core.rng import GameRNG
from ..events.event_logger import EventLogger
from .enemy import Enemy
from .snapshot import BoardSnapshot
from .state import GameState


Cube = Tuple[int, int, int]

INT_FIELDS = (
    "ring_size", "mountain_radius", "teleport_charges",
    "teleport_radius", "enemies_per_level",
)


class BoardSetupError(RuntimeError):
    """
    Naruszenie niezmiennika planszy przy budowie poziomu.

    To błąd programisty / konfiguracji (np. wyjście poza siatką),
    a nie sytuacja, którą gracz może naprawić.
    """


@dataclass
class GameConfig:
    """
    Konfiguracja gry.

    Attributes:
        ring_size (int): Plansza to pierścienie 0..ring_size-1
        mountain_radius (int): Promień pierścienia barier wokół środka
        player_start (Cube): Start gracza
        exit (Cube): Pole wyjścia
        teleport_charges (int): Ładunki teleportu na poziom
        teleport_radius (int): Maksymalny zasięg teleportu
        enemies_per_level (int): Wrogów na poziom (x numer poziomu)
        seed (Optional[int]): Ziarno losowości (None = losowe)
        enemy_positions (Optional[List[Cube]]): Stały układ wrogów
            zamiast losowania (plansze scenariuszowe)
        extra_barriers (List[Cube]): Dodatkowe bariery przy setupie

    Raises:
        TypeError: Gdy pole liczbowe nie jest int (np. "6" z ręcznie
            pisanego YAML albo JSON)
    """
    ring_size: int = 7
    mountain_radius: int = 2
    player_start: Cube = (-3, 6, -3)
    exit: Cube = (3, -6, 3)
    teleport_charges: int = 1
    teleport_radius: int = 6
    enemies_per_level: int = 1
    seed: Optional[int] = None
    enemy_positions: Optional[List[Cube]] = None
    extra_barriers: List[Cube] = field(default_factory=list)

    def __post_init__(self) -> None:
        for name in INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"GameConfig.{name} must be an int, got {value!r}")
        if self.seed is not None and not isinstance(self.seed, int):
            raise TypeError(f"GameConfig.seed must be an int or None, got {self.seed!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameConfig:
        """
        Tworzy konfigurację ze słownika (np. z ConfigLoader).

        Nieznane klucze są ignorowane. Współrzędne mogą być listami.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {k: v for k, v in data.items() if k in known}

        for key in ("player_start", "exit"):
            if key in kwargs:
                kwargs[key] = tuple(kwargs[key])
        for key in ("enemy_positions", "extra_barriers"):
            if kwargs.get(key) is not None:
                kwargs[key] = [tuple(c) for c in kwargs[key]]

        return cls(**kwargs)

    def num_enemies(self, level: int) -> int:
        """Liczba wrogów dla poziomu."""
        if self.enemy_positions is not None:
            return len(self.enemy_positions)
        return self.enemies_per_level * level


class Game:
    """
    Stan jednej gry i silnik tur.

    Attributes:
        config (GameConfig): Konfiguracja
        rng (GameRNG): Generator losowości (rozmieszczenie wrogów)
        logger (EventLogger): Log zdarzeń
        level (int): Aktualny poziom (od 1)
        teleports (int): Pozostałe ładunki teleportu
        state (GameState): Stan poziomu
        turn (int): Numer tury w obrębie poziomu
        grid (HexGrid): Siatka poziomu
        player (HexCoord): Pole gracza
        exit (HexCoord): Pole wyjścia
        enemies (List[Enemy]): Wrogowie w stałej kolejności ruchu
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        level: int = 1,
    ):
        """
        Args:
            config: Konfiguracja (domyślne wartości jeśli None)
            seed: Ziarno - nadpisuje config.seed
            level: Poziom startowy
        """
        self.config = config or GameConfig()
        self.rng = GameRNG(seed if seed is not None else self.config.seed)
        self.logger = EventLogger(seed=self.rng.seed, ring_size=self.config.ring_size)

        self.level = level
        self.teleports = self.config.teleport_charges
        self.state = GameState.IN_PROGRESS
        self.turn = 0

        self.grid = HexGrid()
        self.player = ORIGIN
        self.exit = ORIGIN
        self.enemies: List[Enemy] = []

        self.setup_board()

    # ─────────────────────────────────────────────────────────────────────────
    # SETUP
    # ─────────────────────────────────────────────────────────────────────────

    def setup_board(self) -> None:
        """
        Buduje planszę bieżącego poziomu od zera.

        Raises:
            BoardSetupError: Gdy konfiguracja łamie niezmienniki planszy
        """
        self.turn = 0
        self.grid = HexGrid.from_coords(self.ring_hexes())

        for coord in HexCoord.ring(ORIGIN, self.config.mountain_radius):
            self._set_barrier(coord)
        for cube in self.config.extra_barriers:
            self._set_barrier(HexCoord(*cube))

        self.player = self._require_open(HexCoord(*self.config.player_start), "player start")
        self.exit = self._require_open(HexCoord(*self.config.exit), "exit")
        if self.player == self.exit:
            raise BoardSetupError(f"Player start and exit are the same cell {self.exit}")

        self.enemies = []
        for i, coord in enumerate(self._pick_enemy_positions()):
            self.enemies.append(Enemy(id=f"enemy_{i}", position=coord))

        self.logger.log_level_start(self.turn, self.level, {
            "player": self.player.key,
            "exit": self.exit.key,
            "enemies": [e.position.key for e in self.enemies],
            "barriers": [c.coord.key for c in self.grid.cells_with(Terrain.BARRIER)],
        })
        for enemy in self.enemies:
            self.logger.log_spawn(self.turn, enemy.id, enemy.position.key)

    def _set_barrier(self, coord: HexCoord) -> None:
        cell = self.grid.get(coord)
        if cell is not None:
            cell.terrain = Terrain.BARRIER

    def _require_open(self, coord: HexCoord, what: str) -> HexCoord:
        cell = self.grid.get(coord)
        if cell is None:
            raise BoardSetupError(f"Grid is missing the {what} cell {coord}")
        if not cell.is_pathable:
            raise BoardSetupError(f"The {what} cell {coord} is not open")
        return coord

    def _is_spawn_candidate(self, cell: Cell) -> bool:
        return (
            cell.is_empty(self)
            and cell.coord != self.exit
            and cell.coord.distance(self.player) > 1
        )

    def _pick_enemy_positions(self) -> List[HexCoord]:
        """
        Pozycje wrogów dla nowego poziomu.

        Losowanie to tasowanie + wzięcie prefiksu, przez GameRNG,
        więc ten sam seed daje ten sam układ.
        """
        if self.config.enemy_positions is not None:
            positions = [HexCoord(*c) for c in self.config.enemy_positions]
            for coord in positions:
                cell = self.grid.get(coord)
                if cell is None or not self._is_spawn_candidate(cell):
                    raise BoardSetupError(f"Enemy cannot start at {coord}")
            if len(set(positions)) != len(positions):
                raise BoardSetupError("Two enemies share a starting cell")
            return positions

        candidates = [cell.coord for cell in self.cells() if self._is_spawn_candidate(cell)]
        return self.rng.shuffle_take(candidates, self.config.num_enemies(self.level))

    # ─────────────────────────────────────────────────────────────────────────
    # ZAPYTANIA
    # ─────────────────────────────────────────────────────────────────────────

    def ring_hexes(self) -> List[HexCoord]:
        """Współrzędne planszy w stałej kolejności (pierścień po pierścieniu)."""
        return HexCoord.disk(ORIGIN, 0, self.config.ring_size)

    def cells(self) -> List[Cell]:
        """Pola planszy w kolejności ring_hexes()."""
        result = []
        for coord in self.ring_hexes():
            cell = self.grid.get(coord)
            if cell is not None:
                result.append(cell)
        return result

    def cell_at(self, coord: HexCoord) -> Optional[Cell]:
        return self.grid.get(coord)

    def enemy_at(self, coord: HexCoord) -> Optional[Enemy]:
        for enemy in self.enemies:
            if enemy.position == coord:
                return enemy
        return None

    def is_occupied(self, coord: HexCoord) -> bool:
        """Czy na polu stoi gracz albo wróg."""
        return coord == self.player or self.enemy_at(coord) is not None

    def is_empty(self, coord: HexCoord) -> bool:
        cell = self.grid.get(coord)
        return cell is not None and cell.is_empty(self)

    def path_to_exit(self) -> Optional[List[HexCoord]]:
        return find_path(self.grid, self.player, self.exit)

    def teleport_targets(self) -> List[HexCoord]:
        """Pola, na które gracz może się teraz teleportować."""
        if self.teleports <= 0 or self.state.is_terminal():
            return []
        player_cell = self.grid.get(self.player)
        return [
            cell.coord
            for cell in player_cell.circle(self.grid, self.config.teleport_radius)
            if cell.is_empty(self)
        ]

    def barrier_line(self, start: HexCoord, end: HexCoord) -> List[HexCoord]:
        """
        Podgląd linii barier (to, co postawiłoby place_barrier).

        Linia kończy się na pierwszej barierze (Cell.line_to) i jest
        ucinana przed pierwszym polem z graczem, wrogiem lub wyjściem.
        """
        start_cell = self.grid.get(start)
        end_cell = self.grid.get(end)
        if start_cell is None or end_cell is None:
            return []

        line = []
        for cell in start_cell.line_to(self.grid, end_cell):
            if self.is_occupied(cell.coord) or cell.coord == self.exit:
                break
            line.append(cell.coord)
        return line

    def snapshot(self) -> BoardSnapshot:
        """Niemutowalny widok planszy dla warstwy renderującej."""
        return BoardSnapshot.from_game(self)

    # ─────────────────────────────────────────────────────────────────────────
    # AKCJE GRACZA
    # ─────────────────────────────────────────────────────────────────────────

    def move_player_toward(self, target: HexCoord) -> bool:
        """
        Jeden krok gracza w stronę target.

        Returns:
            bool: True jeśli gracz się ruszył (i tura została rozstrzygnięta)
        """
        if not self._accepts_actions("move"):
            return False
        if target not in self.grid:
            return self._reject("move", "off_board")

        path = find_path(self.grid, self.player, target)
        if not path:
            return self._reject("move", "no_path")

        step = path[0]
        if not self.is_empty(step):
            return self._reject("move", "occupied")

        self.turn += 1
        self.logger.log_move(self.turn, "player", self.player.key, step.key)
        self.player = step
        self.end_turn()
        return True

    def teleport_to(self, target: HexCoord) -> bool:
        """
        Teleport gracza na wolne pole w zasięgu.

        Returns:
            bool: True jeśli teleport się odbył
        """
        if not self._accepts_actions("teleport"):
            return False
        if self.teleports <= 0:
            return self._reject("teleport", "no_charges")
        if target not in self.grid:
            return self._reject("teleport", "off_board")
        if self.player.distance(target) > self.config.teleport_radius:
            return self._reject("teleport", "out_of_range")
        if not self.is_empty(target):
            return self._reject("teleport", "occupied")

        self.turn += 1
        self.teleports -= 1
        self.logger.log_teleport(self.turn, self.player.key, target.key, self.teleports)
        self.player = target
        self.end_turn()
        return True

    def place_barrier(self, start: HexCoord, end: HexCoord) -> bool:
        """
        Stawia linię barier od start do end.

        Returns:
            bool: True jeśli postawiono co najmniej jedną barierę
        """
        if not self._accepts_actions("barrier"):
            return False
        if start not in self.grid or end not in self.grid:
            return self._reject("barrier", "off_board")

        line = self.barrier_line(start, end)
        if not line:
            return self._reject("barrier", "blocked")

        self.turn += 1
        for coord in line:
            self._set_barrier(coord)
        self.logger.log_barrier(self.turn, [c.key for c in line])
        self.end_turn()
        return True

    def _accepts_actions(self, action: str) -> bool:
        if self.state.is_terminal():
            self._reject(action, f"game_{self.state.value}")
            return False
        return True

    def _reject(self, action: str, reason: str) -> bool:
        self.logger.log_rejected(self.turn, action, reason)
        return False

    # ─────────────────────────────────────────────────────────────────────────
    # ROZSTRZYGANIE TURY
    # ─────────────────────────────────────────────────────────────────────────

    def end_turn(self) -> GameState:
        """
        Rozstrzyga turę po akcji gracza.

        Returns:
            GameState: Stan po rozstrzygnięciu
        """
        if self.state.is_terminal():
            return self.state

        if self.player == self.exit:
            self._set_state(GameState.SUCCESS)
            return self.state

        for enemy in self.enemies:
            path = find_path(self.grid, enemy.position, self.player)
            if not path:
                continue

            step = path[0]
            if step != self.player and not self.is_empty(step):
                continue

            self.logger.log_move(self.turn, enemy.id, enemy.position.key, step.key)
            enemy.position = step

            if enemy.position == self.player:
                self._set_state(GameState.FAILURE)
                return self.state

        if self.teleports <= 0 and self.path_to_exit() is None:
            self._set_state(GameState.STUCK)

        return self.state

    def _set_state(self, new_state: GameState) -> None:
        if new_state == self.state:
            return
        self.logger.log_state_change(self.turn, self.state.value, new_state.value)
        self.state = new_state
        if new_state.is_terminal():
            self.logger.log_level_end(self.turn, self.level, new_state.value)

    # ─────────────────────────────────────────────────────────────────────────
    # POZIOMY
    # ─────────────────────────────────────────────────────────────────────────

    def next_level(self) -> None:
        """
        Przejście do kolejnego poziomu.

        Po SUCCESS poziom rośnie (więcej wrogów), w każdym innym
        przypadku wraca do 1. Teleporty i stan są resetowane,
        plansza budowana od nowa. Log zdarzeń obejmuje tylko bieżący
        poziom (metadane zostają).
        """
        if self.state == GameState.SUCCESS:
            self.level += 1
        else:
            self.level = 1

        self.teleports = self.config.teleport_charges
        self.state = GameState.IN_PROGRESS
        self.logger.clear()
        self.setup_board()

    def __repr__(self) -> str:
        return (
            f"Game(level={self.level}, state={self.state.value}, "
            f"turn={self.turn}, enemies={len(self.enemies)})"
        )
