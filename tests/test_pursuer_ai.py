"""Tests for PursuerAI — greedy chase, tie-break order, dead ends and frightened walk."""

from mazechase.ai.pursuer import PursuerAI
from mazechase.config import GameConfig
from mazechase.core.enums import Direction, Domain
from mazechase.core.models import Entity
from tests.helpers.arena import CROSS, StubRNG, grid_of

DEAD_END = (
    "#####",
    "#   #",
    "#####",
)

ISOLATED = (
    "#####",
    "# # #",
    "#####",
)


def _pursuer(x: float, y: float, direction: Direction) -> Entity:
    return Entity(id=1, kind="pursuer", x=x, y=y, direction=direction, desired=direction, speed=0.9)


def _player(x: float, y: float) -> Entity:
    return Entity(id=0, kind="player", x=x, y=y)


class TestChase:
    def test_moves_toward_player(self):
        ai = PursuerAI(GameConfig(), StubRNG())
        choice = ai.choose(_pursuer(2.5, 2.5, Direction.RIGHT), _player(2.5, 0.5), grid_of(CROSS), False, 1)
        assert choice == Direction.UP

    def test_tie_breaks_in_enumeration_order(self):
        # RIGHT, UP and DOWN tile centers are all 1.0 away from the player
        ai = PursuerAI(GameConfig(), StubRNG())
        choice = ai.choose(_pursuer(2.5, 2.5, Direction.RIGHT), _player(2.5, 2.5), grid_of(CROSS), False, 1)
        assert choice == Direction.RIGHT

    def test_never_reverses_when_other_exits_exist(self):
        # LEFT would be closest but is the reverse of RIGHT
        ai = PursuerAI(GameConfig(), StubRNG())
        choice = ai.choose(_pursuer(2.5, 2.5, Direction.RIGHT), _player(0.5, 2.5), grid_of(CROSS), False, 1)
        assert choice == Direction.UP

    def test_chase_does_not_consume_randomness(self):
        rng = StubRNG()
        ai = PursuerAI(GameConfig(), rng)
        ai.choose(_pursuer(2.5, 2.5, Direction.RIGHT), _player(2.5, 0.5), grid_of(CROSS), False, 1)
        assert rng.calls == []


class TestDeadEndAndIsolation:
    def test_dead_end_reverses(self):
        rng = StubRNG()
        ai = PursuerAI(GameConfig(), rng)
        choice = ai.choose(_pursuer(1.5, 1.5, Direction.LEFT), _player(3.5, 1.5), grid_of(DEAD_END), False, 7)
        assert choice == Direction.RIGHT
        assert rng.calls == [(Domain.AI_DEAD_END, 1, 7, 0, 0)]

    def test_isolated_tile_returns_none(self):
        ai = PursuerAI(GameConfig(), StubRNG())
        assert ai.choose(_pursuer(1.5, 1.5, Direction.LEFT), _player(3.5, 1.5), grid_of(ISOLATED), False, 1) is None

    def test_open_directions_in_enumeration_order(self):
        dirs = PursuerAI.open_directions(_pursuer(2.5, 2.5, Direction.LEFT), grid_of(CROSS))
        assert dirs == [Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN]


class TestFrightened:
    def test_random_pick_among_non_reverse(self):
        rng = StubRNG(pick_high=True)
        ai = PursuerAI(GameConfig(), rng)
        choice = ai.choose(_pursuer(2.5, 2.5, Direction.RIGHT), _player(2.5, 0.5), grid_of(CROSS), True, 3)
        # candidates are RIGHT, UP, DOWN; highest index is DOWN
        assert choice == Direction.DOWN
        assert rng.calls == [(Domain.AI_DECISION, 1, 3, 0, 2)]

    def test_lowest_pick(self):
        ai = PursuerAI(GameConfig(), StubRNG())
        choice = ai.choose(_pursuer(2.5, 2.5, Direction.RIGHT), _player(2.5, 0.5), grid_of(CROSS), True, 3)
        assert choice == Direction.RIGHT

    def test_speed_multiplier(self):
        cfg = GameConfig()
        ai = PursuerAI(cfg, StubRNG())
        p = _pursuer(2.5, 2.5, Direction.RIGHT)
        assert ai.speed_for(p, False) == p.speed
        assert ai.speed_for(p, True) == p.speed * cfg.frightened_speed_multiplier
