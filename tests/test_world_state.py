"""Tests for WorldState — the fixed-step update, collisions, power timer and phases.

Covers:
- Pellet and power pellet consumption
- Life loss and positional reset
- Frightened capture
- Power timer decay and absolute refresh
- Level clear and level reset
- Input validation and render purity
- Invariants over a long autopilot run on the classic maze
"""

import math

import pytest

from mazechase.ai.autopilot import Autopilot
from mazechase.config import GameConfig
from mazechase.core.enums import Cell, Direction, EventKind, GamePhase
from mazechase.core.layout import CLASSIC
from mazechase.core.models import SpawnPoint
from mazechase.core.world_state import WorldState
from mazechase.engine.motion import at_decision_point
from mazechase.render.surface import TextSurface
from mazechase.systems.rng import DeterministicRNG
from tests.helpers.arena import CORRIDOR, STEP, StubRNG, grid_of, make_world, pursuer

THREE_PELLETS = (
    "#########",
    "# ...   #",
    "#########",
)

ONE_PELLET = (
    "#########",
    "# .     #",
    "#########",
)

POWER = (
    "#########",
    "# o     #",
    "#########",
)

ISOLATED = (
    "#####",
    "# # #",
    "#####",
)


def _kinds(events):
    return [e.kind for e in events]


class TestConsumption:
    def test_pellet_scores_and_empties_cell(self):
        world, listener = make_world(THREE_PELLETS, SpawnPoint(1.95, 1.5, Direction.RIGHT))
        events = world.update(STEP)
        assert world.player.x == pytest.approx(2.06)
        assert _kinds(events) == [EventKind.SCORE]
        assert events[0].delta == 10
        assert world.grid.cell_at(2, 1) == Cell.EMPTY
        assert world.pellet_remaining == 2
        assert listener.scores == [10]

    def test_no_event_on_empty_cell(self):
        world, listener = make_world(CORRIDOR, SpawnPoint(1.5, 1.5, Direction.RIGHT))
        assert world.update(STEP) == []
        assert listener.scores == []

    def test_power_pellet_sets_timer_absolutely(self):
        world, listener = make_world(POWER, SpawnPoint(1.95, 1.5, Direction.RIGHT))
        world.set_power(2.0)
        events = world.update(STEP)
        assert _kinds(events) == [EventKind.POWER_ON, EventKind.SCORE]
        assert events[1].delta == 50
        assert world.power_timer == 6.0
        assert world.frightened
        assert listener.scores == [50]

    def test_power_pellet_does_not_touch_pellet_counter(self):
        world, _ = make_world(POWER, SpawnPoint(1.95, 1.5, Direction.RIGHT))
        assert world.pellet_remaining == 0
        world.update(STEP)
        assert world.pellet_remaining == 0
        assert world.phase == GamePhase.RUNNING


class TestPowerTimer:
    def test_decays_and_clamps_at_zero(self):
        cfg = GameConfig(player_speed=0.0)
        world, _ = make_world(CORRIDOR, SpawnPoint(1.5, 1.5, Direction.RIGHT), config=cfg)
        world.set_power(5.0)
        world.update(1.0)
        assert world.power_timer == pytest.approx(4.0)
        world.update(5.0)
        assert world.power_timer == 0.0
        assert not world.frightened

    def test_pursuers_slow_while_frightened(self):
        world, _ = make_world(
            CORRIDOR, SpawnPoint(1.5, 1.5, Direction.RIGHT),
            pursuers=[pursuer(6.9, 1.5, Direction.LEFT)],
        )
        world.set_power(6.0)
        world.update(STEP)
        cfg = world.config
        expected = 6.9 - cfg.pursuer_speed * cfg.frightened_speed_multiplier * STEP * cfg.velocity_scale
        assert world.pursuers[0].x == pytest.approx(expected)


class TestContact:
    def test_life_lost_resets_everyone(self):
        world, listener = make_world(
            CORRIDOR, SpawnPoint(1.5, 1.5, Direction.RIGHT),
            pursuers=[pursuer(5.5, 1.5, Direction.LEFT)],
        )
        world.player.x = 3.5
        world.pursuers[0].x = 3.5
        events = world.update(STEP)
        assert _kinds(events) == [EventKind.LIFE_LOST]
        assert events[0].entity_id == 1
        assert (world.player.x, world.player.y) == (1.5, 1.5)
        assert (world.pursuers[0].x, world.pursuers[0].y) == (5.5, 1.5)
        assert world.player.direction == Direction.RIGHT
        assert listener.lives_lost == 1

    def test_only_one_life_lost_per_step(self):
        world, listener = make_world(
            CORRIDOR, SpawnPoint(1.5, 1.5, Direction.RIGHT),
            pursuers=[pursuer(5.5, 1.5, Direction.LEFT), pursuer(6.5, 1.5, Direction.LEFT, name="pinky")],
        )
        world.player.x = 3.5
        world.pursuers[0].x = 3.5
        world.pursuers[1].x = 3.7
        events = world.update(STEP)
        assert _kinds(events) == [EventKind.LIFE_LOST]
        assert listener.lives_lost == 1

    def test_frightened_contact_captures(self):
        world, listener = make_world(
            CORRIDOR, SpawnPoint(1.5, 1.5, Direction.RIGHT),
            pursuers=[pursuer(5.5, 1.5, Direction.LEFT, home=SpawnPoint(7.5, 1.5, Direction.LEFT))],
        )
        world.set_power(6.0)
        world.player.x = 3.5
        world.pursuers[0].x = 3.5
        events = world.update(STEP)
        assert _kinds(events) == [EventKind.CAPTURE, EventKind.SCORE]
        assert events[1].delta == 200
        assert (world.pursuers[0].x, world.pursuers[0].y) == (7.5, 1.5)
        assert world.player.x == pytest.approx(3.61)
        assert listener.lives_lost == 0
        assert listener.scores == [200]

    def test_capture_without_home_returns_to_spawn(self):
        world, _ = make_world(
            CORRIDOR, SpawnPoint(1.5, 1.5, Direction.RIGHT),
            pursuers=[pursuer(5.5, 1.5, Direction.LEFT)],
        )
        world.set_power(6.0)
        world.player.x = 3.5
        world.pursuers[0].x = 3.5
        world.update(STEP)
        assert world.pursuers[0].x == 5.5

    def test_contact_outside_radius_ignored(self):
        world, listener = make_world(
            CORRIDOR, SpawnPoint(1.5, 1.5, Direction.RIGHT),
            pursuers=[pursuer(5.5, 1.5, Direction.LEFT)],
        )
        world.player.x = 2.5
        world.pursuers[0].x = 4.5
        assert world.update(STEP) == []
        assert listener.lives_lost == 0


class TestIsolatedPursuer:
    def test_stalls_in_place(self):
        world, _ = make_world(
            ISOLATED, SpawnPoint(3.5, 1.5, Direction.LEFT),
            pursuers=[pursuer(1.5, 1.5, Direction.LEFT)],
        )
        world.update(STEP)
        assert (world.pursuers[0].x, world.pursuers[0].y) == (1.5, 1.5)


class TestPhases:
    def test_level_clear_pauses_world(self):
        world, listener = make_world(ONE_PELLET, SpawnPoint(1.95, 1.5, Direction.RIGHT))
        events = world.update(STEP)
        assert _kinds(events) == [EventKind.SCORE, EventKind.LEVEL_CLEAR]
        assert world.phase == GamePhase.LEVEL_COMPLETE
        assert listener.level_clears == 1
        step = world.step_count
        assert world.update(STEP) == []
        assert world.step_count == step

    def test_begin_next_level_refills(self):
        world, _ = make_world(ONE_PELLET, SpawnPoint(1.95, 1.5, Direction.RIGHT))
        world.update(STEP)
        assert world.begin_next_level() == 1
        assert world.phase == GamePhase.RUNNING
        assert world.pellet_remaining == 1
        assert world.grid.cell_at(2, 1) == Cell.PELLET

    def test_begin_next_level_only_from_level_complete(self):
        world, _ = make_world(ONE_PELLET, SpawnPoint(5.5, 1.5, Direction.RIGHT))
        assert world.begin_next_level() == 0
        assert world.phase == GamePhase.RUNNING

    def test_game_over_is_terminal(self):
        world, _ = make_world(CORRIDOR, SpawnPoint(1.5, 1.5, Direction.RIGHT))
        world.end_game()
        assert world.phase == GamePhase.GAME_OVER
        assert world.update(STEP) == []
        assert world.step_count == 0


class TestInputAndRender:
    @pytest.mark.parametrize("value,expected", [
        ("up", Direction.UP), ("ArrowLeft", Direction.LEFT), ("D", Direction.RIGHT),
        (Direction.DOWN, Direction.DOWN),
    ])
    def test_valid_input(self, value, expected):
        world, _ = make_world(CORRIDOR, SpawnPoint(1.5, 1.5, Direction.RIGHT))
        assert world.input(value)
        assert world.player.desired == expected

    @pytest.mark.parametrize("value", ["sideways", "", None, 3, "upp"])
    def test_invalid_input_ignored(self, value):
        world, _ = make_world(CORRIDOR, SpawnPoint(1.5, 1.5, Direction.RIGHT))
        assert not world.input(value)
        assert world.player.desired == Direction.RIGHT

    def test_render_is_pure(self):
        world, _ = make_world(
            THREE_PELLETS, SpawnPoint(1.5, 1.5, Direction.RIGHT),
            pursuers=[pursuer(6.5, 1.5, Direction.LEFT)],
        )
        first = world.render()
        second = world.render(TextSurface())
        assert first == second
        assert world.step_count == 0
        assert first.cell(2, 1) == Cell.PELLET

    def test_snapshot_does_not_alias_grid(self):
        world, _ = make_world(THREE_PELLETS, SpawnPoint(1.95, 1.5, Direction.RIGHT))
        before = world.render()
        world.update(STEP)
        assert before.cell(2, 1) == Cell.PELLET
        assert world.render().cell(2, 1) == Cell.EMPTY

    def test_constructor_copies_grid(self):
        grid = grid_of(THREE_PELLETS)
        world = WorldState(GameConfig(), grid, SpawnPoint(1.95, 1.5, Direction.RIGHT), [], rng=StubRNG())
        world.update(STEP)
        assert grid.cell_at(2, 1) == Cell.PELLET


class TestClassicInvariants:
    """Long autopilot run on the classic maze, checking invariants every step."""

    def test_invariants_hold(self):
        cfg = GameConfig()
        world = WorldState.from_layout(cfg, CLASSIC, rng=DeterministicRNG(cfg.seed))
        pilot = Autopilot()
        entities = (world.player, *world.pursuers)

        for _ in range(1500):
            if world.phase != GamePhase.RUNNING:
                break
            world.input(pilot.steer(world))
            before = [(e.x, e.y, e.direction) for e in entities]
            events = world.update(cfg.step_seconds)
            reset = any(e.kind in (EventKind.LIFE_LOST, EventKind.CAPTURE) for e in events)

            for e, (bx, by, bdir) in zip(entities, before):
                assert 0 <= e.x < world.grid.cols
                assert 0 <= e.y < world.grid.rows
                assert world.grid.cell_at(e.x, e.y) != Cell.WALL
                if e.direction != bdir and not reset:
                    cx, cy = math.floor(bx) + 0.5, math.floor(by) + 0.5
                    assert abs(bx - cx) < cfg.decision_epsilon
                    assert abs(by - cy) < cfg.decision_epsilon

            assert world.pellet_remaining == world.grid.count(Cell.PELLET)
            assert 0.0 <= world.power_timer <= cfg.power_duration

        assert world.step_count > 0

    def test_same_seed_same_run(self):
        def run():
            cfg = GameConfig(seed=7)
            world = WorldState.from_layout(cfg, CLASSIC, rng=DeterministicRNG(cfg.seed))
            pilot = Autopilot()
            for _ in range(600):
                world.input(pilot.steer(world))
                world.update(cfg.step_seconds)
            return world.render()

        assert run() == run()

    def test_decision_helper_agrees_with_spawn(self):
        world = WorldState.from_layout(GameConfig(), CLASSIC)
        assert at_decision_point(world.player, world.config.decision_epsilon)
