import random
from collections import deque

import pytest
from flappy_bird.config import (
    CANVAS_WIDTH,
    FLAP_IMPULSE,
    GROUND_Y,
    OBSTACLE_INTERVAL,
    OBSTACLE_SPEED,
    RESTART_BUTTON_RECT,
)
from flappy_bird.controller import GameController, GamePhase
from flappy_bird.entities import Obstacle, ObstacleKind
from flappy_bird.events import to_logical


def make_controller(seed: int = 0) -> GameController:
    return GameController(rng=random.Random(seed))


def start(ctrl: GameController, now: float = 0.0) -> None:
    ctrl.tap()
    ctrl.tick(now, 0.0)


def crash_to_result(ctrl: GameController, now: float = 1.0) -> None:
    ctrl.state.obstacles.clear()
    ctrl.state.bird.y = GROUND_Y
    ctrl.tick(now, 0.0)
    assert ctrl.phase is GamePhase.CRASHING
    ctrl.tick(now, 0.0)
    assert ctrl.phase is GamePhase.RESULT


def test_starts_ready_and_idles() -> None:
    ctrl = make_controller()
    assert ctrl.phase is GamePhase.READY
    for i in range(30):
        assert ctrl.tick(i / 60, 1 / 60) is True
    assert ctrl.phase is GamePhase.READY
    assert len(ctrl.state.obstacles) == 0
    assert ctrl.state.bird.vy == 0.0


def test_tap_starts_play_and_spawns_first_pair() -> None:
    ctrl = make_controller()
    start(ctrl)
    assert ctrl.phase is GamePhase.PLAYING
    assert len(ctrl.state.obstacles) == 2
    assert all(o.x == CANVAS_WIDTH for o in ctrl.state.obstacles)
    assert ctrl.state.bird.vy == 0.0  # the starting tap does not flap


def test_obstacles_advance_by_speed_times_dt() -> None:
    ctrl = make_controller()
    start(ctrl)
    before = [o.x for o in ctrl.state.obstacles]
    ctrl.tick(0.05, 0.05)
    after = [o.x for o in ctrl.state.obstacles]
    for b, a in zip(before, after):
        assert a == pytest.approx(b - OBSTACLE_SPEED * 0.05)
        assert a < b


def test_next_pair_waits_for_interval() -> None:
    ctrl = make_controller()
    start(ctrl, now=100.0)
    bird = ctrl.state.bird
    t = 100.0
    while t < 100.0 + OBSTACLE_INTERVAL:
        t += 0.1
        bird.y = 560.0  # keep it airborne
        bird.vy = 0.0
        ctrl.tick(t, 0.0)
        if t - 100.0 <= OBSTACLE_INTERVAL:
            assert len(ctrl.state.obstacles) == 2
    bird.y = 560.0
    ctrl.tick(100.0 + OBSTACLE_INTERVAL + 0.2, 0.0)
    assert len(ctrl.state.obstacles) == 4


def test_retired_once_right_edge_below_zero_and_score_kept() -> None:
    ctrl = make_controller()
    start(ctrl)
    obstacles = ctrl.state.obstacles
    old_upper = Obstacle(ObstacleKind.UPPER, -139.0, 0, 140, 300, OBSTACLE_SPEED)
    old_lower = Obstacle(ObstacleKind.LOWER, -139.0, 900, 140, 380, OBSTACLE_SPEED)
    obstacles.appendleft(old_lower)
    obstacles.appendleft(old_upper)

    ctrl.tick(0.01, 0.01)  # right edge 1 -> -0.5 during this frame
    assert old_upper in obstacles and old_lower in obstacles
    assert ctrl.state.scoreboard.score == 1
    assert old_upper.right < 0

    ctrl.tick(0.02, 0.01)
    assert old_upper not in obstacles and old_lower not in obstacles
    assert len(obstacles) == 2
    assert ctrl.state.scoreboard.score == 1


def test_each_tap_is_one_impulse() -> None:
    ctrl = make_controller()
    start(ctrl)
    bird = ctrl.state.bird
    bird.vy = 300.0
    ctrl.tap()
    ctrl.tick(0.01, 0.0)
    assert bird.vy == FLAP_IMPULSE
    bird.vy = 300.0
    ctrl.tick(0.02, 0.0)  # no tap queued, no impulse
    assert bird.vy == 300.0


def test_pipe_collision_enters_crashing() -> None:
    ctrl = make_controller()
    start(ctrl)
    bird = ctrl.state.bird
    ctrl.state.obstacles = deque([Obstacle(ObstacleKind.UPPER, bird.x - 10, 0, 140, bird.y + 10, OBSTACLE_SPEED)])
    ctrl.tick(0.01, 0.0)
    assert ctrl.phase is GamePhase.CRASHING
    assert bird.crashing


def test_taps_ignored_while_crashing_and_world_frozen() -> None:
    ctrl = make_controller()
    start(ctrl)
    bird = ctrl.state.bird
    ctrl.state.obstacles = deque([Obstacle(ObstacleKind.UPPER, bird.x - 10, 0, 140, bird.y + 10, OBSTACLE_SPEED)])
    ctrl.tick(0.01, 0.0)
    assert ctrl.phase is GamePhase.CRASHING

    pipe_x = ctrl.state.obstacles[0].x
    ground_offset = ctrl.state.ground.offset
    vy = bird.vy
    for _ in range(5):
        ctrl.tap()
    ctrl.tick(0.02, 0.0)
    assert bird.vy == vy
    assert ctrl.phase is GamePhase.CRASHING

    t = 0.02
    while ctrl.phase is GamePhase.CRASHING and t < 10:
        ctrl.tap()
        t += 0.02
        ctrl.tick(t, 0.02)
        assert bird.vy >= 0.0
    assert ctrl.phase is GamePhase.RESULT
    assert bird.bottom == GROUND_Y
    assert ctrl.state.obstacles[0].x == pipe_x
    assert ctrl.state.ground.offset == ground_offset


def test_ground_crash_goes_straight_to_result() -> None:
    ctrl = make_controller()
    start(ctrl)
    crash_to_result(ctrl)


def test_result_restart_requires_button_hit() -> None:
    ctrl = make_controller()
    start(ctrl)
    ctrl.state.scoreboard.score = 4
    crash_to_result(ctrl)
    assert ctrl.state.scoreboard.best == 4

    ctrl.tap()  # keyboard tap has no position
    ctrl.tap((227.0, 750.0))
    ctrl.tap((300.0, 851.0))
    ctrl.tick(2.0, 0.0)
    assert ctrl.phase is GamePhase.RESULT
    assert ctrl.state.scoreboard.score == 4

    x, y, _, _ = RESTART_BUTTON_RECT
    ctrl.tap((float(x), float(y)))
    ctrl.tick(2.1, 0.0)
    assert ctrl.phase is GamePhase.READY
    assert ctrl.state.scoreboard.score == 0
    assert ctrl.state.scoreboard.best == 4
    assert len(ctrl.state.obstacles) == 0
    assert not ctrl.state.bird.crashing


def test_restart_far_corner_is_inclusive() -> None:
    ctrl = make_controller()
    start(ctrl)
    crash_to_result(ctrl)
    ctrl.tap((492.0, 850.0))
    ctrl.tick(2.0, 0.0)
    assert ctrl.phase is GamePhase.READY


def test_physical_tap_maps_onto_restart_left_edge() -> None:
    ctrl = make_controller()
    start(ctrl)
    crash_to_result(ctrl)
    # 360x640 window is half the logical canvas
    pos = to_logical((114, 350), (360, 640))
    assert pos == (228.0, 700.0)
    ctrl.tap(pos)
    ctrl.tick(2.0, 0.0)
    assert ctrl.phase is GamePhase.READY


def test_full_round_loops_back_to_ready() -> None:
    ctrl = make_controller(5)
    phases = [ctrl.phase]
    start(ctrl)
    phases.append(ctrl.phase)
    t = 0.0
    while ctrl.phase is not GamePhase.RESULT and t < 30:
        t += 1 / 60
        ctrl.tick(t, 1 / 60)
        if ctrl.phase is not phases[-1]:
            phases.append(ctrl.phase)
    ctrl.tap((300.0, 760.0))
    ctrl.tick(t + 0.1, 0.0)
    phases.append(ctrl.phase)
    assert phases == [GamePhase.READY, GamePhase.PLAYING, GamePhase.CRASHING, GamePhase.RESULT, GamePhase.READY]


def test_stop_ends_ticking() -> None:
    ctrl = make_controller()
    assert ctrl.tick(0.0, 0.0) is True
    ctrl.stop()
    assert ctrl.tick(0.1, 0.1) is False


def test_restart_discards_remaining_taps_in_drain() -> None:
    ctrl = make_controller()
    start(ctrl)
    crash_to_result(ctrl)
    ctrl.tap((300.0, 760.0))
    ctrl.tap((300.0, 760.0))
    ctrl.tap()
    ctrl.tick(2.0, 0.0)
    assert ctrl.phase is GamePhase.READY
    assert len(ctrl.inputs) == 0
    assert len(ctrl.state.obstacles) == 0

    ctrl.tick(2.1, 1 / 60)
    assert ctrl.phase is GamePhase.READY
