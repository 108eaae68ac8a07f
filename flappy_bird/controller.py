"""Phase state machine driving one game round per READY -> RESULT cycle."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from .collision import check_crash
from .config import GROUND_Y, RESTART_BUTTON_RECT, ObstacleConfig
from .entities import Bird, Ground, Obstacle
from .events import InputQueue, TapEvent
from .generator import ObstacleGenerator
from .scoreboard import Scoreboard
from .utils import point_in_rect

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    READY = "ready"
    PLAYING = "playing"
    CRASHING = "crashing"
    RESULT = "result"


@dataclass
class GameState:
    """Everything that changes during a round. Owned by the controller."""

    bird: Bird = field(default_factory=Bird)
    obstacles: deque[Obstacle] = field(default_factory=deque)
    scoreboard: Scoreboard = field(default_factory=Scoreboard)
    ground: Ground = field(default_factory=Ground)
    phase: GamePhase = GamePhase.READY


class GameController:
    """Top-level game logic: consumes taps, advances the current phase, reports
    whether the host should keep ticking."""

    def __init__(
        self,
        state: GameState | None = None,
        config: ObstacleConfig | None = None,
        rng: random.Random | None = None,
        ground_y: float = GROUND_Y,
    ) -> None:
        self.state = state or GameState()
        self.config = config or ObstacleConfig()
        self.generator = ObstacleGenerator(self.config, rng)
        self.ground_y = ground_y
        self.inputs = InputQueue()
        self.running = True
        self.enter_ready()

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    # -- phase transitions -------------------------------------------------

    def _set_phase(self, phase: GamePhase) -> None:
        logger.info("Phase %s -> %s (score=%d)", self.state.phase.value, phase.value, self.state.scoreboard.score)
        self.state.phase = phase

    def enter_ready(self) -> None:
        s = self.state
        s.bird.reset()
        s.obstacles.clear()
        s.scoreboard.reset()
        self.generator.reset()
        # Taps left in this drain belonged to the previous phase
        self.inputs.clear()
        if s.phase is not GamePhase.READY:
            self._set_phase(GamePhase.READY)

    def enter_playing(self) -> None:
        self.generator.reset()
        self._set_phase(GamePhase.PLAYING)

    def enter_crashing(self) -> None:
        self.state.bird.crash_pose()
        self._set_phase(GamePhase.CRASHING)

    def enter_result(self) -> None:
        best = self.state.scoreboard.record_best()
        logger.info("Round over: score=%d best=%d", self.state.scoreboard.score, best)
        self._set_phase(GamePhase.RESULT)

    def stop(self) -> None:
        self.running = False

    # -- input -------------------------------------------------------------

    def tap(self, pos: tuple[float, float] | None = None) -> None:
        """Queue an activate input; ``pos`` must already be in logical units."""
        self.inputs.push(TapEvent(pos))

    def _handle_tap(self, event: TapEvent) -> None:
        phase = self.state.phase
        if phase is GamePhase.READY:
            self.enter_playing()
        elif phase is GamePhase.PLAYING:
            self.state.bird.fly()
        elif phase is GamePhase.CRASHING:
            logger.debug("Tap ignored while crashing")
        elif phase is GamePhase.RESULT:
            if event.pos is not None and point_in_rect(event.pos[0], event.pos[1], RESTART_BUTTON_RECT):
                self.enter_ready()
            else:
                logger.debug("Tap at %s outside restart button", event.pos)

    # -- per-frame ---------------------------------------------------------

    def tick(self, now: float, dt: float) -> bool:
        """Advance one frame. Returns True while the host should request another."""
        if not self.running:
            return False
        for event in self.inputs.drain():
            self._handle_tap(event)

        phase = self.state.phase
        if phase is GamePhase.READY:
            self.ready_frame(dt)
        elif phase is GamePhase.PLAYING:
            self.play_frame(now, dt)
        elif phase is GamePhase.CRASHING:
            self.crash_frame(dt)
        return self.running

    def ready_frame(self, dt: float) -> None:
        self.state.bird.idle(dt)
        self.state.ground.update(dt, self.config.speed)

    def play_frame(self, now: float, dt: float) -> None:
        s = self.state
        obstacles = s.obstacles

        # Oldest pipes sit at the front
        while obstacles and obstacles[0].out_of_view():
            logger.debug("Retired %r", obstacles.popleft())

        if self.generator.should_spawn(now):
            obstacles.extend(self.generator.spawn_pair(now))

        for obs in obstacles:
            obs.update(dt)
        s.ground.update(dt, self.config.speed)

        s.bird.update(dt, self.ground_y)
        s.scoreboard.count(s.bird, obstacles)

        if check_crash(s.bird, obstacles, self.ground_y):
            self.enter_crashing()

    def crash_frame(self, dt: float) -> None:
        bird = self.state.bird
        bird.update(dt, self.ground_y)
        if bird.landed:
            self.enter_result()
