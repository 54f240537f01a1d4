from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Any, Dict, List, Optional

from .cluster import explode, nearest_empty_slot
from .config import GameConfig
from .errors import NoLandingSlot
from .geometry import Vec2
from .grid import BubbleGrid, create_grid
from .gun import Gun
from .trajectory import Bullet, Shot, ShotState

logger = logging.getLogger(__name__)


class SessionState(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class ScoreSink:
    """Receives score and terminal-state notifications; the default does nothing."""

    def score_changed(self, score: int) -> None:
        pass

    def game_won(self) -> None:
        pass

    def game_lost(self) -> None:
        pass


class RoundController:
    """
    Owns the grid, gun, score and the single shot in flight for one session.

    Only aim() and fire() are driven by input; tick() is driven by whatever
    scheduler the front end uses, one simulation step per call.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        grid: Optional[BubbleGrid] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)
        if grid is None:
            grid = create_grid(
                self.config.width,
                self.config.height,
                self.config.filled_rows,
                self.config.palette,
                self.rng,
            )
        self.grid = grid
        self.gun = Gun()
        self.score = 0
        self.state = SessionState.PLAYING
        self.shot: Optional[Shot] = None
        self.bullet = self._spawn_bullet()
        self._sinks: List[ScoreSink] = []
        logger.info("new session %dx%d, %d occupied slots",
                    self.grid.width, self.grid.height, sum(1 for _ in self.grid.occupied()))

    def subscribe(self, sink: ScoreSink) -> None:
        self._sinks.append(sink)

    def _spawn_bullet(self) -> Bullet:
        return Bullet(color=self.rng.choice(tuple(self.config.palette)))

    @property
    def flying(self) -> bool:
        return self.shot is not None and self.shot.state is ShotState.FLYING

    def aim(self, target: Vec2) -> Vec2:
        return self.gun.rotate(target)

    def fire(self) -> bool:
        """Starts a shot; a no-op (returns False) while a shot flies or the session is over."""
        if self.state is not SessionState.PLAYING or self.flying:
            return False
        self.shot = Shot(
            bullet=self.bullet,
            direction=self.gun.direction,
            step_scale=self.config.step_scale,
            collision_radius=self.config.collision_radius,
        )
        logger.debug("fire %s towards (%.3f, %.3f)",
                     self.bullet.color.name, self.gun.direction.x, self.gun.direction.y)
        return True

    def tick(self) -> Optional[ShotState]:
        """Advances the flying shot one step; returns its state, or None when nothing flies."""
        if not self.flying:
            return None
        assert self.shot is not None
        state = self.shot.tick(self.grid)
        if state is ShotState.LANDED:
            self._land(self.shot)
        elif state is ShotState.OUT_OF_BOUNDS:
            self._add_score(-self.config.penalty)
            self.new_round()
        return state

    def play_shot(self) -> Optional[ShotState]:
        """Fires and ticks until the shot finishes. Returns None when fire() was rejected."""
        if not self.fire():
            return None
        state = ShotState.FLYING
        while state is ShotState.FLYING:
            state = self.tick()
        return state

    def _land(self, shot: Shot) -> None:
        try:
            key = nearest_empty_slot(shot.position, self.grid, shot.collided_key)
        except NoLandingSlot as exc:
            logger.warning("forced loss: %s", exc)
            self._finish(SessionState.LOST)
            return
        color = shot.bullet.color
        self.grid.set(key, color)
        shot.bullet.position = self.grid.position(key)
        logger.debug("landed %s at %s", color.name, key)
        removed = explode(key, color, self.grid)
        if removed:
            self._add_score(self.config.reward * removed)
        self.new_round()

    def _add_score(self, delta: int) -> None:
        self.score += delta
        for sink in self._sinks:
            sink.score_changed(self.score)

    def _finish(self, state: SessionState) -> None:
        self.state = state
        logger.info("session over: %s, score %d", state.value, self.score)
        for sink in self._sinks:
            if state is SessionState.WON:
                sink.game_won()
            else:
                sink.game_lost()

    def new_round(self) -> None:
        """Readies the next bullet and checks whether the field has been cleared."""
        self.shot = None
        self.bullet = self._spawn_bullet()
        if self.state is SessionState.PLAYING and self.grid.is_cleared():
            self._finish(SessionState.WON)

    def snapshot(self) -> Dict[str, Any]:
        """Plain-data view for renderers."""
        grid = self.grid
        bullet = self.shot.bullet if self.shot is not None else self.bullet
        return {
            "grid": {
                "width": grid.width,
                "height": grid.height,
                "slots": [
                    [k.row, k.col, (c.name if c is not None else None)]
                    for k, c in grid.snapshot().items()
                ],
            },
            "gun": [self.gun.direction.x, self.gun.direction.y],
            "bullet": {
                "x": bullet.position.x,
                "y": bullet.position.y,
                "color": bullet.color.name,
                "flying": self.flying,
            },
            "score": self.score,
            "state": self.state.value,
        }
