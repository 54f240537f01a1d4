from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .geometry import SlotKey, Vec2
from .grid import BubbleGrid, Color

logger = logging.getLogger(__name__)

GUN_ORIGIN = Vec2(0.0, 0.0)


class ShotState(Enum):
    FLYING = "flying"
    LANDED = "landed"
    OUT_OF_BOUNDS = "out_of_bounds"


@dataclass
class Bullet:
    """The bubble waiting in (or leaving) the gun."""
    color: Color
    position: Vec2 = GUN_ORIGIN


def out_of_bounds(position: Vec2, width: int, height: int) -> bool:
    """True once a position has left the playfield (one unit of slack on the sides)."""
    half = width / 2 + 1
    return position.x < -half or position.x > half or position.y < 0 or position.y > height


def find_collision(position: Vec2, grid: BubbleGrid, radius: float) -> Optional[SlotKey]:
    """Returns the closest occupied slot within `radius` of position, if any."""
    best: Optional[SlotKey] = None
    best_dist = 0.0
    for key, _color in grid.occupied():
        dist = grid.position(key).distance_to(position)
        if dist > radius:
            continue
        # On equal distance the first slot found wins.
        if best is None or dist < best_dist:
            best, best_dist = key, dist
    return best


@dataclass
class Shot:
    """
    One fired bullet moving along a straight line from the gun origin.

    The direction is copied at creation, so aiming while the shot is in
    flight does not bend it. Each tick either terminates the shot or moves the
    bullet to origin + direction * (step * step_scale).
    """
    bullet: Bullet
    direction: Vec2
    step_scale: float
    collision_radius: float
    origin: Vec2 = GUN_ORIGIN
    step: int = 0
    state: ShotState = ShotState.FLYING
    collided_key: Optional[SlotKey] = None

    @property
    def position(self) -> Vec2:
        return self.bullet.position

    def tick(self, grid: BubbleGrid) -> ShotState:
        if self.state is not ShotState.FLYING:
            return self.state
        hit = find_collision(self.position, grid, self.collision_radius)
        if hit is not None:
            self.collided_key = hit
            self.state = ShotState.LANDED
            logger.debug("shot collided with %s after %d steps", hit, self.step)
            return self.state
        if out_of_bounds(self.position, grid.width, grid.height):
            self.state = ShotState.OUT_OF_BOUNDS
            logger.debug("shot left the playfield at (%.2f, %.2f)", self.position.x, self.position.y)
            return self.state
        self.step += 1
        self.bullet.position = self.origin.add(self.direction.scaled(self.step * self.step_scale))
        return self.state

    def run(self, grid: BubbleGrid) -> ShotState:
        """Ticks until the shot reaches a terminal state."""
        while self.tick(grid) is ShotState.FLYING:
            pass
        return self.state
