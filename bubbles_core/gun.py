from __future__ import annotations

import math
from dataclasses import dataclass

from .geometry import Vec2


@dataclass
class Gun:
    """Aim direction of the gun as a unit vector; starts pointing straight up."""
    direction: Vec2 = Vec2(0.0, 1.0)

    def rotate(self, target: Vec2) -> Vec2:
        """Points the gun at `target` (simulation coordinates) and returns the new direction.

        The angle is not clamped, so aiming below the horizon is allowed.
        Non-finite targets are ignored and the current direction is kept.
        """
        if not (math.isfinite(target.x) and math.isfinite(target.y)):
            return self.direction
        angle = math.atan2(target.y, target.x)
        self.direction = Vec2(math.cos(angle), math.sin(angle))
        return self.direction

    @property
    def angle(self) -> float:
        return math.atan2(self.direction.y, self.direction.x)
