"""Coordinate transform between simulation space and grid slot keys.

Simulation space is centered horizontally on the playfield: x runs from
-width/2 to width/2 and y from 0 (the gun) up to height (the top row).
Row 0 of the grid sits at y == height and every odd row is shifted half a
unit to the right, which yields the hex-like packing of the bubbles.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

PLAYGROUND_WIDTH = 40
PLAYGROUND_HEIGHT = 30
SCALE = 10  # canvas pixels per half bubble


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float

    def add(self, other: 'Vec2') -> 'Vec2':
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: 'Vec2') -> 'Vec2':
        return Vec2(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> 'Vec2':
        return Vec2(self.x * factor, self.y * factor)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: 'Vec2') -> float:
        return self.sub(other).length()


class SlotKey(NamedTuple):
    """Structured identity of one lattice point: integer row and column."""
    row: int
    col: int


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding, which would make x.5 flip by parity.
    return math.floor(value + 0.5)


def row_offset(row: int) -> float:
    """Horizontal shift of a row: odd rows sit half a unit to the right."""
    return 0.5 if row % 2 != 0 else 0.0


def position_for_slot(
    row: int,
    col: int,
    width: int = PLAYGROUND_WIDTH,
    height: int = PLAYGROUND_HEIGHT,
) -> Vec2:
    """Maps a (row, col) lattice point into simulation space."""
    return Vec2(col + row_offset(row) - width / 2, height - row)


def key_of(
    position: Vec2,
    width: int = PLAYGROUND_WIDTH,
    height: int = PLAYGROUND_HEIGHT,
) -> SlotKey:
    """Rounds a position to the nearest lattice point of its row."""
    row = _round_half_up(height - position.y)
    col = _round_half_up(position.x + width / 2 - row_offset(row))
    return SlotKey(row, col)


def slot_of(
    key: SlotKey,
    width: int = PLAYGROUND_WIDTH,
    height: int = PLAYGROUND_HEIGHT,
) -> Vec2:
    """Decodes a slot key back to its lattice position."""
    return position_for_slot(key.row, key.col, width, height)


def math_to_canvas(
    position: Vec2,
    width: int = PLAYGROUND_WIDTH,
    height: int = PLAYGROUND_HEIGHT,
) -> Vec2:
    """Simulation space to canvas pixels (origin top-left, y pointing down)."""
    return Vec2(
        2 * SCALE * (position.x + width / 2),
        2 * SCALE * (height - position.y),
    )


def canvas_to_math(
    position: Vec2,
    width: int = PLAYGROUND_WIDTH,
    height: int = PLAYGROUND_HEIGHT,
) -> Vec2:
    """Inverse of math_to_canvas, used for pointer input."""
    return Vec2(
        position.x / (2 * SCALE) - width / 2,
        height - position.y / (2 * SCALE),
    )
