from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .errors import ConfigError, NoSuchSlot
from .geometry import SlotKey, Vec2, key_of, slot_of


class Color(str, Enum):
    ORANGE = '#f80'
    WHITE = '#ffffff'
    BLUE = '#36C1D4'
    RED = 'red'
    GREEN = 'green'
    YELLOW = 'yellow'


Occupant = Optional[Color]  # None means an explicitly empty slot


@dataclass
class BubbleGrid:
    """Fixed set of lattice slots, each holding a color or None.

    Keys missing from `slots` are not part of the playfield at all; a key
    mapped to None is an empty slot a bullet may land in.
    """
    width: int
    height: int
    slots: Dict[SlotKey, Occupant]

    def __contains__(self, key: object) -> bool:
        return key in self.slots

    def __len__(self) -> int:
        return len(self.slots)

    def keys(self) -> Iterator[SlotKey]:
        return iter(self.slots)

    def get(self, key: SlotKey) -> Occupant:
        try:
            return self.slots[key]
        except KeyError:
            raise NoSuchSlot(key) from None

    def set(self, key: SlotKey, occupant: Occupant) -> None:
        if key not in self.slots:
            raise NoSuchSlot(key)
        self.slots[key] = occupant

    def occupied(self) -> Iterator[Tuple[SlotKey, Color]]:
        """Iterates over (key, color) for every non-empty slot."""
        for key, color in self.slots.items():
            if color is not None:
                yield key, color

    def is_cleared(self) -> bool:
        return all(color is None for color in self.slots.values())

    def position(self, key: SlotKey) -> Vec2:
        return slot_of(key, self.width, self.height)

    def key_at(self, position: Vec2) -> SlotKey:
        return key_of(position, self.width, self.height)

    def snapshot(self) -> Dict[SlotKey, Occupant]:
        """Copy of the slot mapping for readers that must not mutate the grid."""
        return dict(self.slots)

    def pretty(self, marks: Optional[Dict[SlotKey, str]] = None) -> str:
        """Text rendering: one letter per bubble, '.' for empty slots, odd rows indented."""
        lines: List[str] = []
        extra = marks or {}
        for r in range(self.height):
            row: List[str] = []
            for c in range(self.width):
                key = SlotKey(r, c)
                if key in extra:
                    row.append(extra[key])
                elif key not in self.slots:
                    row.append(" ")
                elif self.slots[key] is None:
                    row.append(".")
                else:
                    row.append(self.slots[key].name[0])
            lines.append((" " if r % 2 else "") + " ".join(row))
        return "\n".join(lines)


def create_grid(
    width: int,
    height: int,
    filled_rows: int,
    palette: Sequence[Color],
    rng: Optional[random.Random] = None,
) -> BubbleGrid:
    """Creates a width x height grid with the top `filled_rows` rows packed with random colors."""
    if width <= 0 or height <= 0:
        raise ConfigError("grid dimensions must be >= 1")
    if filled_rows < 0 or filled_rows > height:
        raise ConfigError("filled_rows must be in [0, height]")
    if not palette:
        raise ConfigError("palette must not be empty")
    rng = rng or random.Random()
    colors = tuple(palette)
    slots: Dict[SlotKey, Occupant] = {}
    for row in range(height):
        for col in range(width):
            slots[SlotKey(row, col)] = rng.choice(colors) if row < filled_rows else None
    return BubbleGrid(width=width, height=height, slots=slots)
