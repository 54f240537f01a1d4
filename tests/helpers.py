from game import BubbleGrid, SlotKey


def make_grid(rows):
    """Builds a grid from rows of Color-or-None; every cell becomes a slot."""
    h = len(rows)
    w = len(rows[0])
    slots = {}
    for r, row in enumerate(rows):
        assert len(row) == w
        for c, color in enumerate(row):
            slots[SlotKey(r, c)] = color
    return BubbleGrid(width=w, height=h, slots=slots)
