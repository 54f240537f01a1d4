"""
Bubble shooter core Python package.

Pure game-state logic, free of any drawing or input handling.
Modules:
- geometry.py: Vec2, SlotKey, simulation <-> grid <-> canvas transforms
- grid.py: Color, BubbleGrid, create_grid
- cluster.py: adjacency, same-color flood fill, explosion, landing slot search
- trajectory.py: Bullet, Shot and its tick-driven flight
- gun.py: Gun aim direction
- controller.py: RoundController, the per-session firing cycle
- config.py / errors.py / logsetup.py: configuration, error kinds, logging
"""
