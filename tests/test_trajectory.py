import unittest

from game import (
    Bullet,
    Color,
    GUN_ORIGIN,
    Shot,
    ShotState,
    SlotKey,
    Vec2,
    create_grid,
    find_collision,
    out_of_bounds,
)
from tests.helpers import make_grid

R, B = Color.RED, Color.BLUE


def _shot(direction, color=R):
    return Shot(bullet=Bullet(color=color), direction=direction, step_scale=0.75, collision_radius=1.7)


class TestTrajectory(unittest.TestCase):
    def test_given_playfield_when_checking_bounds_then_one_unit_side_slack(self):
        self.assertFalse(out_of_bounds(Vec2(0.0, 0.0), 40, 30))
        self.assertFalse(out_of_bounds(Vec2(-21.0, 15.0), 40, 30))
        self.assertTrue(out_of_bounds(Vec2(21.1, 15.0), 40, 30))
        self.assertTrue(out_of_bounds(Vec2(0.0, -0.1), 40, 30))
        self.assertTrue(out_of_bounds(Vec2(0.0, 30.5), 40, 30))

    def test_given_empty_grid_when_shooting_up_then_out_of_bounds(self):
        grid = create_grid(40, 30, 0, [R])
        shot = _shot(Vec2(0.0, 1.0))
        self.assertEqual(shot.run(grid), ShotState.OUT_OF_BOUNDS)
        self.assertIsNone(shot.collided_key)
        self.assertGreater(shot.position.y, 30)
        self.assertTrue(grid.is_cleared())

    def test_given_direction_when_ticking_then_moves_along_straight_line(self):
        grid = create_grid(40, 30, 0, [R])
        shot = _shot(Vec2(0.6, 0.8))
        self.assertEqual(shot.position, GUN_ORIGIN)
        for _ in range(4):
            self.assertEqual(shot.tick(grid), ShotState.FLYING)
        self.assertEqual(shot.step, 4)
        self.assertAlmostEqual(shot.position.x, 0.6 * 3.0)
        self.assertAlmostEqual(shot.position.y, 0.8 * 3.0)

    def test_given_bubble_in_path_when_shooting_then_lands_on_nearest_occupied(self):
        grid = make_grid([
            [R, R, B],
            [None, None, None],
            [None, None, None],
        ])
        shot = _shot(Vec2(0.0, 1.0))
        self.assertEqual(shot.run(grid), ShotState.LANDED)
        # (0, 1) sits at (-0.5, 3) and is scanned before the equally close (0, 2)
        self.assertEqual(shot.collided_key, SlotKey(0, 1))
        self.assertEqual(shot.step, 2)

    def test_given_terminal_shot_when_ticking_again_then_state_unchanged(self):
        grid = create_grid(4, 3, 0, [R])
        shot = _shot(Vec2(0.0, -1.0))
        shot.run(grid)
        pos = shot.position
        self.assertEqual(shot.tick(grid), ShotState.OUT_OF_BOUNDS)
        self.assertEqual(shot.position, pos)

    def test_given_position_when_finding_collision_then_closest_within_radius(self):
        grid = make_grid([[R, None, B]])
        # (0, 0) at (-1.5, 1), (0, 2) at (0.5, 1)
        self.assertEqual(find_collision(Vec2(0.2, 1.0), grid, 1.7), SlotKey(0, 2))
        self.assertEqual(find_collision(Vec2(-1.0, 0.5), grid, 1.7), SlotKey(0, 0))
        self.assertIsNone(find_collision(Vec2(5.0, 1.0), grid, 1.7))


if __name__ == '__main__':
    unittest.main()
