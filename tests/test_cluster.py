import random
import unittest

from game import (
    Color,
    NoLandingSlot,
    SlotKey,
    create_grid,
    explode,
    nearest_empty_slot,
    neighbor_keys,
    neighbors_of,
    same_color_cluster,
)
from tests.helpers import make_grid

R, G, B = Color.RED, Color.GREEN, Color.BLUE


class TestAdjacency(unittest.TestCase):
    def test_given_interior_slots_when_listing_neighbors_then_six_hex_neighbors(self):
        grid = create_grid(6, 6, 0, [R])
        # Even row 2: the rows above and below reach one column to the left.
        self.assertEqual(
            neighbors_of(SlotKey(2, 2), grid),
            {SlotKey(2, 1), SlotKey(2, 3), SlotKey(1, 1), SlotKey(1, 2), SlotKey(3, 1), SlotKey(3, 2)},
        )
        # Odd row 3: the rows above and below reach one column to the right.
        self.assertEqual(
            neighbors_of(SlotKey(3, 2), grid),
            {SlotKey(3, 1), SlotKey(3, 3), SlotKey(2, 2), SlotKey(2, 3), SlotKey(4, 2), SlotKey(4, 3)},
        )

    def test_given_corner_slot_when_listing_neighbors_then_only_existing_slots(self):
        grid = create_grid(6, 6, 0, [R])
        self.assertEqual(neighbors_of(SlotKey(0, 0), grid), {SlotKey(0, 1), SlotKey(1, 0)})
        self.assertEqual(
            neighbors_of(SlotKey(1, 5), grid),
            {SlotKey(1, 4), SlotKey(0, 5), SlotKey(2, 5)},
        )

    def test_given_full_grid_when_checking_adjacency_then_symmetric(self):
        grid = create_grid(40, 30, 30, [R, G, B], random.Random(3))
        for key in grid.keys():
            for other in neighbors_of(key, grid):
                self.assertIn(key, neighbors_of(other, grid))

    def test_given_slot_when_ordering_neighbors_then_left_right_up_down(self):
        grid = create_grid(6, 6, 0, [R])
        self.assertEqual(
            neighbor_keys(SlotKey(2, 2), grid),
            [SlotKey(2, 1), SlotKey(2, 3), SlotKey(1, 1), SlotKey(1, 2), SlotKey(3, 1), SlotKey(3, 2)],
        )


class TestClusterResolution(unittest.TestCase):
    def test_given_cyclic_same_color_patch_when_collecting_then_each_slot_once(self):
        grid = make_grid([
            [R, R, R, B],
            [R, R, B, B],
            [R, R, R, G],
        ])
        cluster = same_color_cluster(SlotKey(1, 0), R, grid)
        expected = {
            SlotKey(0, 0), SlotKey(0, 1), SlotKey(0, 2),
            SlotKey(1, 0), SlotKey(1, 1),
            SlotKey(2, 0), SlotKey(2, 1), SlotKey(2, 2),
        }
        self.assertEqual(cluster, expected)

    def test_given_random_fields_when_collecting_then_only_requested_color(self):
        for seed in range(5):
            grid = create_grid(12, 10, 8, [R, G, B], random.Random(seed))
            for key, color in list(grid.occupied()):
                cluster = same_color_cluster(key, color, grid)
                for member in cluster:
                    self.assertEqual(grid.get(member), color)

    def test_given_origin_without_same_color_neighbor_when_collecting_then_empty(self):
        grid = make_grid([
            [B, G, B],
            [None, R, None],
        ])
        self.assertEqual(same_color_cluster(SlotKey(1, 1), R, grid), set())
        self.assertEqual(explode(SlotKey(1, 1), R, grid), 0)
        self.assertEqual(grid.get(SlotKey(1, 1)), R)

    def test_given_landed_bubble_when_exploding_then_cluster_emptied_and_origin_not_counted(self):
        grid = make_grid([
            [R, R, B],
            [R, None, None],
        ])
        # (1, 0) is the freshly landed red bubble
        removed = explode(SlotKey(1, 0), R, grid)
        self.assertEqual(removed, 2)
        for key in (SlotKey(0, 0), SlotKey(0, 1), SlotKey(1, 0)):
            self.assertIsNone(grid.get(key))
        self.assertEqual(grid.get(SlotKey(0, 2)), B)
        self.assertFalse(grid.is_cleared())

    def test_given_whole_field_one_cluster_when_exploding_then_cleared(self):
        grid = make_grid([
            [G, G],
            [G, None],
        ])
        grid.set(SlotKey(1, 1), G)
        explode(SlotKey(1, 1), G, grid)
        self.assertTrue(grid.is_cleared())


class TestLanding(unittest.TestCase):
    def test_given_target_near_one_neighbor_when_landing_then_closest_empty_neighbor(self):
        grid = make_grid([
            [None, R, None, None],
            [None, None, None, None],
        ])
        occupied = SlotKey(0, 1)
        # Bullet approaching from below-right of (0, 1)
        target = grid.position(occupied).add(grid.position(SlotKey(1, 1)).sub(grid.position(occupied)).scaled(0.8))
        self.assertEqual(nearest_empty_slot(target, grid, occupied), SlotKey(1, 1))

    def test_given_symmetric_candidates_when_landing_then_first_in_neighbor_order(self):
        grid = make_grid([[None, R, None]])
        target = grid.position(SlotKey(0, 1))
        first = nearest_empty_slot(target, grid)
        self.assertEqual(first, SlotKey(0, 0))
        self.assertEqual(nearest_empty_slot(target, grid), first)

    def test_given_only_occupied_neighbors_skipped_when_landing_then_picks_empty_one(self):
        grid = make_grid([
            [R, R, R],
            [R, None, R],
        ])
        self.assertEqual(nearest_empty_slot(grid.position(SlotKey(0, 1)), grid), SlotKey(1, 1))

    def test_given_no_empty_neighbor_when_landing_then_no_landing_slot(self):
        grid = make_grid([
            [R, B],
            [G, R],
        ])
        with self.assertRaises(NoLandingSlot):
            nearest_empty_slot(grid.position(SlotKey(0, 0)), grid, SlotKey(0, 0))


if __name__ == '__main__':
    unittest.main()
