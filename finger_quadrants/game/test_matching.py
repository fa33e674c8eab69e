"""
Test suite for fingertip matching

Run with: python -m pytest finger_quadrants/game/test_matching.py -v
"""

import itertools
import unittest

from finger_quadrants.game.config import ColorSlot
from finger_quadrants.game.matching import (
    TrackedPoint,
    is_full_match,
    is_point_matched,
    match_count,
)

G, R, Y, B = ColorSlot.GREEN, ColorSlot.RED, ColorSlot.YELLOW, ColorSlot.BLUE

CENTERS = [(0.25, 0.25), (0.75, 0.25), (0.25, 0.75), (0.75, 0.75)]


def points_for(assignment):
    """One point per quadrant, each expecting the color that quadrant shows."""
    return [TrackedPoint(color, *CENTERS[i]) for i, color in enumerate(assignment)]


class TestMatchCount(unittest.TestCase):
    """Test cases for match_count."""

    def setUp(self):
        """Set up test fixtures."""
        self.assignment = (G, R, Y, B)

    def test_all_fingers_matched(self):
        """Test every fingertip on its own color."""
        self.assertEqual(match_count(self.assignment, points_for(self.assignment)), 4)

    def test_one_mismatch(self):
        """Test swapping one expected color drops the count to 3."""
        points = points_for(self.assignment)
        points[3] = TrackedPoint(G, *CENTERS[3])
        self.assertEqual(match_count(self.assignment, points), 3)

    def test_all_in_one_quadrant(self):
        """Test every fingertip bunched in the green quadrant."""
        points = [TrackedPoint(c, 0.1, 0.1) for c in (G, R, Y, B)]
        self.assertEqual(match_count(self.assignment, points), 1)

    def test_no_points(self):
        """Test an empty frame."""
        self.assertEqual(match_count(self.assignment, []), 0)

    def test_every_permutation(self):
        """Test full match and single mismatch for all 24 assignments."""
        for perm in itertools.permutations((G, R, Y, B)):
            points = points_for(perm)
            self.assertEqual(match_count(perm, points), 4)

            moved = list(points)
            moved[0] = TrackedPoint(points[0].color, *CENTERS[1])
            self.assertLess(match_count(perm, moved), 4)

    def test_is_point_matched(self):
        """Test a single point lookup."""
        self.assertTrue(is_point_matched(self.assignment, TrackedPoint(Y, 0.2, 0.8)))
        self.assertFalse(is_point_matched(self.assignment, TrackedPoint(Y, 0.8, 0.8)))

    def test_to_pixels(self):
        """Test pixel conversion on the logical canvas."""
        self.assertEqual(TrackedPoint(G, 0.5, 0.5).to_pixels(), (240, 180))


class TestIsFullMatch(unittest.TestCase):
    """Test cases for is_full_match."""

    def test_four_of_four(self):
        self.assertTrue(is_full_match(4))
        self.assertTrue(is_full_match(4, 4))

    def test_partial(self):
        self.assertFalse(is_full_match(3))
        self.assertFalse(is_full_match(0))

    def test_missing_points(self):
        """Test fewer than four tracked points can never fully match."""
        self.assertFalse(is_full_match(3, 3))
        self.assertFalse(is_full_match(4, 3))


if __name__ == '__main__':
    unittest.main(verbosity=2)
