import unittest
from fractions import Fraction

from cogeo.DCEL.geometry import (
    Point,
    Segment,
    TurnDirection,
    compare_by_angle_around,
    compare_x_then_y,
    midpoint,
    orientation,
)


class TestOrientation(unittest.TestCase):

    def test_turns(self):
        a, b = Point(0, 0), Point(1, 0)
        self.assertIs(orientation(a, b, Point(1, 1)), TurnDirection.LEFT_TURN)
        self.assertIs(orientation(a, b, Point(1, -1)), TurnDirection.RIGHT_TURN)
        self.assertIs(orientation(a, b, Point(2, 0)), TurnDirection.NO_TURN)
        # a point behind the start is still collinear
        self.assertIs(orientation(a, b, Point(-3, 0)), TurnDirection.NO_TURN)

    def test_exact_with_fractions(self):
        third = Fraction(1, 3)
        p = Point(0, 0)
        q = Point(3 * third, 3 * third)
        self.assertIs(orientation(p, q, Point(third, third)), TurnDirection.NO_TURN)
        self.assertIs(orientation(p, q, Point(third, third + Fraction(1, 10 ** 9))),
                      TurnDirection.LEFT_TURN)


class TestOrdering(unittest.TestCase):

    def test_compare_x_then_y(self):
        self.assertEqual(compare_x_then_y(Point(0, 5), Point(1, 0)), -1)
        self.assertEqual(compare_x_then_y(Point(1, 0), Point(0, 5)), 1)
        self.assertEqual(compare_x_then_y(Point(1, 0), Point(1, 2)), -1)
        self.assertEqual(compare_x_then_y(Point(1, 2), Point(1, 2)), 0)

    def test_compare_by_angle_around(self):
        pivot = Point(0, 0)
        # (0, 1) is counter-clockwise of (1, 0): clockwise order puts it first
        self.assertEqual(compare_by_angle_around(pivot, Point(1, 0), Point(0, 1)), 1)
        self.assertEqual(compare_by_angle_around(pivot, Point(0, 1), Point(1, 0)), -1)
        # same ray: nearer first
        self.assertEqual(compare_by_angle_around(pivot, Point(1, 1), Point(2, 2)), -1)

    def test_point_equality_and_hash(self):
        self.assertEqual(Point(1, 2), Point(1.0, 2.0))
        self.assertEqual(len({Point(1, 2), Point(1.0, 2.0), Point(2, 1)}), 2)
        self.assertNotEqual(Point(1, 2), (1, 2))
        self.assertEqual(Point(3, 4).coord(), (3, 4))
        self.assertEqual(tuple(Point(3, 4)), (3, 4))

    def test_midpoint(self):
        c = midpoint([Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)])
        self.assertEqual(c, Point(1, 1))


class TestSegment(unittest.TestCase):

    def setUp(self):
        self.line1 = Segment(Point(0, 0), Point(1, 1))
        self.line2 = Segment(Point(1, 0), Point(0, 1))
        self.line3 = Segment(Point(2, 0), Point(0, 2))
        self.line4 = Segment(Point(0.5, 0.5), Point(1.5, 1.5))
        self.line5 = Segment(Point(4.5, 4.5), Point(1.5, 1.5))

    def test_left_right(self):
        self.assertEqual(self.line5.left, Point(1.5, 1.5))
        self.assertEqual(self.line5.right, Point(4.5, 4.5))
        vertical = Segment((0, 3), (0, 1))
        self.assertEqual(vertical.left, Point(0, 1))
        self.assertTrue(vertical.is_vertical())

    def test_contains_point(self):
        self.assertTrue(self.line1.contains_point(Point(0.5, 0.5)))
        self.assertTrue(self.line1.contains_point(Point(0, 0)))
        self.assertTrue(self.line1.contains_point(Point(1, 1)))
        self.assertFalse(self.line1.contains_point(Point(0.5, 0.4)))
        self.assertFalse(self.line1.contains_point(Point(1.5, 1.5)))

    def test_contains_point_axis_aligned(self):
        vertical = Segment((0, 0), (0, 2))
        self.assertTrue(vertical.contains_point((0, 1)))
        self.assertFalse(vertical.contains_point((0.1, 1)))
        self.assertFalse(vertical.contains_point((0, 3)))

        horizontal = Segment((0, 3), (4, 3))
        self.assertTrue(horizontal.contains_point((2, 3)))
        self.assertFalse(horizontal.contains_point((2, 3.5)))

    def test_intersects(self):
        self.assertTrue(self.line1.intersects(self.line1))
        self.assertTrue(self.line1.intersects(self.line2))
        self.assertTrue(self.line2.intersects(self.line1))
        self.assertTrue(self.line1.intersects(self.line3), msg="touching at an endpoint")
        self.assertFalse(self.line3.intersects(self.line2), msg="parallel")
        self.assertTrue(self.line1.intersects(self.line4), msg="collinear overlap")
        self.assertFalse(self.line1.intersects(self.line5), msg="collinear, apart")

    def test_intersects_collinear_containment(self):
        outer = Segment((0, 0), (10, 0))
        inner = Segment((3, 0), (4, 0))
        self.assertTrue(outer.intersects(inner))
        self.assertTrue(inner.intersects(outer))

    def test_intersection_point(self):
        self.assertEqual(self.line1.intersection_point(self.line2), Point(0.5, 0.5))
        self.assertEqual(self.line2.intersection_point(self.line1), Point(0.5, 0.5))
        self.assertEqual(self.line1.intersection_point(self.line3), Point(1, 1))
        self.assertIsNone(self.line3.intersection_point(self.line2))
        self.assertIsNone(self.line1.intersection_point(self.line5))

    def test_intersection_point_collinear_overlap(self):
        # the overlap starts at the larger left endpoint, whichever way round
        self.assertEqual(self.line1.intersection_point(self.line4), Point(0.5, 0.5))
        self.assertEqual(self.line4.intersection_point(self.line1), Point(0.5, 0.5))

    def test_intersection_point_t_junction(self):
        stem = Segment((1, 0), (1, 1))
        bar = Segment((0, 1), (2, 1))
        self.assertEqual(stem.intersection_point(bar), Point(1, 1))
        self.assertEqual(bar.intersection_point(stem), Point(1, 1))

    def test_intersection_point_fraction(self):
        a = Segment(Point(Fraction(0), Fraction(0)), Point(Fraction(1), Fraction(3)))
        b = Segment(Point(Fraction(0), Fraction(1)), Point(Fraction(1), Fraction(0)))
        p = a.intersection_point(b)
        self.assertEqual(p, Point(Fraction(1, 4), Fraction(3, 4)))
        self.assertIsInstance(p.x, Fraction)

    def test_equality(self):
        self.assertEqual(Segment((0, 0), (1, 1)), self.line1)
        self.assertNotEqual(Segment((1, 1), (0, 0)), self.line1)
        self.assertFalse(self.line1.is_degenerate())
        self.assertTrue(Segment((1, 1), (1, 1)).is_degenerate())


if __name__ == "__main__":
    unittest.main()
