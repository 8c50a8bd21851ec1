import unittest

import numpy as np

from bgeo import Intersection, IntersectionKind, Point, as_point, points_to_array


class TestPoint(unittest.TestCase):
    def test_coordinates_are_single_precision(self) -> None:
        p = Point(0.1, 2)
        self.assertIsInstance(p.x, np.float32)
        self.assertIsInstance(p.y, np.float32)
        self.assertEqual(p.x, np.float32(0.1))

    def test_unpacking(self) -> None:
        x, y = Point(3.0, -4.0)
        self.assertEqual((x, y), (3.0, -4.0))

    def test_value_equality(self) -> None:
        self.assertEqual(Point(1.0, 2.0), Point(1, 2))
        self.assertNotEqual(Point(1.0, 2.0), Point(2.0, 1.0))
        self.assertEqual(len({Point(1.0, 2.0), Point(1, 2)}), 1)

    def test_nan_propagates(self) -> None:
        p = Point(float("nan"), 1.0)
        self.assertTrue(np.isnan(p.x))

    def test_as_point(self) -> None:
        p = Point(1.0, 2.0)
        self.assertIs(as_point(p), p)
        self.assertEqual(as_point((1, 2)), p)
        self.assertEqual(as_point(np.array([1.0, 2.0])), p)
        with self.assertRaises(ValueError):
            as_point((1.0, 2.0, 3.0))

    def test_points_to_array(self) -> None:
        arr = points_to_array([Point(0.0, 1.0), (2.0, 3.0)])
        self.assertEqual(arr.shape, (2, 2))
        self.assertEqual(arr.dtype, np.float32)
        np.testing.assert_array_equal(arr, [[0.0, 1.0], [2.0, 3.0]])
        self.assertEqual(points_to_array([]).shape, (0, 2))


class TestIntersection(unittest.TestCase):
    def test_kinds(self) -> None:
        p = Point(1.0, 2.0)
        q = Point(3.0, 4.0)
        self.assertIs(Intersection.none().kind, IntersectionKind.NONE)
        self.assertIs(Intersection.one(p).kind, IntersectionKind.ONE)
        self.assertIs(Intersection.two(p, q).kind, IntersectionKind.TWO)

    def test_sequence_behaviour(self) -> None:
        p = Point(1.0, 2.0)
        q = Point(3.0, 4.0)
        hits = Intersection.two(p, q)
        self.assertTrue(hits)
        self.assertEqual(len(hits), 2)
        self.assertEqual(list(hits), [p, q])
        self.assertEqual(hits[1], q)
        self.assertFalse(Intersection.none())

    def test_at_most_two_points(self) -> None:
        p = Point(0.0, 0.0)
        with self.assertRaises(ValueError):
            Intersection((p, p, p))

    def test_to_json(self) -> None:
        self.assertIsNone(Intersection.none().to_json())
        self.assertEqual(Intersection.one(Point(1.5, 2.0)).to_json(), [[1.5, 2.0]])
