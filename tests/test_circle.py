import math
import unittest

import numpy as np

from bgeo import Circle, IntersectionKind, Point
from bgeo import circle


class TestCircleClosestPoint(unittest.TestCase):
    def test_point_outside(self) -> None:
        p = circle.closest_point(0.0, 0.0, 5.0, 6.0, 8.0)
        self.assertAlmostEqual(p.x, 3.0, places=5)
        self.assertAlmostEqual(p.y, 4.0, places=5)

    def test_point_inside(self) -> None:
        p = circle.closest_point(1.0, 1.0, 2.0, 1.0, 1.5)
        self.assertAlmostEqual(p.x, 1.0, places=5)
        self.assertAlmostEqual(p.y, 3.0, places=5)

    def test_point_at_center_is_finite(self) -> None:
        p = circle.closest_point(2.0, -1.0, 3.0, 2.0, -1.0)
        self.assertEqual(p, Point(5.0, -1.0))
        self.assertTrue(np.isfinite(p.to_array()).all())

    def test_point_very_near_center_keeps_direction(self) -> None:
        p = circle.closest_point(0.0, 0.0, 5.0, 0.0, 1e-7)
        self.assertAlmostEqual(p.x, 0.0, places=5)
        self.assertAlmostEqual(p.y, 5.0, places=5)
        p = Circle.at(1.0, 1.0, 2.0).closest_point((1.0 - 1e-7, 1.0))
        self.assertAlmostEqual(p.x, -1.0, places=5)
        self.assertAlmostEqual(p.y, 1.0, places=5)

    def test_result_lies_on_perimeter(self) -> None:
        c = Circle.at(-3.0, 2.0, 4.5)
        for q in [(10.0, 7.0), (-3.5, 2.25), (-20.0, -13.0)]:
            p = c.closest_point(q)
            self.assertAlmostEqual(math.hypot(p.x - c.center.x, p.y - c.center.y), 4.5, delta=1e-5)


class TestCircleCheckIntersection(unittest.TestCase):
    def test_overlapping(self) -> None:
        self.assertTrue(circle.check_intersection(0.0, 0.0, 5.0, 8.0, 0.0, 5.0))

    def test_external_tangency(self) -> None:
        self.assertTrue(circle.check_intersection(0.0, 0.0, 5.0, 10.0, 0.0, 5.0))

    def test_internal_tangency(self) -> None:
        self.assertTrue(circle.check_intersection(0.0, 0.0, 5.0, 2.0, 0.0, 3.0))

    def test_separated(self) -> None:
        self.assertFalse(circle.check_intersection(0.0, 0.0, 1.0, 5.0, 0.0, 1.0))

    def test_contained(self) -> None:
        self.assertFalse(circle.check_intersection(0.0, 0.0, 5.0, 1.0, 0.0, 1.0))

    def test_concentric(self) -> None:
        self.assertFalse(circle.check_intersection(1.0, 1.0, 2.0, 1.0, 1.0, 2.0))

    def test_legacy_gate_rejects_overlapping_pair(self) -> None:
        self.assertFalse(circle.check_intersection(0.0, 0.0, 5.0, 8.0, 0.0, 5.0, legacy_gate=True))
        self.assertFalse(circle.check_intersection(0.0, 0.0, 5.0, 10.0, 0.0, 5.0, legacy_gate=True))

    def test_legacy_gate_accepts_coincident_points(self) -> None:
        self.assertTrue(circle.check_intersection(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, legacy_gate=True))

    def test_eps_widens_tangency(self) -> None:
        self.assertFalse(circle.check_intersection(0.0, 0.0, 5.0, 10.01, 0.0, 5.0))
        self.assertTrue(circle.check_intersection(0.0, 0.0, 5.0, 10.01, 0.0, 5.0, eps=0.1))


class TestCircleIntersect(unittest.TestCase):
    def test_symmetric_pair(self) -> None:
        hits = circle.intersect(0.0, 0.0, 5.0, 8.0, 0.0, 5.0)
        self.assertIs(hits.kind, IntersectionKind.TWO)
        ys = sorted(p.y for p in hits)
        for p in hits:
            self.assertAlmostEqual(p.x, 4.0, places=5)
        self.assertAlmostEqual(ys[0], -3.0, places=5)
        self.assertAlmostEqual(ys[1], 3.0, places=5)

    def test_points_lie_on_both_circles(self) -> None:
        cases = [
            (0.0, 0.0, 5.0, 6.0, 2.0, 4.0),
            (-2.0, 3.0, 1.5, -1.0, 4.0, 2.0),
            (10.0, 10.0, 7.0, 4.0, 6.0, 3.5),
        ]
        for ax, ay, ar, bx, by, br in cases:
            hits = circle.intersect(ax, ay, ar, bx, by, br)
            self.assertEqual(len(hits), 2)
            for p in hits:
                self.assertAlmostEqual(math.hypot(p.x - ax, p.y - ay), ar, delta=1e-4)
                self.assertAlmostEqual(math.hypot(p.x - bx, p.y - by), br, delta=1e-4)

    def test_tangency_yields_two_coincident_points(self) -> None:
        hits = circle.intersect(0.0, 0.0, 5.0, 10.0, 0.0, 5.0)
        self.assertEqual(len(hits), 2)
        self.assertEqual(hits[0], hits[1])
        self.assertAlmostEqual(hits[0].x, 5.0, places=5)
        self.assertAlmostEqual(hits[0].y, 0.0, places=5)

    def test_no_intersection(self) -> None:
        self.assertFalse(circle.intersect(0.0, 0.0, 1.0, 5.0, 0.0, 1.0))
        self.assertFalse(circle.intersect(0.0, 0.0, 5.0, 1.0, 0.0, 1.0))
        self.assertFalse(circle.intersect(3.0, 3.0, 2.0, 3.0, 3.0, 2.0))

    def test_legacy_gate(self) -> None:
        self.assertFalse(circle.intersect(0.0, 0.0, 5.0, 8.0, 0.0, 5.0, legacy_gate=True))
        self.assertFalse(circle.intersect(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, legacy_gate=True))


class TestCircleValue(unittest.TestCase):
    def test_construction(self) -> None:
        c = Circle((1, 2), 3)
        self.assertEqual(c.center, Point(1.0, 2.0))
        self.assertIsInstance(c.radius, np.float32)
        self.assertEqual(c, Circle.at(1.0, 2.0, 3.0))

    def test_methods_forward(self) -> None:
        a = Circle.at(0.0, 0.0, 5.0)
        b = Circle.at(8.0, 0.0, 5.0)
        self.assertTrue(a.check_intersection(b))
        self.assertEqual(a.intersect(b), a.intersect_at(8.0, 0.0, 5.0))
        self.assertEqual(a.intersect(b), circle.intersect(0.0, 0.0, 5.0, 8.0, 0.0, 5.0))
        self.assertFalse(a.intersect(b, legacy_gate=True))

    def test_fields_are_mutable(self) -> None:
        c = Circle.at(0.0, 0.0, 1.0)
        c.radius = 5.0
        c.center = Point(8.0, 0.0)
        self.assertTrue(c.check_intersection(Circle.at(0.0, 0.0, 5.0)))

    def test_str(self) -> None:
        self.assertEqual(str(Circle.at(0.0, 1.5, 5.0)), "bgeo.Circle | center [0.0, 1.5] | radius [5.0]")
