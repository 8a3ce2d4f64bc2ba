"""Tests for angle helpers."""

import unittest

from solarkit.angles import clamp, normalize_degrees


class TestNormalizeDegrees(unittest.TestCase):
    def test_wraps_into_range(self):
        self.assertEqual(normalize_degrees(0.0), 0.0)
        self.assertEqual(normalize_degrees(360.0), 0.0)
        self.assertEqual(normalize_degrees(720.0), 0.0)
        self.assertEqual(normalize_degrees(-90.0), 270.0)
        self.assertAlmostEqual(normalize_degrees(450.5), 90.5)
        self.assertAlmostEqual(normalize_degrees(-359.9), 0.1)

    def test_tiny_negative_never_returns_360(self):
        for angle in (-1e-13, -1e-15, -1e-17, -5e-324):
            with self.subTest(angle=angle):
                result = normalize_degrees(angle)
                self.assertGreaterEqual(result, 0.0)
                self.assertLess(result, 360.0)


class TestClamp(unittest.TestCase):
    def test_clamp(self):
        self.assertEqual(clamp(1.0000000000000002, -1.0, 1.0), 1.0)
        self.assertEqual(clamp(-1.5, -1.0, 1.0), -1.0)
        self.assertEqual(clamp(0.25, -1.0, 1.0), 0.25)


if __name__ == "__main__":
    unittest.main()
