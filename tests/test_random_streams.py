"""Tests for random variate streams."""

import unittest

from smplsim.workload.random_streams import RandomStreams


class TestRandomStreams(unittest.TestCase):
    """Test cases for RandomStreams."""

    def setUp(self):
        """Set up test fixtures."""
        self.streams = RandomStreams(seed=7)

    def test_irandom_bounds(self):
        """Test uniform integers stay in [low, high)."""
        values = [self.streams.irandom(14, 26) for _ in range(500)]

        self.assertGreaterEqual(min(values), 14)
        self.assertLessEqual(max(values), 25)
        self.assertTrue(all(isinstance(v, int) for v in values))

    def test_irandom_swapped_bounds(self):
        """Test reversed bounds are swapped."""
        values = [self.streams.irandom(20, 10) for _ in range(200)]

        self.assertGreaterEqual(min(values), 10)
        self.assertLess(max(values), 20)

    def test_irandom_equal_bounds(self):
        """Test equal bounds return the bound."""
        self.assertEqual(self.streams.irandom(5, 5), 5)

    def test_frandom_range(self):
        """Test uniform floats stay in [0, 1)."""
        values = [self.streams.frandom() for _ in range(500)]

        self.assertGreaterEqual(min(values), 0.0)
        self.assertLess(max(values), 1.0)

    def test_neg_exp(self):
        """Test exponential delays are non-negative with a plausible mean."""
        values = [self.streams.neg_exp(10) for _ in range(5000)]

        self.assertGreaterEqual(min(values), 0)
        self.assertAlmostEqual(sum(values) / len(values), 10, delta=1.0)
        self.assertEqual(self.streams.neg_exp(0), 0)

    def test_poisson(self):
        """Test Poisson counts have a plausible mean."""
        values = [self.streams.poisson(4) for _ in range(5000)]

        self.assertGreaterEqual(min(values), 0)
        self.assertAlmostEqual(sum(values) / len(values), 4, delta=0.3)

    def test_negative_means_rejected(self):
        """Test negative means fail."""
        with self.assertRaises(ValueError):
            self.streams.neg_exp(-1)
        with self.assertRaises(ValueError):
            self.streams.poisson(-1)

    def test_reproducible(self):
        """Test equal seeds give equal sequences."""
        a = RandomStreams(seed=99)
        b = RandomStreams(seed=99)

        self.assertEqual(
            [a.irandom(0, 1000) for _ in range(20)],
            [b.irandom(0, 1000) for _ in range(20)],
        )

    def test_sample(self):
        """Test drawing from config sections."""
        self.assertEqual(self.streams.sample({'distribution': 'constant', 'mean': 10}), 10)
        self.assertEqual(self.streams.sample({'mean': 3}), 3)

        value = self.streams.sample({'distribution': 'uniform', 'low': 1, 'high': 3})
        self.assertIn(value, (1, 2))

        self.assertGreaterEqual(self.streams.sample({'distribution': 'exponential', 'mean': 5}), 0)
        self.assertGreaterEqual(self.streams.sample({'distribution': 'poisson', 'mean': 5}), 0)

    def test_sample_unknown_distribution(self):
        """Test unknown distributions fail."""
        with self.assertRaises(ValueError):
            self.streams.sample({'distribution': 'weibull', 'mean': 1})


if __name__ == '__main__':
    unittest.main()
