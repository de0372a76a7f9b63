import math
import unittest

import numpy as np

from phasor_analyzer.analysis.sampling import sample_table
from phasor_analyzer.analysis.superposition import PHASOR_COLUMNS, phasor_table, superpose
from phasor_analyzer.models.sinusoid import DifferentFrequencyError, Sinusoid


class TestSuperpose(unittest.TestCase):
    def test_single_sinusoid_is_returned_unchanged(self):
        s = Sinusoid(2.0, 5.0, 0.1)
        self.assertIs(superpose([s]), s)

    def test_balanced_three_phase_cancels(self):
        f = 50.0
        phases = [0.0, -2.0 * math.pi / 3.0, 2.0 * math.pi / 3.0]
        total = superpose(Sinusoid(1.0, f, p) for p in phases)
        self.assertAlmostEqual(total.amplitude, 0.0, places=12)
        self.assertEqual(total.frequency, f)

    def test_matches_sampled_sum(self):
        parts = [Sinusoid(1.0, 2.0, 0.0), Sinusoid(0.5, 2.0, 1.2), Sinusoid(0.25, 2.0, -2.5)]
        total = superpose(parts)

        df = sample_table(parts, 0.0, 1.0, 64.0)
        direct = np.array(total.sample_range(0.0, 1.0, 64.0))
        self.assertTrue(np.allclose(df["sum"].to_numpy(), direct, atol=1e-12, rtol=0.0))

    def test_empty_rejected(self):
        with self.assertRaises(ValueError):
            superpose([])

    def test_mismatched_frequency_propagates(self):
        with self.assertRaises(DifferentFrequencyError):
            superpose([Sinusoid(1.0, 1.0, 0.0), Sinusoid(1.0, 1.0, 0.5), Sinusoid(1.0, 2.0, 0.0)])


class TestPhasorTable(unittest.TestCase):
    def test_columns_and_values(self):
        df = phasor_table([Sinusoid(2.0, 10.0, math.pi / 2), Sinusoid(1.0, 10.0, 0.0)])
        self.assertEqual(list(df.columns), list(PHASOR_COLUMNS))
        self.assertEqual(len(df), 2)
        self.assertTrue(np.allclose(df["real"], [0.0, 1.0], atol=1e-12))
        self.assertTrue(np.allclose(df["imag"], [2.0, 0.0], atol=1e-12))

    def test_empty(self):
        df = phasor_table([])
        self.assertEqual(list(df.columns), list(PHASOR_COLUMNS))
        self.assertEqual(len(df), 0)


if __name__ == "__main__":
    unittest.main()
