"""
Unit tests for the correlation families.
"""

import math
import unittest

import krigcov.num as gnp
from krigcov.kernel import (
    Family,
    CorrelationFunction,
    make_correlation_function,
    SCALING_FACTORS,
    matern32_kernel,
    matern52_kernel,
)


def make_points(n=15, d=3, seed=0):
    gnp.set_seed(seed)
    return gnp.randn(n, d)


def all_correlations(d):
    corrs = []
    for family in Family:
        exponents = [1.5] * d if family is Family.POWEXP else None
        corrs.append(CorrelationFunction(family, d, exponents))
    return corrs


class TestKernelFormulas(unittest.TestCase):

    def setUp(self):
        self.x1 = gnp.array([0.3, -1.2])
        self.x2 = gnp.array([1.1, 0.4])
        self.h = [0.8, 1.6]

    def test_gauss(self):
        c = CorrelationFunction("gauss", 2)
        expected = math.exp(-(0.8**2 + 1.6**2))
        self.assertAlmostEqual(c.corr(self.x1, self.x2), expected)

    def test_exp(self):
        c = CorrelationFunction("exp", 2)
        self.assertAlmostEqual(c.corr(self.x1, self.x2), math.exp(-2.4))

    def test_matern32(self):
        c = CorrelationFunction("matern3_2", 2)
        expected = math.exp(-2.4) * (1 + 0.8) * (1 + 1.6)
        self.assertAlmostEqual(c.corr(self.x1, self.x2), expected)

    def test_matern52(self):
        c = CorrelationFunction("matern5_2", 2)
        expected = (
            math.exp(-2.4)
            * (1 + 0.8 + 0.8**2 / 3)
            * (1 + 1.6 + 1.6**2 / 3)
        )
        self.assertAlmostEqual(c.corr(self.x1, self.x2), expected)

    def test_powexp(self):
        c = CorrelationFunction("powexp", 2, exponents=[1.0, 2.0])
        expected = math.exp(-(0.8 + 1.6**2))
        self.assertAlmostEqual(c.corr(self.x1, self.x2), expected)

    def test_white_noise(self):
        c = CorrelationFunction("white_noise", 2)
        self.assertEqual(c.corr(self.x1, self.x1), 1.0)
        self.assertEqual(c.corr(self.x1, self.x2), 0.0)
        shifted = gnp.array([0.3 + 1e-10, -1.2])
        self.assertEqual(c.corr(self.x1, shifted), 0.0)

    def test_kernel_functions_on_zero_distance(self):
        h = gnp.zeros((4, 3))
        self.assertTrue(gnp.allclose(matern32_kernel(h), gnp.ones(4)))
        self.assertTrue(gnp.allclose(matern52_kernel(h), gnp.ones(4)))

    def test_offset_scales_correlations(self):
        c = CorrelationFunction("exp", 2)
        base = c.corr(self.x1, self.x2)
        self.assertAlmostEqual(c.corr(self.x1, self.x2, offset=0.5), base * math.exp(-0.5))


class TestScenarios(unittest.TestCase):

    def test_exponential_one_dimension(self):
        c = CorrelationFunction("exp", 1)
        self.assertAlmostEqual(c.corr(gnp.array([0.0]), gnp.array([1.0])), 0.36787944117144233)

    def test_gauss_two_dimensions(self):
        c = CorrelationFunction("gauss", 2)
        r = c.corr(gnp.array([0.0, 0.0]), gnp.array([1.0, 1.0]))
        self.assertAlmostEqual(r, math.exp(-2.0))
        self.assertAlmostEqual(r, 0.1353352832366127)


class TestProperties(unittest.TestCase):

    def test_unit_correlation_on_coincident_points(self):
        x = make_points()
        for c in all_correlations(3):
            for i in range(x.shape[0]):
                if c.family in (Family.GAUSS, Family.POWEXP):
                    self.assertAlmostEqual(c.corr(x[i], x[i]), 1.0)
                else:
                    self.assertEqual(c.corr(x[i], x[i]), 1.0)

    def test_symmetry(self):
        x = make_points()
        for c in all_correlations(3):
            for i in range(x.shape[0]):
                for j in range(i):
                    self.assertEqual(c.corr(x[i], x[j]), c.corr(x[j], x[i]))

    def test_range(self):
        x = make_points(n=10, d=2) * 0.5
        for c in all_correlations(2):
            if c.family is Family.WHITE_NOISE:
                continue
            for i in range(x.shape[0]):
                for j in range(i):
                    r = c.corr(x[i], x[j])
                    self.assertGreater(r, 0.0)
                    self.assertLessEqual(r, 1.0)

    def test_rows_and_block_match_pairwise(self):
        x = make_points(n=8, d=3)
        y = make_points(n=5, d=3, seed=1)
        for c in all_correlations(3):
            block = c.corr_block(x, y)
            self.assertEqual(block.shape, (8, 5))
            for i in range(8):
                rows = c.corr_rows(x[i], y)
                for j in range(5):
                    expected = c.corr(x[i], y[j])
                    self.assertAlmostEqual(gnp.to_scalar(block[i, j]), expected, places=12)
                    self.assertAlmostEqual(gnp.to_scalar(rows[j]), expected, places=12)


class TestFamilies(unittest.TestCase):

    def test_scaling_factors(self):
        self.assertEqual(SCALING_FACTORS[Family.WHITE_NOISE], 1.0)
        self.assertEqual(SCALING_FACTORS[Family.EXP], 1.0)
        self.assertEqual(SCALING_FACTORS[Family.POWEXP], 1.0)
        self.assertAlmostEqual(SCALING_FACTORS[Family.GAUSS], math.sqrt(2) / 2)
        self.assertAlmostEqual(SCALING_FACTORS[Family.MATERN32], math.sqrt(3))
        self.assertAlmostEqual(SCALING_FACTORS[Family.MATERN52], math.sqrt(5))
        self.assertAlmostEqual(CorrelationFunction("matern5_2", 2).scaling_factor, math.sqrt(5))

    def test_names(self):
        names = {f.value for f in Family}
        self.assertEqual(
            names, {"white_noise", "gauss", "exp", "matern3_2", "matern5_2", "powexp"}
        )
        self.assertIs(Family.from_name("matern3_2"), Family.MATERN32)

    def test_unknown_name_falls_back_to_exp(self):
        with self.assertLogs("krigcov", level="WARNING") as logs:
            family = Family.from_name("Matern5_2")
        self.assertIs(family, Family.EXP)
        self.assertIn("exponential", logs.output[0])

    def test_factory_extracts_powexp_exponents(self):
        c = make_correlation_function("powexp", 2, [0.5, 2.0, 1.0, 1.9])
        self.assertTrue(gnp.allclose(c.exponents, gnp.array([1.0, 1.9])))
        self.assertIsNone(make_correlation_function("gauss", 2, [0.5, 2.0]).exponents)

    def test_powexp_requires_exponents(self):
        with self.assertRaises(ValueError):
            CorrelationFunction("powexp", 2)
        with self.assertRaises(ValueError):
            CorrelationFunction("powexp", 2, exponents=[1.5])
        with self.assertRaises(ValueError):
            make_correlation_function("powexp", 1, [0.5])

    def test_immutable(self):
        c = CorrelationFunction("exp", 2)
        with self.assertRaises(AttributeError):
            c.d = 3


if __name__ == "__main__":
    unittest.main()
