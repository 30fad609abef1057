# krigcov/kernel/correlation.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Correlation functions acting on rescaled coordinates.

Points are rescaled once (see :class:`krigcov.points.Points`) so that
every correlation function below can assume unit lengthscales. The
argument ``h`` of the kernel functions is the array of absolute
coordinate differences, with shape ``(..., d)``; the last axis is
reduced.
"""
from enum import Enum
from math import sqrt

import krigcov.num as gnp
from krigcov.config import get_logger

_WHITE_NOISE_THRESHOLD = 1e-15


class Family(str, Enum):
    """Closed set of supported correlation families."""

    WHITE_NOISE = "white_noise"
    GAUSS = "gauss"
    EXP = "exp"
    MATERN32 = "matern3_2"
    MATERN52 = "matern5_2"
    POWEXP = "powexp"

    @classmethod
    def from_name(cls, name):
        """Resolve a family from its exact name.

        Unknown names fall back to :attr:`Family.EXP` with a warning.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            get_logger().warning(
                "covType %r wrongly written, using exponential kernel", name
            )
            return cls.EXP


# ..................................................
# kernel functions on absolute differences h, shape (..., d)

def white_noise_kernel(h, offset=0.0):
    """White noise kernel: 1 on coincident points, 0 elsewhere."""
    return _white_noise_profile(gnp.sum(h, axis=-1), offset)


def gauss_kernel(h, offset=0.0):
    """Gaussian kernel.

    .. math::
        k(h) = \\exp\\left(-\\sum_k h_k^2\\right)
    """
    return _exp_profile(gnp.sum(h * h, axis=-1), offset)


def exponential_kernel(h, offset=0.0):
    """Separable exponential kernel.

    .. math::
        k(h) = \\exp\\left(-\\sum_k h_k\\right)
    """
    return _exp_profile(gnp.sum(h, axis=-1), offset)


def matern32_kernel(h, offset=0.0):
    """Separable Matérn 3/2 kernel on coordinates scaled by :math:`\\sqrt{3}`.

    .. math::
        k(h) = \\exp\\left(-\\sum_k h_k\\right) \\prod_k (1 + h_k)
    """
    return gnp.prod(1.0 + h, axis=-1) * gnp.exp(-(offset + gnp.sum(h, axis=-1)))


def matern52_kernel(h, offset=0.0):
    """Separable Matérn 5/2 kernel on coordinates scaled by :math:`\\sqrt{5}`.

    .. math::
        k(h) = \\exp\\left(-\\sum_k h_k\\right) \\prod_k (1 + h_k + h_k^2/3)
    """
    polynomial = gnp.prod(1.0 + h + h * h * (1.0 / 3.0), axis=-1)
    return polynomial * gnp.exp(-(offset + gnp.sum(h, axis=-1)))


def powexp_kernel(h, exponents):
    """Power-exponential kernel.

    .. math::
        k(h) = \\exp\\left(-\\sum_k h_k^{p_k}\\right)

    Parameters
    ----------
    h : gnp.array, shape (..., d)
        Absolute differences of rescaled coordinates.
    exponents : gnp.array, shape (d,)
        Per-dimension exponents :math:`p_k`.
    """
    return gnp.exp(-gnp.sum(gnp.power(h, exponents), axis=-1))


def _exp_profile(s, offset):
    return gnp.exp(-(offset + s))


def _white_noise_profile(s, offset):
    return gnp.where(s < _WHITE_NOISE_THRESHOLD, 1.0, 0.0)


_KERNELS = {
    Family.WHITE_NOISE: white_noise_kernel,
    Family.GAUSS: gauss_kernel,
    Family.EXP: exponential_kernel,
    Family.MATERN32: matern32_kernel,
    Family.MATERN52: matern52_kernel,
}

# families whose kernel only depends on a summed distance, computed by cdist
_SUMMED_DISTANCE = {
    Family.WHITE_NOISE: ("cityblock", _white_noise_profile),
    Family.GAUSS: ("sqeuclidean", _exp_profile),
    Family.EXP: ("cityblock", _exp_profile),
}

SCALING_FACTORS = {
    Family.WHITE_NOISE: 1.0,
    Family.GAUSS: sqrt(2.0) / 2.0,
    Family.EXP: 1.0,
    Family.MATERN32: sqrt(3.0),
    Family.MATERN52: sqrt(5.0),
    Family.POWEXP: 1.0,
}


class CorrelationFunction:
    """Pairwise correlation of rescaled points.

    Parameters
    ----------
    family : Family or str
        Correlation family.
    d : int
        Dimension of the points.
    exponents : array_like, shape (d,), optional
        Per-dimension exponents, required by :attr:`Family.POWEXP`.

    Notes
    -----
    ``offset`` is added to the summed distance of the gauss, exp and
    Matérn families before exponentiation (off-diagonal tiny nugget).
    The white noise and power-exponential families ignore it.
    """

    __slots__ = ("family", "d", "_exponents")

    def __init__(self, family, d, exponents=None):
        family = Family.from_name(family)
        if family is Family.POWEXP:
            if exponents is None:
                raise ValueError("powexp correlation requires exponents")
            exponents = gnp.ascontiguous(exponents).reshape(-1)
            if exponents.shape[0] != int(d):
                raise ValueError(f"powexp correlation requires {int(d)} exponents")
        object.__setattr__(self, "family", family)
        object.__setattr__(self, "d", int(d))
        object.__setattr__(self, "_exponents", exponents)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self):
        return f"CorrelationFunction(family={self.family.value!r}, d={self.d})"

    @property
    def exponents(self):
        if self._exponents is None:
            return None
        return gnp.readonly(self._exponents)

    @property
    def scaling_factor(self):
        return SCALING_FACTORS[self.family]

    def kernel(self, h, offset=0.0):
        """Evaluate the family kernel on absolute differences h, shape (..., d)."""
        if self.family is Family.POWEXP:
            return powexp_kernel(h, self._exponents)
        return _KERNELS[self.family](h, offset)

    def corr(self, x1, x2, offset=0.0):
        """Correlation between two rescaled points, as a float."""
        return gnp.to_scalar(self.kernel(gnp.abs(x1 - x2), offset))

    def corr_rows(self, x, ys, offset=0.0):
        """Correlations between point x, shape (d,), and rows of ys, shape (m, d)."""
        return self.kernel(gnp.abs(ys - x), offset)

    def corr_block(self, xs, ys, offset=0.0):
        """Correlation matrix between rows of xs (nx, d) and ys (ny, d)."""
        summed = _SUMMED_DISTANCE.get(self.family)
        if summed is not None:
            metric, profile = summed
            return profile(gnp.cdist(xs, ys, metric), offset)
        return self.kernel(gnp.abs(xs[:, None, :] - ys[None, :, :]), offset)


def make_correlation_function(cov_type, d, param=None):
    """Build the correlation function named ``cov_type``.

    For ``"powexp"``, ``param`` holds ``d`` lengthscales followed by
    ``d`` exponents and the exponents are kept by the kernel.
    """
    family = Family.from_name(cov_type)
    exponents = None
    if family is Family.POWEXP:
        exponents = gnp.asarray(param).reshape(-1)[d : 2 * d]
    return CorrelationFunction(family, d, exponents)
