# krigcov/kernel/parameters.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance parameters and the precomputations they carry.
"""
import krigcov.num as gnp
from .correlation import make_correlation_function

# added to the variance before inversion
_VARIANCE_EPS = 1e-100


class CovarianceParameters:
    """Covariance parameters with their correlation function.

    The correlation function is selected from ``cov_type`` and owned by
    this object. Per-dimension scaling factors, used to rescale
    coordinates once so that correlation functions work with unit
    lengthscales, are computed at construction:

    .. math::
        s_k = c / \\rho_k

    where :math:`c` is the scaling factor of the correlation family and
    :math:`\\rho_k` the lengthscale ``param[k]``.

    Instances are immutable and cannot be copied; share them by
    reference.

    Parameters
    ----------
    d : int
        Dimension of the input space.
    param : array_like, shape (d,) or (2d,)
        Lengthscales, followed by exponents for ``"powexp"``.
    variance : float
        Signal variance.
    cov_type : str
        One of ``"white_noise"``, ``"gauss"``, ``"exp"``, ``"matern3_2"``,
        ``"matern5_2"``, ``"powexp"``. Other names fall back to ``"exp"``.

    Raises
    ------
    ValueError
        If ``param`` holds fewer than ``d`` values (``2d`` for ``"powexp"``).
    """

    __slots__ = (
        "d",
        "_param",
        "variance",
        "inverse_variance",
        "corr_function",
        "_scaling_factors",
    )

    def __init__(self, d, param, variance, cov_type):
        d = int(d)
        param = gnp.ascontiguous(param).reshape(-1)
        if param.shape[0] < d:
            raise ValueError(f"expected {d} lengthscales, got {param.shape[0]} parameters")
        # powexp checks its own exponents
        corr_function = make_correlation_function(cov_type, d, param)
        scaling_factors = corr_function.scaling_factor / param[:d]

        setattr_ = object.__setattr__
        setattr_(self, "d", d)
        setattr_(self, "_param", param)
        setattr_(self, "variance", float(variance))
        setattr_(self, "inverse_variance", 1.0 / (float(variance) + _VARIANCE_EPS))
        setattr_(self, "corr_function", corr_function)
        setattr_(self, "_scaling_factors", scaling_factors)

    @property
    def param(self):
        return gnp.readonly(self._param)

    @property
    def scaling_factors(self):
        """Per-dimension scaling factors, read-only, shape (d,)."""
        return gnp.readonly(self._scaling_factors)

    @property
    def cov_type(self):
        return self.corr_function.family.value

    def __setattr__(self, name, value):
        raise AttributeError("CovarianceParameters is immutable")

    def __delattr__(self, name):
        raise AttributeError("CovarianceParameters is immutable")

    def __copy__(self):
        raise TypeError("CovarianceParameters cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("CovarianceParameters cannot be copied")

    def __reduce__(self):
        raise TypeError("CovarianceParameters cannot be pickled")

    def __repr__(self):
        return (
            f"CovarianceParameters(d={self.d}, cov_type={self.cov_type!r}, "
            f"variance={self.variance})"
        )
