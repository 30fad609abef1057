# krigcov/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Correlation functions and covariance parameters.

Modules
-------
correlation
    Correlation families acting on rescaled coordinates.
parameters
    Covariance parameters, kernel selection and scaling factors.

Public API
-----------
- Correlation families:
    Family, CorrelationFunction, make_correlation_function
- Kernel functions on absolute differences:
    white_noise_kernel, gauss_kernel, exponential_kernel,
    matern32_kernel, matern52_kernel, powexp_kernel
- Parameters:
    CovarianceParameters
"""

from .correlation import (
    Family,
    CorrelationFunction,
    make_correlation_function,
    white_noise_kernel,
    gauss_kernel,
    exponential_kernel,
    matern32_kernel,
    matern52_kernel,
    powexp_kernel,
    SCALING_FACTORS,
)
from .parameters import CovarianceParameters

__all__ = [
    # Families
    "Family",
    "CorrelationFunction",
    "make_correlation_function",
    "SCALING_FACTORS",
    # Kernels
    "white_noise_kernel",
    "gauss_kernel",
    "exponential_kernel",
    "matern32_kernel",
    "matern52_kernel",
    "powexp_kernel",
    # Parameters
    "CovarianceParameters",
]
