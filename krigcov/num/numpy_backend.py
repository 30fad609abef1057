# krigcov/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for krigcov.

This module defines the NumPy implementation of the krigcov.num API.
"""

from typing import Any, Sequence
from krigcov.config import get_config, init_backend, get_logger

ArrayLike = Any

_krigcov_backend_: str = init_backend()
_config = get_config()
_logger = get_logger()
_logger.info("Using backend: %s", _krigcov_backend_)


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy

_np_dtype = numpy.float64
_config.dtype_resolved = _np_dtype

from numpy import (
    array_equal,
    where,
    allclose,
    arange,
    linspace,
    abs,
    exp,
    power,
    sum,
    prod,
    max,
    diag,
)
from scipy.spatial.distance import cdist as _scipy_cdist

# ..................................................

def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.floating):
        return out.astype(_np_dtype, copy=False)
    return out

def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        return x
    elif isinstance(x, (int, float)):
        dt = _np_dtype if isinstance(x, float) else None
        return numpy.array([x], dtype=dt)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.floating):
            return out.astype(_np_dtype, copy=False)
        return out

def empty(shape, dtype=None, order="C"):
    return numpy.empty(shape, dtype=_np_dtype if dtype is None else dtype, order=order)

def zeros(shape, dtype=None, order="C"):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype, order=order)

def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)

def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)

def to_np(x):
    return x

def to_scalar(x):
    return x.item()

# ..................................................
# storage and layout

def ascontiguous(x, order="C"):
    """Float64 copy of x laid out in the given memory order."""
    return numpy.array(x, dtype=_np_dtype, order=order, copy=True)

def is_column_major(x) -> bool:
    """True when the second axis has the smallest stride."""
    return bool(x.flags.f_contiguous and not x.flags.c_contiguous)

def readonly(x):
    v = x.view()
    v.flags.writeable = False
    return v

def take_rows(x, indices: Sequence[int], order="C"):
    return numpy.asarray(numpy.take(x, numpy.asarray(indices, dtype=int), axis=0), order=order)

def fill_diagonal_(x, values):
    numpy.fill_diagonal(x, values)
    return x

# ..................................................

_CDIST_METRICS = ("cityblock", "sqeuclidean", "euclidean")

def cdist(x, y, metric="euclidean"):
    if metric not in _CDIST_METRICS:
        raise ValueError(f"metric must be one of {_CDIST_METRICS}")
    return _scipy_cdist(x, y, metric=metric)

# ..................................................

# Build one global RNG (or let the user set the seed somewhere):
_np_rng = numpy.random.default_rng(seed=1234)

def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _np_rng = numpy.random.default_rng(seed=seed)

def rand(*shape: int) -> ArrayLike:
    return _np_rng.random(shape, dtype=_np_dtype)

def randn(*shape: int) -> ArrayLike:
    return _np_rng.normal(loc=0, scale=1, size=shape).astype(_np_dtype, copy=False)
