# krigcov/num/torch_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Torch numerical backend for krigcov.

This module defines the Torch implementation of the krigcov.num API.
"""

import builtins
from typing import Sequence
from krigcov.config import get_config, init_backend, get_logger

_krigcov_backend_: str = init_backend()
_config = get_config()
_logger = get_logger()
_logger.info("Using backend: %s", _krigcov_backend_)


# -----------------------------------------------------
#
#                      TORCH
#
# -----------------------------------------------------

import torch
import numpy

_torch_dtype = torch.float64
torch.set_default_dtype(_torch_dtype)
_config.dtype_resolved = _torch_dtype

from torch import is_tensor
from torch import (
    where,
    allclose,
    arange,
    linspace,
    abs,
    diag,
)


def array_equal(x, y):
    return torch.equal(x, y)

# ..................................................

def array(x, dtype=None):
    return asarray(x, dtype=dtype)


def _resolve_torch_dtype(dtype):
    if dtype is None:
        return None
    if isinstance(dtype, torch.dtype):
        return dtype
    if dtype is float:
        return _torch_dtype
    if dtype is int:
        return torch.long
    if dtype is bool:
        return torch.bool
    s = str(dtype).lower()
    if "float32" in s:
        return torch.float32
    if "float64" in s or "double" in s:
        return torch.float64
    if "int64" in s or "long" in s:
        return torch.int64
    if "int32" in s:
        return torch.int32
    if "bool" in s:
        return torch.bool
    return dtype


def asarray(x, dtype=None):
    dtype = _resolve_torch_dtype(dtype)
    if isinstance(x, torch.Tensor):
        if dtype is not None:
            return x if x.dtype == dtype else x.to(dtype=dtype)
        if x.is_floating_point() and x.dtype != _torch_dtype:
            return x.to(dtype=_torch_dtype)
        return x
    if isinstance(x, numpy.ndarray):
        try:
            x_ = torch.from_numpy(x)
        except (TypeError, ValueError):
            x_ = torch.as_tensor(x)
        if dtype is not None:
            return x_ if x_.dtype == dtype else x_.to(dtype=dtype)
        if x_.is_floating_point() and x_.dtype != _torch_dtype:
            return x_.to(dtype=_torch_dtype)
        return x_
    if isinstance(x, (int, float)):
        if dtype is None and isinstance(x, float):
            dtype = _torch_dtype
        return torch.tensor([x], dtype=dtype)
    x_ = torch.as_tensor(x)
    if dtype is not None:
        return x_ if x_.dtype == dtype else x_.to(dtype=dtype)
    if x_.is_floating_point() and x_.dtype != _torch_dtype:
        x_ = x_.to(dtype=_torch_dtype)
    return x_


def empty(shape, dtype=None, order="C"):
    t = torch.empty(shape, dtype=_resolve_torch_dtype(dtype) or _torch_dtype)
    return _with_order(t, order)


def zeros(shape, dtype=None, order="C"):
    t = torch.zeros(shape, dtype=_resolve_torch_dtype(dtype) or _torch_dtype)
    return _with_order(t, order)


def ones(shape, dtype=None):
    return torch.ones(shape, dtype=_resolve_torch_dtype(dtype) or _torch_dtype)


def eye(n, m=None, k=0, dtype=None):
    if k != 0:
        raise ValueError("torch backend eye() supports k=0 only")
    m = n if m is None else m
    return torch.eye(n, m, dtype=_resolve_torch_dtype(dtype) or _torch_dtype)


def to_np(x):
    if is_tensor(x):
        return x.detach().cpu().numpy()
    return x


def to_scalar(x):
    return x.item()


def scalar_safe(f):
    def f_(x):
        if torch.is_tensor(x):
            return f(x)
        t = torch.as_tensor(x, dtype=_torch_dtype)
        return f(t)

    return f_


exp = scalar_safe(torch.exp)


def power(x, p):
    return torch.pow(asarray(x), asarray(p))

# ..................................................

def axis_to_dim(f):
    def f_(x, axis=None, **kwargs):
        if axis is None:
            return f(x, **kwargs)
        else:
            return f(x, dim=axis, **kwargs)

    return f_


sum = axis_to_dim(torch.sum)
prod = axis_to_dim(torch.prod)


def max(x, axis=None, keepdims=False):
    if axis is None:
        return torch.max(x)
    return torch.max(x, dim=axis, keepdim=keepdims).values

# ..................................................
# storage and layout

def _with_order(t, order):
    # column-major: allocate the transpose contiguously and view it back
    if order == "F" and t.dim() == 2:
        return t.t().contiguous().t()
    return t


def ascontiguous(x, order="C"):
    """Float64 copy of x laid out in the given memory order."""
    t = asarray(x).clone().detach().contiguous()
    return _with_order(t, order)


def is_column_major(x) -> bool:
    """True when the second axis has the smallest stride."""
    if x.dim() != 2:
        return False
    s0, s1 = x.stride()
    return s0 == 1 and s1 > 1


def readonly(x):
    # torch has no read-only tensors; hand out a detached copy
    return x.detach().clone()


def take_rows(x, indices: Sequence[int], order="C"):
    idx = torch.as_tensor(indices, dtype=torch.long)
    return _with_order(torch.index_select(x, 0, idx).contiguous(), order)


def fill_diagonal_(x, values):
    n = builtins.min(x.shape[0], x.shape[1])
    x.diagonal()[:n] = asarray(values, dtype=x.dtype)
    return x

# ..................................................

def cdist(x, y, metric="euclidean"):
    if metric == "cityblock":
        return torch.cdist(x, y, p=1.0)
    if metric == "euclidean":
        return torch.cdist(x, y, p=2.0)
    if metric == "sqeuclidean":
        # explicit differences keep exact zeros on coincident points
        return ((x[:, None, :] - y[None, :, :]) ** 2).sum(-1)
    raise ValueError("metric must be one of ('cityblock', 'sqeuclidean', 'euclidean')")

# ..................................................

def set_seed(seed):
    torch.manual_seed(seed)


def rand(*shape):
    return torch.rand(shape, dtype=_torch_dtype)


def randn(*shape):
    return torch.randn(shape, dtype=_torch_dtype)
