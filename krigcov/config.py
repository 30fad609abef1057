# krigcov/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import os
import sys
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

_BACKENDS = ("numpy", "torch")
_POINTS_ORDERS = ("C", "F")

# 1.0 + 256 * eps on the diagonal keeps matrices of ones plus a diagonal
# nugget invertible up to size 512 (256 is a power of two on purpose).
TINY_NUGGET_ON_DIAG = 256 * sys.float_info.epsilon  # 5.684...e-14
TINY_NUGGET_OFF_DIAG = 0.0


class _KrigcovConfig:
    def __init__(self):
        self.version = __version__
        self.backend = None
        self.points_order = None
        self.dtype = float
        self.tiny_nugget_on_diag = TINY_NUGGET_ON_DIAG
        self.tiny_nugget_off_diag = TINY_NUGGET_OFF_DIAG
        # max number of elements of a temporary difference array
        self.block_size = 2**20
        # logger lives in config
        self.logger = logging.getLogger("krigcov")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"KrigcovConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"points_order={self.points_order}, "
            f"dtype={self.dtype}, "
            f"tiny_nugget_on_diag={self.tiny_nugget_on_diag}, "
            f"tiny_nugget_off_diag={self.tiny_nugget_off_diag}, "
            f"block_size={self.block_size})"
        )

    def __repr__(self):
        return (
            f"<KrigcovConfig "
            f"version={self.version!r}, "
            f"backend={self.backend!r}, "
            f"points_order={self.points_order!r}, "
            f"dtype={self.dtype!r}, "
            f"block_size={self.block_size!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)
        return self


_config = _KrigcovConfig()


def get_config():
    return _config


def _detect_backend():
    env = os.environ.get("KRIGCOV_BACKEND")
    if env in _BACKENDS:
        return env
    return "numpy"


def init_backend():
    """Idempotent. Detect and store backend, set env for downstream imports."""
    if _config.backend is None:
        backend = _detect_backend()
        _config.backend = backend
        os.environ["KRIGCOV_BACKEND"] = backend
    return _config.backend


def set_backend(backend: str):
    """Force a backend ('numpy'|'torch') before importing krigcov.num."""
    if backend not in _BACKENDS:
        raise ValueError("backend must be 'numpy' or 'torch'")
    _config.backend = backend
    os.environ["KRIGCOV_BACKEND"] = backend


def get_backend():
    """Return current backend; triggers detection if not set."""
    return _config.backend or init_backend()


def init_points_order():
    """Idempotent. Memory order of point storage, 'C' (row-major) or 'F'."""
    if _config.points_order is None:
        env = os.environ.get("KRIGCOV_POINTS_ORDER", "C").upper()
        _config.points_order = env if env in _POINTS_ORDERS else "C"
    return _config.points_order


def set_points_order(order: str):
    """Force the point storage order before importing krigcov.points."""
    if order not in _POINTS_ORDERS:
        raise ValueError("points order must be 'C' or 'F'")
    _config.points_order = order
    os.environ["KRIGCOV_POINTS_ORDER"] = order


def get_points_order():
    return _config.points_order or init_points_order()


def set_block_size(block_size: int):
    if int(block_size) < 1:
        raise ValueError("block_size must be a positive integer")
    _config.block_size = int(block_size)


def set_dtype(dtype):
    _config.dtype = dtype


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
