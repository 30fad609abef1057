# krigcov/num/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Numerical backend dispatcher for krigcov."""

from krigcov.config import init_backend

from . import shared as _shared

_krigcov_backend_ = init_backend()

if _krigcov_backend_ == "numpy":
    from . import numpy_backend as _backend
elif _krigcov_backend_ == "torch":
    from . import torch_backend as _backend
else:
    raise RuntimeError(
        "Please set the KRIGCOV_BACKEND environment variable to 'numpy' or 'torch'."
    )

# Re-export backend API.
for _name in dir(_backend):
    if _name.startswith("__"):
        continue
    globals()[_name] = getattr(_backend, _name)

# Re-export backend-independent helpers from shared.py.
get_dtype = _shared.get_dtype
block_rows = _shared.block_rows
