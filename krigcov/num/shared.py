# krigcov/num/shared.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Backend-independent helpers for krigcov.num."""

from typing import Iterator, Tuple

from krigcov.config import get_config


def get_dtype():
    return get_config().dtype_resolved


def block_rows(n_rows: int, row_cost: int) -> Iterator[Tuple[int, int]]:
    """
    Yield ``(start, stop)`` row ranges covering ``range(n_rows)``.

    Each range holds as many rows as fit in ``config.block_size``
    elements when one row costs ``row_cost`` elements (at least one row).
    """
    step = max(1, get_config().block_size // max(1, int(row_cost)))
    for start in range(0, n_rows, step):
        yield start, min(start + step, n_rows)
