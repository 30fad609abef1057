# krigcov/points.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Collections of rescaled points.

A :class:`Points` object stores a rescaled copy of a coordinate matrix,

.. math::
    \\tilde x_{ik} = (x_{ik} - o_k)\\, s_k,

where :math:`o` is an origin (zero by default) and :math:`s` the scaling
factors of a :class:`~krigcov.kernel.CovarianceParameters` object.
Correlation functions then evaluate with unit lengthscales.

Storage is a two-dimensional backend array whose memory order is chosen
once, when this module is imported, from ``KRIGCOV_POINTS_ORDER``
(``"C"``: one point per contiguous row, the default; ``"F"``: one
coordinate per contiguous column). See :func:`krigcov.config.set_points_order`.
"""
import krigcov.num as gnp
from krigcov.config import init_points_order

_ORDER = init_points_order()


def _allocate(rows, cols):
    return gnp.empty((rows, cols), order=_ORDER)


class Points:
    """Rescaled points, one per row.

    Parameters
    ----------
    source : array_like, shape (n, d), optional
        Raw coordinates. When omitted, an empty collection is built, to
        be filled later with :meth:`reserve` and row assignment.
    cov_params : CovarianceParameters, optional
        Parameters providing the scaling factors. Required with ``source``.
    origin : array_like, shape (d,), optional
        Coordinates are re-centered on ``origin`` before rescaling.

    Raises
    ------
    ValueError
        If the number of columns of ``source`` (or the length of
        ``origin``) differs from ``cov_params.d``.
    """

    __slots__ = ("_data", "_d")

    def __init__(self, source=None, cov_params=None, origin=None):
        self._data = _allocate(0, 0)
        self._d = 0
        if source is not None:
            if cov_params is None:
                raise TypeError("Points(source, ...) requires cov_params")
            self._fill_with(source, cov_params, origin)

    def _fill_with(self, source, cov_params, origin):
        x = gnp.asarray(source)
        if x.ndim == 1:
            x = x.reshape(-1, 1)
        n, d = x.shape
        if d != cov_params.d:
            raise ValueError(
                f"points have dimension {d}, covariance parameters expect {cov_params.d}"
            )
        if origin is None:
            rescaled = x * cov_params.scaling_factors
        else:
            origin = gnp.asarray(origin).reshape(-1)
            if origin.shape[0] != d:
                raise ValueError(f"origin must have length {d}")
            rescaled = (x - origin) * cov_params.scaling_factors
        self._data = gnp.ascontiguous(rescaled, order=_ORDER)
        self._d = d

    @classmethod
    def from_rescaled(cls, rescaled):
        """Wrap coordinates that are already rescaled (copied, no rescaling)."""
        points = cls()
        x = gnp.asarray(rescaled)
        if x.ndim == 1:
            x = x.reshape(-1, 1)
        points._data = gnp.ascontiguous(x, order=_ORDER)
        points._d = x.shape[1]
        return points

    # ..................................................

    @property
    def d(self):
        return self._d

    @property
    def data(self):
        """Read-only view of the rescaled coordinates, shape (n, d)."""
        return gnp.readonly(self._data)

    def size(self):
        return self._data.shape[0]

    def __len__(self):
        return self._data.shape[0]

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index, value):
        self._data[index] = value

    def __iter__(self):
        for i in range(len(self)):
            yield self._data[i]

    def cell(self, row, col):
        return self._data[row, col]

    def set_cell(self, row, col, value):
        self._data[row, col] = value

    # ..................................................

    def reserve(self, rows, cols):
        """Allocate uninitialized storage for ``rows`` points of dimension ``cols``."""
        self._data = _allocate(rows, cols)
        self._d = cols

    def resize(self, rows):
        """Change the number of points, keeping leading rows; new rows are zero."""
        data = gnp.zeros((rows, self._d), order=_ORDER)
        kept = min(rows, self.size())
        data[:kept] = self._data[:kept]
        self._data = data

    def take(self, indices):
        """Sub-collection made of the points at ``indices``, without rescaling."""
        points = Points()
        points._data = gnp.take_rows(self._data, indices, order=_ORDER)
        points._d = self._d
        return points

    def copy(self):
        points = Points()
        points._data = gnp.ascontiguous(self._data, order=_ORDER)
        points._d = self._d
        return points

    def __repr__(self):
        return f"Points(n={self.size()}, d={self._d}, order={_ORDER!r})"
