# krigcov/covariance.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Correlation and cross-correlation matrices of rescaled points.

Typical use::

    cov_params = CovarianceParameters(d, lengthscales, variance, "matern5_2")
    covariance = Covariance(cov_params)
    points_x = Points(x, cov_params)
    K = covariance.compute_correlation_matrix(points_x, nugget)

The ``fill_*`` methods write into matrices allocated by the caller, with
the right shape; they do not allocate the output and do not check
shapes or dimensions. The ``compute_*`` methods allocate the output
first (or reuse ``out`` when its shape matches) and report failures on the krigcov logger before
re-raising them.
"""
import krigcov.num as gnp
from krigcov.config import get_config, get_logger

_logger = get_logger()


class Covariance:
    """Fill correlation matrices for one set of covariance parameters.

    Parameters
    ----------
    cov_params : CovarianceParameters
        Parameters the points were rescaled with. Shared, not copied.
    tiny_nugget_on_diag : float, optional
        Added to 1 on the diagonal of correlation matrices. Defaults to
        ``config.tiny_nugget_on_diag`` (256 machine epsilons).
    tiny_nugget_off_diag : float, optional
        Added to the summed distance before exponentiation in the gauss,
        exp and Matérn families. Defaults to ``config.tiny_nugget_off_diag``.
    """

    def __init__(self, cov_params, tiny_nugget_on_diag=None, tiny_nugget_off_diag=None):
        config = get_config()
        if tiny_nugget_on_diag is None:
            tiny_nugget_on_diag = config.tiny_nugget_on_diag
        if tiny_nugget_off_diag is None:
            tiny_nugget_off_diag = config.tiny_nugget_off_diag
        self.params = cov_params
        self.corr_function = cov_params.corr_function
        self.tiny_nugget_on_diag = float(tiny_nugget_on_diag)
        self.tiny_nugget_off_diag = float(tiny_nugget_off_diag)
        self.diagonal_value = 1.0 + self.tiny_nugget_on_diag

    def __repr__(self):
        return f"Covariance({self.params!r})"

    # ..................................................

    def fill_diagonal(self, matrix, nugget=None):
        """Write the n diagonal entries of a correlation matrix.

        With a nugget vector of length m, entry i receives
        ``diagonal_value + nugget[i % m] / variance``. A nugget of length
        1 applies to every entry; length 0 (or None) adds nothing.
        """
        n = matrix.shape[0]
        nugget = _as_nugget(nugget)
        m = 0 if nugget is None else nugget.shape[0]
        inverse_variance = self.params.inverse_variance
        if m == 0:
            values = self.diagonal_value
        elif m == 1:
            values = self.diagonal_value + gnp.to_scalar(nugget[0]) * inverse_variance
        elif m == n:
            values = self.diagonal_value + nugget * inverse_variance
        else:
            _logger.warning(
                "nugget of length %d reused cyclically on a diagonal of length %d", m, n
            )
            values = self.diagonal_value + nugget[gnp.arange(n) % m] * inverse_variance
        gnp.fill_diagonal_(matrix, values)
        return matrix

    def fill_correlation_matrix(self, matrix, points, nugget=None):
        """Fill an allocated (n, n) matrix with the correlations of points.

        Each unordered pair is evaluated once and written to both
        triangles.
        """
        self.fill_diagonal(matrix, nugget)
        x = points.data
        corr_rows = self.corr_function.corr_rows
        offset = self.tiny_nugget_off_diag
        for i in range(1, x.shape[0]):  # rows are independent
            values = corr_rows(x[i], x[:i], offset)
            matrix[i, :i] = values
            matrix[:i, i] = values
        return matrix

    def fill_cross_correlation_matrix(self, matrix, points_a, points_b):
        """Fill an allocated (na, nb) matrix with correlations between two sets.

        The matrix is filled by blocks of rows, or by blocks of columns
        when it is stored in column-major order.
        """
        xa = points_a.data
        xb = points_b.data
        na, nb, d = xa.shape[0], xb.shape[0], xa.shape[1]
        corr_block = self.corr_function.corr_block
        offset = self.tiny_nugget_off_diag
        if gnp.is_column_major(matrix):
            for start, stop in gnp.block_rows(nb, na * d):
                matrix[:, start:stop] = corr_block(xa, xb[start:stop], offset)
        else:
            for start, stop in gnp.block_rows(na, nb * d):
                matrix[start:stop, :] = corr_block(xa[start:stop], xb, offset)
        return matrix

    # ..................................................

    def compute_correlation_matrix(self, points, nugget=None, out=None):
        """Correlation matrix of points, shape (n, n).

        ``out`` is filled and returned when its shape is (n, n). Otherwise
        a new matrix is allocated and ``out`` is left untouched.
        """
        try:
            n = len(points)
            matrix = _allocate((n, n), out)
            return self.fill_correlation_matrix(matrix, points, nugget)
        except Exception as e:
            _logger.error("error filling correlation matrix: %s", e)
            raise

    def compute_cross_correlation_matrix(self, points_a, points_b, out=None):
        """Cross-correlation matrix between two point sets, shape (na, nb).

        ``out`` is reused as in :meth:`compute_correlation_matrix`.
        """
        try:
            matrix = _allocate((len(points_a), len(points_b)), out)
            return self.fill_cross_correlation_matrix(matrix, points_a, points_b)
        except Exception as e:
            _logger.error("error filling cross-correlation matrix: %s", e)
            raise

    def compute_covariance_matrix(self, points, nugget=None):
        """Covariance matrix ``variance * K`` of points, nugget included."""
        return self.params.variance * self.compute_correlation_matrix(points, nugget)

    def compute_cross_covariance_matrix(self, points_a, points_b):
        return self.params.variance * self.compute_cross_correlation_matrix(
            points_a, points_b
        )


def _as_nugget(nugget):
    if nugget is None:
        return None
    return gnp.asarray(nugget).reshape(-1)


def _allocate(shape, out):
    # out is reused only when its shape already matches
    if out is None or tuple(out.shape) != tuple(shape):
        return gnp.empty(shape)
    return out
