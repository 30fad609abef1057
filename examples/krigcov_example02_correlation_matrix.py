"""
Correlation matrices of a 2D design, with a nugget

A Matérn 5/2 correlation with anisotropic lengthscales is used to build
the correlation matrix of random points (with a nugget on the diagonal)
and the cross-correlation matrix between these points and a grid of
prediction points.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
"""
import numpy as np
import krigcov.num as gnp
import krigcov as kc


def generate_data(ni=50, nt=20):
    gnp.set_seed(0)
    xi = gnp.rand(ni, 2)
    g = gnp.linspace(0.0, 1.0, nt)
    xt = gnp.asarray(np.array(np.meshgrid(gnp.to_np(g), gnp.to_np(g))).reshape(2, -1).T)
    return xi, xt


def main():
    xi, xt = generate_data()

    cov_params = kc.CovarianceParameters(2, [0.5, 0.2], 2.0, "matern5_2")
    covariance = kc.Covariance(cov_params)
    points_i = kc.Points(xi, cov_params)
    points_t = kc.Points(xt, cov_params)

    nugget = [1e-4]
    K = covariance.compute_correlation_matrix(points_i, nugget)
    Kit = covariance.compute_cross_correlation_matrix(points_i, points_t)

    print(cov_params)
    print("K: shape {}, condition number {:.3e}".format(
        K.shape, np.linalg.cond(gnp.to_np(K))))
    print("Kit: shape {}, max {:.4f}".format(Kit.shape, gnp.to_scalar(gnp.max(Kit))))

    return K, Kit


if __name__ == "__main__":
    main()
