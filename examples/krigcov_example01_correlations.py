""" Plot the correlation families along one axis

Each family is evaluated between the origin and points of a line, with
a unit lengthscale, so that the curves show the correlation as a
function of the distance h.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
"""
import matplotlib.pyplot as plt
import krigcov.num as gnp
import krigcov as kc


def main():
    h = gnp.linspace(-3.0, 3.0, 601).reshape(-1, 1)
    origin = gnp.zeros((1, 1))

    fig, ax = plt.subplots()
    for family in kc.Family:
        param = [1.0, 1.5] if family is kc.Family.POWEXP else [1.0]
        cov_params = kc.CovarianceParameters(1, param, 1.0, family.value)
        covariance = kc.Covariance(cov_params)
        k = covariance.compute_cross_correlation_matrix(
            kc.Points(h, cov_params), kc.Points(origin, cov_params)
        )
        ax.plot(gnp.to_np(h[:, 0]), gnp.to_np(k[:, 0]), label=family.value)

    ax.set_title("Correlation functions (unit lengthscale)")
    ax.set_xlabel("h")
    ax.set_ylabel("k(h)")
    ax.grid(True)
    ax.legend()
    plt.show()
    plt.close(fig)


if __name__ == "__main__":
    main()
