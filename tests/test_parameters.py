import contextlib
import copy
import math
import pickle

import pytest

import krigcov.num as gnp
from krigcov.kernel import CovarianceParameters, Family


def test_scaling_factors_per_family():
    param = [0.5, 2.0]
    for cov_type, c in [
        ("exp", 1.0),
        ("white_noise", 1.0),
        ("gauss", math.sqrt(2) / 2),
        ("matern3_2", math.sqrt(3)),
        ("matern5_2", math.sqrt(5)),
    ]:
        p = CovarianceParameters(2, param, 1.0, cov_type)
        expected = gnp.array([c / 0.5, c / 2.0])
        assert gnp.allclose(p.scaling_factors, expected)
        assert p.cov_type == cov_type


def test_powexp_uses_lengthscales_for_scaling():
    p = CovarianceParameters(2, [0.5, 4.0, 1.2, 1.8], 1.0, "powexp")
    assert gnp.allclose(p.scaling_factors, gnp.array([2.0, 0.25]))
    assert gnp.allclose(p.corr_function.exponents, gnp.array([1.2, 1.8]))
    assert p.param.shape == (4,)


def test_variance_and_inverse():
    p = CovarianceParameters(1, [1.0], 4.0, "exp")
    assert p.variance == 4.0
    assert p.inverse_variance == pytest.approx(0.25)
    p0 = CovarianceParameters(1, [1.0], 0.0, "exp")
    assert math.isfinite(p0.inverse_variance)
    assert p0.inverse_variance == pytest.approx(1e100)


def test_unknown_name_falls_back_to_exp(caplog):
    with caplog.at_level("WARNING", logger="krigcov"):
        p = CovarianceParameters(2, [1.0, 1.0], 1.0, "gaussian")
    assert p.corr_function.family is Family.EXP
    assert p.cov_type == "exp"
    assert any("exponential" in r.getMessage() for r in caplog.records)


def test_immutable():
    p = CovarianceParameters(2, [1.0, 2.0], 1.0, "matern5_2")
    with pytest.raises(AttributeError):
        p.variance = 2.0
    with pytest.raises(AttributeError):
        del p.scaling_factors
    # numpy refuses the write, torch hands out a copy
    with contextlib.suppress(ValueError):
        p.scaling_factors[0] = 3.0
    with contextlib.suppress(ValueError):
        p.param[0] = 3.0
    assert gnp.allclose(p.scaling_factors, gnp.array([math.sqrt(5), math.sqrt(5) / 2]))
    assert gnp.allclose(p.param, gnp.array([1.0, 2.0]))


def test_short_param_is_rejected():
    with pytest.raises(ValueError):
        CovarianceParameters(3, [1.0, 2.0], 1.0, "exp")
    with pytest.raises(ValueError):
        CovarianceParameters(1, [0.5], 1.0, "powexp")
    with pytest.raises(ValueError):
        CovarianceParameters(2, [0.5, 1.0, 1.5], 1.0, "powexp")
    # extra values are ignored outside powexp
    p = CovarianceParameters(1, [0.5, 7.0], 1.0, "exp")
    assert gnp.allclose(p.scaling_factors, gnp.array([2.0]))


def test_param_is_copied():
    param = gnp.array([1.0, 2.0])
    p = CovarianceParameters(2, param, 1.0, "exp")
    param[0] = 10.0
    assert gnp.allclose(p.param, gnp.array([1.0, 2.0]))
    assert gnp.allclose(p.scaling_factors, gnp.array([1.0, 0.5]))


def test_not_copyable():
    p = CovarianceParameters(2, [1.0, 2.0], 1.0, "gauss")
    with pytest.raises(TypeError):
        copy.copy(p)
    with pytest.raises(TypeError):
        copy.deepcopy(p)
    with pytest.raises(TypeError):
        pickle.dumps(p)
