import numpy as np
import pytest

from smoothopt.exceptions import LineSearchError
from smoothopt.optimize import (
    ArmijoParams,
    CallableFunction,
    GradientWorkspace,
    Quadratic,
    analytic_gradient,
    armijo_rule,
    set_descent_direction,
)


def _prepared_workspace(F, x0):
    ws = GradientWorkspace.from_point(x0)
    analytic_gradient(F, ws)
    set_descent_direction(ws)
    return ws


def test_armijo_identity_halves_step():
    F = Quadratic(np.eye(2))
    ws = _prepared_workspace(F, np.array([1.0, -2.0]))
    step, f_new, nfev = armijo_rule(ArmijoParams(1.0, 0.5, 0.1), F, ws)
    # full step lands on -x, same value, so one contraction is needed
    assert step == 0.5
    assert f_new == 0.0
    assert nfev == 3
    assert np.array_equal(ws.x, [0.0, 0.0])


def test_armijo_strict_decrease_and_untouched_direction(spd_matrix, rng):
    F = Quadratic(spd_matrix)
    params = ArmijoParams(s=2.0, beta=0.3, sigma=0.2)
    for _ in range(10):
        x0 = rng.standard_normal(3)
        ws = _prepared_workspace(F, x0)
        g = ws.g.copy()
        d = ws.d.copy()
        step, f_new, _ = armijo_rule(params, F, ws)
        assert f_new < F(x0)
        assert f_new - F(x0) <= params.sigma * step * (g @ d) + 1e-12
        assert np.allclose(ws.x, x0 + step * d)
        assert np.array_equal(ws.g, g)
        assert np.array_equal(ws.d, d)


def test_armijo_rejects_non_descent_direction():
    F = Quadratic(np.eye(2))
    ws = GradientWorkspace.from_point(np.ones(2))
    analytic_gradient(F, ws)
    ws.d[:] = ws.g
    with pytest.raises(LineSearchError, match="not a descent direction"):
        armijo_rule(ArmijoParams(), F, ws)
    assert np.array_equal(ws.x, np.ones(2))


def test_armijo_backtracking_cap():
    # gradient with the wrong sign makes -g an ascent direction
    F = CallableFunction(lambda x: float(x @ x), grad=lambda x: -2.0 * x)
    ws = _prepared_workspace(F, np.array([1.0, 1.0]))
    with pytest.raises(LineSearchError) as excinfo:
        armijo_rule(ArmijoParams(), F, ws, max_backtracks=10)
    assert excinfo.value.nfev == 12
    assert np.array_equal(ws.x, [1.0, 1.0])


def test_armijo_invalid_cap():
    F = Quadratic(np.eye(1))
    ws = _prepared_workspace(F, np.ones(1))
    with pytest.raises(ValueError):
        armijo_rule(ArmijoParams(), F, ws, max_backtracks=-1)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"s": 0.0},
        {"s": -1.0},
        {"beta": 0.0},
        {"beta": 1.0},
        {"sigma": 0.0},
        {"sigma": 1.5},
    ],
)
def test_armijo_params_validation(kwargs):
    with pytest.raises(ValueError):
        ArmijoParams(**kwargs)


def test_armijo_params_frozen():
    params = ArmijoParams()
    with pytest.raises(AttributeError):
        params.s = 2.0


def test_armijo_evaluator_sees_read_only_points():
    seen = []

    def fun(x):
        seen.append(x.flags.writeable)
        return float(x @ x)

    F = CallableFunction(fun, grad=lambda x: 2.0 * x)
    ws = _prepared_workspace(F, np.array([1.0, 1.0]))
    armijo_rule(ArmijoParams(), F, ws)
    assert seen and not any(seen)
