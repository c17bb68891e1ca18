import numpy as np
import pytest
import cvxpy as cvx
from unittest.mock import patch
from .context import brewwater as bw
from brewwater import qp_solver


def test_unconstrained_optimum_feasible():
    """Tests a problem where the constraints are inactive.

    minimize (x1 - 1)^2 + (x2 - 2)^2

    """
    H = 2 * np.eye(2)
    d = np.array([2., 4.])
    res = bw.solve_qp(H, d, np.eye(2), np.zeros(2))
    assert res.status == qp_solver.SOLVED
    assert list(res.solution) == pytest.approx([1., 2.], abs=1e-5)
    assert res.value == pytest.approx(-5., abs=1e-5)


def test_active_bound():
    """Tests the non-negativity bound binds on the second variable.

    minimize (x1 - 1)^2 + (x2 + 1)^2 subject to x >= 0

    """
    H = 2 * np.eye(2)
    d = np.array([2., -2.])
    res = bw.solve_qp(H, d, np.eye(2), np.zeros(2))
    assert res.status == qp_solver.SOLVED
    assert list(res.solution) == pytest.approx([1., 0.], abs=1e-5)


def test_equality_constraint():
    """Tests x1 + x2 == 1 is imposed when meq = 1.

    """
    H = 2 * np.eye(2)
    d = np.zeros(2)
    C = np.array([[1., 1., 0.],
                  [1., 0., 1.]])
    b = np.array([1., 0., 0.])
    res = bw.solve_qp(H, d, C, b, meq=1)
    assert res.status == qp_solver.SOLVED
    assert list(res.solution) == pytest.approx([0.5, 0.5], abs=1e-5)


def test_infeasible():
    """Tests x >= 1 and -x >= 0 has no solution.

    """
    H = 2 * np.eye(1)
    d = np.zeros(1)
    C = np.array([[1., -1.]])
    b = np.array([1., 0.])
    res = bw.solve_qp(H, d, C, b)
    assert res.status != qp_solver.SOLVED
    assert res.solution is None
    assert res.message


def test_inconsistent_dimensions():
    with pytest.raises(ValueError):
        bw.solve_qp(np.eye(2), np.zeros(3), np.eye(2), np.zeros(2))
    with pytest.raises(ValueError):
        bw.solve_qp(np.eye(2), np.zeros(2), np.eye(2), np.zeros(3))
    with pytest.raises(ValueError):
        bw.solve_qp(np.eye(2), np.zeros(2), np.eye(2), np.zeros(2), meq=3)


def test_solver_error():
    """Tests a solver exception is reported as a failed solve.

    """
    with patch.object(cvx.Problem, 'solve', side_effect=cvx.SolverError('did not converge')):
        res = bw.solve_qp(2 * np.eye(2), np.array([2., 4.]), np.eye(2), np.zeros(2))
    assert res.status == qp_solver.FAILED
    assert res.solution is None
    assert 'did not converge' in res.message


def test_solver_error_is_infeasible_result():
    base = {'Ca': 22, 'Mg': 2.7, 'Na': 12, 'SO4': 6, 'Cl': 14, 'HCO3': 50}
    target = dict(base, Ca=48)
    with patch.object(cvx.Problem, 'solve', side_effect=cvx.SolverError('did not converge')):
        res = bw.optimize_salt_additions(20., base, target)
    assert not res.feasible
    assert res.additions == {s: 0. for s in bw.SALTS}
    assert res.deviations.calcium == pytest.approx(26.)
