"""Quadratic programming via cvxpy.

Problems are posed the way dual active-set codes (Goldfarb-Idnani,
as in R's quadprog) pose them:

    minimize    1/2 x'Hx - d'x
    subject to  C'x >= b

with the first meq columns of C treated as equality constraints. This
is the only module that knows about cvxpy; callers get plain numpy
arrays and a status string back.

"""
from collections import namedtuple
import logging
import numpy as np
import cvxpy as cvx


logger = logging.getLogger(__name__)

SOLVED = 'solved'
INFEASIBLE = 'infeasible'
FAILED = 'failed'

QPResult = namedtuple('QPResult', ['solution', 'value', 'status', 'message'])


def solve_qp(H, d, C, b, meq=0, solver=None):
    """Solve a convex quadratic program.

    Parameters
    ----------
     H : 2d array
        Symmetric positive semi-definite objective matrix, n by n.
     d : array
        Linear term, length n.
     C : 2d array
        Constraint matrix, n by m.
     b : array
        Constraint right hand side, length m.
     meq : int
        Number of leading constraints that are equalities.
     solver : str or None
        Name of the cvxpy solver to use. If None, cvxpy decides.

    Returns
    -------
     result : QPResult
        solution is an array of length n, or None unless status is
        SOLVED. value is the optimal objective. message is a human
        readable description of what happened.

    """
    H = np.asarray(H, dtype=float)
    d = np.asarray(d, dtype=float)
    C = np.asarray(C, dtype=float)
    b = np.asarray(b, dtype=float)

    n = H.shape[0]
    if H.shape != (n, n) or d.shape != (n,) or C.shape[0] != n:
        raise ValueError('Inconsistent dimensions: H {0}, d {1}, C {2}'.format(
            H.shape, d.shape, C.shape))
    if b.shape != (C.shape[1],) or not 0 <= meq <= C.shape[1]:
        raise ValueError('Inconsistent constraints: C {0}, b {1}, meq {2}'.format(
            C.shape, b.shape, meq))

    x = cvx.Variable(n)
    # Symmetrize so round-off in H doesn't trip cvxpy's PSD check
    obj = 0.5 * cvx.quad_form(x, cvx.psd_wrap(0.5 * (H + H.T))) - d @ x

    constraints = []
    if meq > 0:
        constraints.append(C[:, :meq].T @ x == b[:meq])
    if meq < C.shape[1]:
        constraints.append(C[:, meq:].T @ x >= b[meq:])

    prob = cvx.Problem(cvx.Minimize(obj), constraints)
    try:
        prob.solve(solver=solver)
    except cvx.SolverError as e:
        logger.debug('cvxpy raised: %s', e)
        return QPResult(None, None, FAILED, 'Solver failed: {0}'.format(e))

    if prob.status in (cvx.OPTIMAL, cvx.OPTIMAL_INACCURATE) and x.value is not None:
        solution = np.asarray(x.value, dtype=float).reshape((n,))
        msg = 'Solved ({0:s})'.format(prob.status)
        return QPResult(solution, float(prob.value), SOLVED, msg)

    if prob.status in (cvx.INFEASIBLE, cvx.INFEASIBLE_INACCURATE):
        return QPResult(None, None, INFEASIBLE, 'Constraints are inconsistent')

    return QPResult(None, None, FAILED, 'Solver returned status {0}'.format(prob.status))
