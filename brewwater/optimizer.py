import logging
from collections import namedtuple
from .problem import build_problem
from .profile import WaterProfile
from .qp_solver import SOLVED, solve_qp
from .salts import SALTS
from .solution import map_solution, round_display
from .validation import validate_inputs


logger = logging.getLogger(__name__)

OptimizationResult = namedtuple('OptimizationResult', [
    'feasible',
    'additions',
    'additions_display',
    'achieved',
    'achieved_display',
    'deviations',
    'deviations_display',
    'message'
])


def optimize_salt_additions(volume, base, target, solver=None):
    """Determines what salts (if any) to use.

    Parameters
    ----------
     volume : float
        Water volume, in liters.
     base : WaterProfile or dict
        Mineral content of the starting water, in ppm.
     target : WaterProfile or dict
        Desired mineral content, in ppm.
     solver : str or None
        cvxpy solver name, passed through to qp_solver.solve_qp.

    Returns
    -------
     result : OptimizationResult
        additions are grams of each salt, keyed by salt name, and
        achieved is the resulting water profile. deviations are
        achieved minus target. Each has a *_display counterpart
        rounded to one decimal place.

        If the solver could not find a solution, feasible is False,
        no salts are added, achieved is the base profile and
        deviations are the full gap (target minus base).

    Raises
    ------
     InvalidInput
        If the volume is not positive, or a profile has a missing,
        non-finite or negative value. The solver is not invoked.
     SolverContractViolation
        If the solver returns a meaningfully negative salt amount.

    Notes
    -----
     Minimizes the sum of squared deviations from the target over
     all minerals, subject to salt additions being non-negative. The
     problem is convex so a single solve suffices.

    """
    volume, base, target = validate_inputs(volume, base, target)

    problem = build_problem(volume, base, target)
    qp = solve_qp(problem.H, problem.d, problem.C, problem.b, problem.meq,
                  solver=solver)

    if qp.status != SOLVED:
        logger.warning('QP optimization failed: %s', qp.message)
        return infeasible_result(base, target, qp.message)

    s = map_solution(qp.solution, volume, base, target)
    return OptimizationResult(
        feasible=True,
        additions=s.additions,
        additions_display=s.additions_display,
        achieved=s.achieved,
        achieved_display=s.achieved_display,
        deviations=s.deviations,
        deviations_display=s.deviations_display,
        message=qp.message
    )


def infeasible_result(base, target, message):
    """Fallback when no salt additions could be computed.

    Reports the full unmet gap. Note the sign: deviations here are
    target minus base, which is what is still needed.

    """
    gap = WaterProfile(*[t - b for t, b in zip(target, base)])
    zeros = {s: 0. for s in SALTS}
    return OptimizationResult(
        feasible=False,
        additions=zeros,
        additions_display=dict(zeros),
        achieved=base,
        achieved_display=WaterProfile(*[round_display(v) for v in base]),
        deviations=gap,
        deviations_display=WaterProfile(*[round_display(v) for v in gap]),
        message=message
    )
