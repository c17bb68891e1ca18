from collections import namedtuple
import numpy as np
from .salts import contribution_matrix
from .validation import validate_volume


OptimizationProblem = namedtuple('OptimizationProblem', [
    'A', 'needed', 'H', 'd', 'C', 'b', 'meq'
])


def build_problem(volume, base, target):
    """Sets up the quadratic program for salt additions.

    Parameters
    ----------
     volume : float
        Water volume, in liters. Must be positive.
     base : WaterProfile
        Mineral content of the starting water, in ppm.
     target : WaterProfile
        Desired mineral content, in ppm.

    Returns
    -------
     problem : OptimizationProblem
        With fields:
          A : 2d array
            Contribution matrix, ions by salts. A[i, j] is the ppm of
            mineral i contributed by one gram of salt j dissolved in
            the given volume.
          needed : array
            Target minus base, per mineral. May be negative, in which
            case the best we can do is add nothing of that mineral.
          H, d : 2d array, array
            Objective, in the form 1/2 x'Hx - d'x.
          C, b, meq : 2d array, array, int
            Constraints C'x >= b, one column of C per constraint, the
            first meq of which are equalities.

    Notes
    -----
     We want to minimize ||Ax - needed||^2, which expands to
     x'A'Ax - 2 needed'Ax + const. Matching terms with the solver's
     1/2 x'Hx - d'x gives H = 2A'A and d = 2A'needed. The only
     constraints are that salt additions be non-negative.

    """
    volume = validate_volume(volume)
    needed = np.asarray(target, dtype=float) - np.asarray(base, dtype=float)

    A = contribution_matrix() / volume
    H = 2. * A.T.dot(A)
    d = 2. * A.T.dot(needed)

    num_salts = A.shape[1]
    C = np.eye(num_salts)
    b = np.zeros((num_salts,))

    return OptimizationProblem(A=A, needed=needed, H=H, d=d, C=C, b=b, meq=0)
