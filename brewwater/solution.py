from collections import namedtuple
import numpy as np
from .exceptions import SolverContractViolation
from .profile import WaterProfile
from .salts import SALTS, contribution_matrix


# Solvers return slightly negative values for salts that should be
# zero. A microgram of salt is well below anything a brewer can weigh.
NEGATIVE_TOLERANCE = 1e-6

# Salt additions less than this many grams are shown as zero.
DISPLAY_THRESHOLD = 0.1

MappedSolution = namedtuple('MappedSolution', [
    'additions',
    'additions_display',
    'achieved',
    'achieved_display',
    'deviations',
    'deviations_display'
])


def clamp(x, tol=NEGATIVE_TOLERANCE):
    """Replace round-off negatives in a solver solution by zero.

    Raises
    ------
     SolverContractViolation
        If any component is more negative than tol.

    """
    x = np.array(x, dtype=float)
    if x.shape != (len(SALTS),):
        msg = 'Expected {0:d} salt amounts, got shape {1}'
        raise SolverContractViolation(msg.format(len(SALTS), x.shape))

    if not np.all(np.isfinite(x)):
        raise SolverContractViolation('Solver returned non-finite salt amounts')

    bad = np.flatnonzero(x <= -tol)
    if len(bad) > 0:
        i = bad[0]
        msg = 'Solver returned {0:g} grams of {1:s}'
        raise SolverContractViolation(msg.format(x[i], SALTS[i]))

    x[x < 0] = 0.
    return x


def apply_additions(base, additions, volume):
    """Mineral profile after dissolving salts in water.

    Parameters
    ----------
     base : WaterProfile
        Mineral content of the starting water, in ppm.
     additions : array_like or dict
        Grams of each salt, in catalog order, or keyed by salt name
        (missing salts count as zero).
     volume : float
        Water volume, in liters.

    Returns
    -------
     profile : WaterProfile

    """
    if hasattr(additions, 'items'):
        additions = [additions.get(s, 0.) for s in SALTS]
    x = np.asarray(additions, dtype=float)
    r = np.asarray(base, dtype=float) + contribution_matrix().dot(x) / volume
    return WaterProfile.from_array(r)


def round_display(value, threshold=None):
    """Round to one decimal place for display.

    If threshold is given, anything that rounds to less than it is
    shown as zero. Rounding an already rounded value changes nothing.

    """
    r = round(float(value), 1)
    if threshold is not None and r < threshold:
        return 0.
    # no -0.0
    return r if r != 0 else 0.


def additions_dict(x):
    return {s: float(v) for s, v in zip(SALTS, x)}


def map_solution(x, volume, base, target):
    """Convert a raw solver solution into salt additions and profiles.

    Everything in the result is computed from the full precision salt
    amounts. The *_display fields are rounded copies for people to
    read and should never be used in further calculations.

    Parameters
    ----------
     x : array_like
        Solver solution, grams of each salt in catalog order.
     volume : float
        Water volume, in liters.
     base, target : WaterProfile
        Starting and desired mineral content, in ppm.

    Returns
    -------
     solution : MappedSolution
        additions and additions_display are dicts keyed by salt name;
        achieved and deviations (achieved - target) are WaterProfiles.

    """
    x = clamp(x)
    achieved = apply_additions(base, x, volume)
    deviations = WaterProfile.from_array(achieved.as_array() - np.asarray(target, dtype=float))

    additions = additions_dict(x)
    additions_display = {s: round_display(v, DISPLAY_THRESHOLD)
                         for s, v in additions.items()}

    return MappedSolution(
        additions=additions,
        additions_display=additions_display,
        achieved=achieved,
        achieved_display=WaterProfile(*[round_display(v) for v in achieved]),
        deviations=deviations,
        deviations_display=WaterProfile(*[round_display(v) for v in deviations])
    )


def total_salt_weight(additions_display):
    """Total grams of salt to weigh out, rounded for display."""
    return round_display(sum(additions_display.values()))
