from .exceptions import InvalidInput, SolverContractViolation
from .profile import IONS, WaterProfile, distilled
from .salts import BREWING_SALTS, SALTS, SALT_BY_NAME, contribution, contribution_matrix
from .validation import validate_inputs
from .problem import build_problem
from .qp_solver import solve_qp
from .solution import apply_additions, map_solution, round_display
from .optimizer import optimize_salt_additions
from .analysis import brewing_analysis, solubility_warnings
