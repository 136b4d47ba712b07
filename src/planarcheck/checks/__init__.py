from planarcheck.checks import density, k5, k33  # noqa: F401  registers checks
from planarcheck.checks.base import (
    BOUND_VIOLATION,
    K5_FOUND,
    K33_FOUND,
    POSSIBLY_PLANAR,
    BoundViolation,
    ComponentCheck,
    Evidence,
    K5Witness,
    K33Witness,
    Verdict,
)

DEFAULT_CHECKS = ["density_bound", "k5", "k33"]
