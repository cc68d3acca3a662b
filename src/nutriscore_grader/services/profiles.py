"""Nutri-Score threshold tables."""

from types import MappingProxyType

from nutriscore_grader.domain.scoring import ScoringProfile, ThresholdTable

MAIN_FOODS_PROFILE = "main_foods"

_SALT_START = 0.12
_SALT_STEP = 0.225
_SALT_CUTS = 20


class UnknownProfileError(KeyError):
    """Raised when a scoring profile name is not registered."""


def _accumulated_steps(start: float, step: float, count: int) -> ThresholdTable:
    """Build an arithmetic table by repeated addition."""
    cuts = [start]
    for _ in range(count - 1):
        cuts.append(cuts[-1] + step)
    return tuple(cuts)


MAIN_FOODS = ScoringProfile(
    name=MAIN_FOODS_PROFILE,
    energy_kj=(335, 670, 1005, 1340, 1675, 2010, 2345, 2680, 3015, 3350),
    saturates_g=(1, 2, 3, 4, 5, 6, 7, 8, 9, 10),
    sugars_g=(3.4, 6.8, 10, 14, 17, 20, 24, 27, 31, 34, 37, 41, 44, 48, 51),
    salt_g=_accumulated_steps(_SALT_START, _SALT_STEP, _SALT_CUTS),
    protein_g=(2.4, 4.8, 7.2, 9.6, 12.0, 14.4, 16.8),
    fiber_g=(3.0, 4.1, 5.2, 6.3, 7.4),
    # Lower bounds, each reached band is worth one point.
    fruit_veg_bands=(40, 60, 80, 90, 100),
    protein_exclusion_min=11,
    grade_bounds=((0, "A"), (2, "B"), (10, "C"), (18, "D")),
    worst_grade="E",
)

PROFILES = MappingProxyType({MAIN_FOODS.name: MAIN_FOODS})


def get_profile(name: str) -> ScoringProfile:
    """Return a registered scoring profile by name."""
    try:
        return PROFILES[name]
    except KeyError:
        known = ", ".join(sorted(PROFILES))
        raise UnknownProfileError(
            f"Unknown scoring profile {name!r}; known profiles: {known}"
        ) from None
