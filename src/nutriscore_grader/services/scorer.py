"""Nutri-Score point calculation and grade mapping.

Points for a component are the number of thresholds its value strictly
exceeds. Comparisons are plain ``>`` and ``>=``, so NaN never exceeds a
threshold and earns 0 points. Out-of-range numbers are scored as given.
"""

from types import MappingProxyType

from nutriscore_grader.domain.nutrients import CanonicalNutrients
from nutriscore_grader.domain.scoring import (
    GradeColors,
    ScoreBreakdown,
    ScoringProfile,
    ThresholdTable,
)
from nutriscore_grader.services.profiles import MAIN_FOODS

_DARK_TEXT = "#333333"
_LIGHT_TEXT = "#ffffff"

GRADE_COLORS = MappingProxyType(
    {
        "A": GradeColors(background="#038141", text=_LIGHT_TEXT),
        "B": GradeColors(background="#85bb2f", text=_DARK_TEXT),
        "C": GradeColors(background="#fecb02", text=_DARK_TEXT),
        "D": GradeColors(background="#ee8100", text=_LIGHT_TEXT),
        "E": GradeColors(background="#e63e11", text=_LIGHT_TEXT),
    }
)
FALLBACK_COLORS = GradeColors(background="#AAAAAA", text=_LIGHT_TEXT)


def points_for_threshold(value: float, thresholds: ThresholdTable) -> int:
    """Return how many ascending thresholds the value strictly exceeds."""
    points = 0
    for index, threshold in enumerate(thresholds):
        if value > threshold:
            points = index + 1
    return points


def points_for_bands(percent: float, bands: ThresholdTable) -> int:
    """Return how many band lower bounds the percentage reaches."""
    points = 0
    for index, lower_bound in enumerate(bands):
        if percent >= lower_bound:
            points = index + 1
    return points


def grade_for_score(final_score: float, profile: ScoringProfile = MAIN_FOODS) -> str:
    """Map a final score to its letter grade."""
    for upper_bound, grade in profile.grade_bounds:
        if final_score <= upper_bound:
            return grade
    return profile.worst_grade


def colors_for_grade(grade: str) -> GradeColors:
    """Return display colors for a grade, gray for anything unknown."""
    return GRADE_COLORS.get(grade, FALLBACK_COLORS)


def score(
    nutrients: CanonicalNutrients, profile: ScoringProfile = MAIN_FOODS
) -> ScoreBreakdown:
    """Compute the Nutri-Score breakdown for a per-100g nutrient vector."""
    energy = points_for_threshold(nutrients.energy_kj, profile.energy_kj)
    saturates = points_for_threshold(nutrients.saturates_g, profile.saturates_g)
    sugars = points_for_threshold(nutrients.sugars_g, profile.sugars_g)
    salt = points_for_threshold(nutrients.salt_g, profile.salt_g)
    unfavorable = energy + saturates + sugars + salt

    protein = points_for_threshold(nutrients.protein_g, profile.protein_g)
    fiber = points_for_threshold(nutrients.fiber_g, profile.fiber_g)
    fruit_veg = points_for_bands(nutrients.fruit_veg_percent, profile.fruit_veg_bands)

    protein_excluded = (
        unfavorable >= profile.protein_exclusion_min and not nutrients.is_cheese
    )
    favorable = fiber + fruit_veg
    if not protein_excluded:
        favorable += protein

    final_score = unfavorable - favorable
    grade = grade_for_score(final_score, profile)
    return ScoreBreakdown(
        energy_points=energy,
        saturates_points=saturates,
        sugars_points=sugars,
        salt_points=salt,
        protein_points=protein,
        fiber_points=fiber,
        fruit_veg_points=fruit_veg,
        unfavorable_total=unfavorable,
        favorable_total=favorable,
        protein_excluded=protein_excluded,
        final_score=final_score,
        grade=grade,
        colors=colors_for_grade(grade),
    )
