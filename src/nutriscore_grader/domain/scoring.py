"""Scoring domain models."""

from dataclasses import dataclass

ThresholdTable = tuple[float, ...]


@dataclass(frozen=True)
class ScoringProfile:
    """Threshold tables and grade bounds for one Nutri-Score food category."""

    name: str
    energy_kj: ThresholdTable
    saturates_g: ThresholdTable
    sugars_g: ThresholdTable
    salt_g: ThresholdTable
    protein_g: ThresholdTable
    fiber_g: ThresholdTable
    fruit_veg_bands: ThresholdTable
    protein_exclusion_min: int
    grade_bounds: tuple[tuple[int, str], ...]
    worst_grade: str


@dataclass(frozen=True)
class GradeColors:
    """Display color for a grade and the text color that contrasts with it."""

    background: str
    text: str


@dataclass(frozen=True)
class ScoreBreakdown:
    """Component points, totals and grade for one product."""

    energy_points: int
    saturates_points: int
    sugars_points: int
    salt_points: int
    protein_points: int
    fiber_points: int
    fruit_veg_points: int
    unfavorable_total: int
    favorable_total: int
    protein_excluded: bool
    final_score: int
    grade: str
    colors: GradeColors
