"""Domain models for the food catalogue."""

from dataclasses import dataclass

from nutriscore_grader.domain.nutrients import CanonicalNutrients, RawNutrientRecord
from nutriscore_grader.domain.scoring import ScoreBreakdown


@dataclass(frozen=True)
class FoodEntry:
    """A catalogue food with per-serving label values."""

    name: str
    note: str
    category: str
    source: str
    serving_g: float
    calories: float
    saturated_fat_g: float
    sodium_mg: float
    fiber_g: float
    total_sugar_g: float
    protein_g: float
    fruit_veg_percent: float | None = None
    is_cheese: bool = False


@dataclass(frozen=True)
class GradedFood:
    """A catalogue food with its per-100g vector and score."""

    food: FoodEntry
    nutrients: CanonicalNutrients
    breakdown: ScoreBreakdown


@dataclass(frozen=True)
class GradedRecord:
    """A label record with its per-100g vector and score."""

    record: RawNutrientRecord
    nutrients: CanonicalNutrients
    breakdown: ScoreBreakdown
