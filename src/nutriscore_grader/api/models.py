"""Pydantic models for the grading API."""

from pydantic import BaseModel, Field


class ServingSizeBody(BaseModel):
    """Serving size payload."""

    amount: float = Field(gt=0)
    unit: str = "g"


class ServingNutrientsBody(BaseModel):
    """Per-serving label values."""

    serving_size: ServingSizeBody
    calories: float
    saturated_fat: float
    total_sugars: float
    sodium: float
    protein: float
    dietary_fiber: float
    fruit_veg_percent: float | None = Field(default=None, ge=0, le=100)
    is_cheese: bool = False


class NutrientsPer100gBody(BaseModel):
    """Nutrient values already expressed per 100g."""

    energy_kj: float
    saturates_g: float
    sugars_g: float
    salt_g: float
    protein_g: float
    fiber_g: float
    fruit_veg_percent: float = Field(default=0.0, ge=0, le=100)
    is_cheese: bool = False


class GradeColorsBody(BaseModel):
    """Grade display colors."""

    background: str
    text: str


class ScoreBody(BaseModel):
    """Nutri-Score result with the per-100g values it was computed from."""

    nutrients: NutrientsPer100gBody
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
    colors: GradeColorsBody
