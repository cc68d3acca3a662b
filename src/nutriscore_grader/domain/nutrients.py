"""Nutrient domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServingSize:
    """Labelled serving size; grams and millilitres are treated alike."""

    amount: float
    unit: str = "g"


@dataclass(frozen=True)
class RawNutrientRecord:
    """Per-serving nutrition facts as printed on a label."""

    serving: ServingSize
    calories: float
    saturated_fat_g: float
    total_sugars_g: float
    sodium_mg: float
    protein_g: float
    dietary_fiber_g: float
    fruit_veg_percent: float | None = None
    is_cheese: bool = False

    def __post_init__(self) -> None:
        if self.fruit_veg_percent is None:
            object.__setattr__(self, "fruit_veg_percent", 0.0)


@dataclass(frozen=True)
class CanonicalNutrients:
    """Nutrients per 100g in the units the scoring tables expect."""

    energy_kj: float
    saturates_g: float
    sugars_g: float
    salt_g: float
    protein_g: float
    fiber_g: float
    fruit_veg_percent: float = 0.0
    is_cheese: bool = False
