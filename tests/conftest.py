"""Shared test fixtures."""

import pytest

from nutriscore_grader.config import Settings
from nutriscore_grader.containers import AppContainer
from nutriscore_grader.domain.foods import FoodEntry
from nutriscore_grader.domain.nutrients import (
    CanonicalNutrients,
    RawNutrientRecord,
    ServingSize,
)
from nutriscore_grader.services.grading import GradingService
from nutriscore_grader.services.profiles import MAIN_FOODS


def per_100g(**overrides: object) -> CanonicalNutrients:
    """Return a zero vector with selected fields overridden."""
    values: dict[str, object] = {
        "energy_kj": 0.0,
        "saturates_g": 0.0,
        "sugars_g": 0.0,
        "salt_g": 0.0,
        "protein_g": 0.0,
        "fiber_g": 0.0,
        "fruit_veg_percent": 0.0,
        "is_cheese": False,
    }
    values.update(overrides)
    return CanonicalNutrients(**values)


@pytest.fixture
def granola_record() -> RawNutrientRecord:
    return RawNutrientRecord(
        serving=ServingSize(amount=30, unit="g"),
        calories=150,
        saturated_fat_g=1,
        total_sugars_g=5,
        sodium_mg=150,
        protein_g=3,
        dietary_fiber_g=2,
    )


@pytest.fixture
def granola_food() -> FoodEntry:
    return FoodEntry(
        name="Granola bar",
        note="Pick this one",
        category="Bars",
        source="label",
        serving_g=30,
        calories=150,
        saturated_fat_g=1,
        sodium_mg=150,
        fiber_g=2,
        total_sugar_g=5,
        protein_g=3,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(scoring_profile="main_foods", grading_debug=False)


@pytest.fixture
def grading_service() -> GradingService:
    return GradingService(profile=MAIN_FOODS)


@pytest.fixture
def container(settings: Settings, grading_service: GradingService) -> AppContainer:
    return AppContainer(settings=settings, grading_service=grading_service)
