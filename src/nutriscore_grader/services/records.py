"""Builders for nutrient records from already-parsed payloads."""

import logging
import math
from collections.abc import Mapping

from nutriscore_grader.domain.foods import FoodEntry
from nutriscore_grader.domain.nutrients import RawNutrientRecord, ServingSize

_logger = logging.getLogger(__name__)


def record_from_payload(payload: Mapping[str, object]) -> RawNutrientRecord:
    """Build a record from a serving-label payload."""
    serving = payload.get("serving_size")
    if isinstance(serving, Mapping):
        amount = _to_float(serving.get("amount"), field="serving_size.amount")
        unit = str(serving.get("unit") or "g")
    else:
        amount = _to_float(serving, field="serving_size")
        unit = "g"
    return RawNutrientRecord(
        serving=ServingSize(amount=amount, unit=unit),
        calories=_to_float(payload.get("calories"), field="calories"),
        saturated_fat_g=_to_float(payload.get("saturated_fat"), field="saturated_fat"),
        total_sugars_g=_to_float(payload.get("total_sugars"), field="total_sugars"),
        sodium_mg=_to_float(payload.get("sodium"), field="sodium"),
        protein_g=_to_float(payload.get("protein"), field="protein"),
        dietary_fiber_g=_to_float(payload.get("dietary_fiber"), field="dietary_fiber"),
        fruit_veg_percent=_optional_float(
            payload.get("fruit_veg_percent"), field="fruit_veg_percent"
        ),
        is_cheese=_to_bool(payload.get("is_cheese")),
    )


def food_from_row(row: Mapping[str, object]) -> FoodEntry:
    """Build a catalogue food from a row whose fields are already split."""
    return FoodEntry(
        name=_clean_text(row.get("name")),
        note=_clean_text(row.get("note")),
        category=_clean_text(row.get("category")),
        source=_clean_text(row.get("source")),
        serving_g=_to_float(row.get("serving_g"), field="serving_g"),
        calories=_to_float(row.get("calories"), field="calories"),
        saturated_fat_g=_to_float(row.get("saturated_fat_g"), field="saturated_fat_g"),
        sodium_mg=_to_float(row.get("sodium_mg"), field="sodium_mg"),
        fiber_g=_to_float(row.get("fiber_g"), field="fiber_g"),
        total_sugar_g=_to_float(row.get("total_sugar_g"), field="total_sugar_g"),
        protein_g=_to_float(row.get("protein_g"), field="protein_g"),
        fruit_veg_percent=_optional_float(
            row.get("fruit_veg_percent"), field="fruit_veg_percent"
        ),
        is_cheese=_to_bool(row.get("is_cheese")),
    )


def record_from_food(food: FoodEntry) -> RawNutrientRecord:
    """Convert a catalogue food to a raw record served in grams."""
    return RawNutrientRecord(
        serving=ServingSize(amount=food.serving_g, unit="g"),
        calories=food.calories,
        saturated_fat_g=food.saturated_fat_g,
        total_sugars_g=food.total_sugar_g,
        sodium_mg=food.sodium_mg,
        protein_g=food.protein_g,
        dietary_fiber_g=food.fiber_g,
        fruit_veg_percent=food.fruit_veg_percent,
        is_cheese=food.is_cheese,
    )


def _to_float(value: object, *, field: str) -> float:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        cleaned = _clean_text(value)
        # Blank cells read as zero, like an empty label field.
        if not cleaned:
            return 0.0
        try:
            return float(cleaned)
        except ValueError:
            pass
    _logger.warning("Failed to parse number for %s: %r", field, value)
    return math.nan


def _optional_float(value: object, *, field: str) -> float | None:
    if value is None or (isinstance(value, str) and not _clean_text(value)):
        return None
    return _to_float(value, field=field)


def _to_bool(value: object) -> bool:
    if isinstance(value, str):
        return _clean_text(value).lower() in {"1", "true", "yes", "y"}
    return bool(value)


def _clean_text(value: object) -> str:
    if value is None:
        return ""
    text = str(value).strip()
    text = text.removeprefix('"')
    text = text.removesuffix('"')
    return text.strip()
