"""Conversion of label values to the per-100g scoring basis."""

import logging
import math
from typing import cast

from nutriscore_grader.domain.nutrients import CanonicalNutrients, RawNutrientRecord

KJ_PER_KCAL = 4.184
MG_PER_G = 1000.0

_SCALED_UNITS = {"g", "ml"}

_logger = logging.getLogger(__name__)


def normalize(record: RawNutrientRecord) -> CanonicalNutrients:
    """Scale a per-serving record to 100g and convert units.

    Sodium is converted to grams and used as the salt value directly. The
    serving amount is not validated: zero gives an infinite factor and
    negative or NaN amounts propagate into the result.
    """
    unit = record.serving.unit.strip().lower()
    if unit not in _SCALED_UNITS:
        _logger.warning("Serving unit %r is not g or ml; scaling as grams", unit)
    factor = _scale_factor(record.serving.amount)

    return CanonicalNutrients(
        energy_kj=record.calories * KJ_PER_KCAL * factor,
        saturates_g=record.saturated_fat_g * factor,
        sugars_g=record.total_sugars_g * factor,
        salt_g=record.sodium_mg / MG_PER_G * factor,
        protein_g=record.protein_g * factor,
        fiber_g=record.dietary_fiber_g * factor,
        fruit_veg_percent=cast("float", record.fruit_veg_percent),
        is_cheese=record.is_cheese,
    )


def _scale_factor(serving_amount: float) -> float:
    if serving_amount == 0:
        return math.copysign(math.inf, serving_amount)
    return 100.0 / serving_amount
