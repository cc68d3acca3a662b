"""Grading service combining normalization and scoring."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from nutriscore_grader.domain.foods import FoodEntry, GradedFood, GradedRecord
from nutriscore_grader.domain.nutrients import CanonicalNutrients, RawNutrientRecord
from nutriscore_grader.domain.scoring import ScoreBreakdown, ScoringProfile
from nutriscore_grader.services.normalizer import normalize
from nutriscore_grader.services.profiles import MAIN_FOODS
from nutriscore_grader.services.records import record_from_food, record_from_payload
from nutriscore_grader.services.scorer import score

_logger = logging.getLogger(__name__)


@dataclass
class GradingService:
    """Service that grades label records and catalogue foods."""

    profile: ScoringProfile = MAIN_FOODS
    debug: bool = False

    def grade(self, record: RawNutrientRecord) -> ScoreBreakdown:
        """Normalize a per-serving record and score it."""
        return self.grade_record(record).breakdown

    def grade_record(self, record: RawNutrientRecord) -> GradedRecord:
        """Grade a record, keeping the per-100g vector it was scored on."""
        nutrients = normalize(record)
        return GradedRecord(
            record=record,
            nutrients=nutrients,
            breakdown=self.grade_per_100g(nutrients),
        )

    def grade_payload(self, payload: Mapping[str, object]) -> GradedRecord:
        """Grade a serving-label payload."""
        return self.grade_record(record_from_payload(payload))

    def grade_per_100g(self, nutrients: CanonicalNutrients) -> ScoreBreakdown:
        """Score a vector that is already per 100g."""
        breakdown = score(nutrients, self.profile)
        if self.debug:
            _logger.info(
                "Nutri-Score %s: A=%s C=%s protein_excluded=%s score=%s grade=%s",
                self.profile.name,
                breakdown.unfavorable_total,
                breakdown.favorable_total,
                breakdown.protein_excluded,
                breakdown.final_score,
                breakdown.grade,
            )
        return breakdown

    def grade_food(self, food: FoodEntry) -> GradedFood:
        """Grade a catalogue food."""
        graded = self.grade_record(record_from_food(food))
        return GradedFood(
            food=food,
            nutrients=graded.nutrients,
            breakdown=graded.breakdown,
        )

    def grade_foods(self, foods: Iterable[FoodEntry]) -> list[GradedFood]:
        """Grade catalogue foods, keeping their order."""
        return [self.grade_food(food) for food in foods]
