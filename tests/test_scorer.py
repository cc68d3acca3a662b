"""Tests for Nutri-Score points and grades."""

import math

import pytest

from nutriscore_grader.domain.scoring import GradeColors
from nutriscore_grader.services.normalizer import normalize
from nutriscore_grader.services.profiles import MAIN_FOODS
from nutriscore_grader.services.scorer import (
    FALLBACK_COLORS,
    colors_for_grade,
    grade_for_score,
    points_for_bands,
    points_for_threshold,
    score,
)
from tests.conftest import per_100g


def test_points_count_strictly_exceeded_thresholds() -> None:
    table = (1, 2, 3)

    assert points_for_threshold(0.5, table) == 0
    assert points_for_threshold(1, table) == 0
    assert points_for_threshold(1.01, table) == 1
    assert points_for_threshold(3, table) == 2
    assert points_for_threshold(99, table) == 3


def test_nan_never_exceeds_a_threshold() -> None:
    assert points_for_threshold(math.nan, MAIN_FOODS.energy_kj) == 0
    assert points_for_bands(math.nan, MAIN_FOODS.fruit_veg_bands) == 0


def test_negative_values_score_zero() -> None:
    breakdown = score(per_100g(energy_kj=-500, protein_g=-3, fruit_veg_percent=-10))

    assert breakdown.energy_points == 0
    assert breakdown.protein_points == 0
    assert breakdown.fruit_veg_points == 0
    assert breakdown.final_score == 0


@pytest.mark.parametrize(
    ("percent", "expected"),
    [
        (0, 0),
        (39.9, 0),
        (40, 1),
        (59.9, 1),
        (60, 2),
        (80, 3),
        (89.9, 3),
        (90, 4),
        (99.9, 4),
        (100, 5),
        (120, 5),
    ],
)
def test_fruit_veg_bands(percent: float, expected: int) -> None:
    assert points_for_bands(percent, MAIN_FOODS.fruit_veg_bands) == expected


def test_table_maximums() -> None:
    breakdown = score(
        per_100g(
            energy_kj=10_000,
            saturates_g=100,
            sugars_g=100,
            salt_g=100,
            protein_g=100,
            fiber_g=100,
            fruit_veg_percent=100,
        )
    )

    assert breakdown.energy_points == 10
    assert breakdown.saturates_points == 10
    assert breakdown.sugars_points == 15
    assert breakdown.salt_points == 20
    assert breakdown.protein_points == 7
    assert breakdown.fiber_points == 5
    assert breakdown.fruit_veg_points == 5
    assert breakdown.unfavorable_total == 55


def test_salt_table_is_arithmetic_from_0_12() -> None:
    salt = MAIN_FOODS.salt_g

    assert len(salt) == 20
    assert salt[0] == pytest.approx(0.12)
    assert salt[1] == pytest.approx(0.345)
    assert salt[-1] == pytest.approx(0.12 + 19 * 0.225)
    assert points_for_threshold(0.5, salt) == 2


@pytest.mark.parametrize(
    ("field", "values"),
    [
        ("energy_kj", [0, 300, 700, 1500, 2500, 3400]),
        ("saturates_g", [0, 0.5, 1.5, 4, 9.5, 12]),
        ("sugars_g", [0, 5, 15, 30, 45, 60]),
        ("salt_g", [0, 0.2, 1.0, 2.5, 4.5, 6]),
        ("protein_g", [0, 3, 8, 13, 17, 30]),
        ("fiber_g", [0, 3.5, 5, 7, 8, 20]),
    ],
)
def test_component_points_are_monotone(field: str, values: list[float]) -> None:
    points_attr = {
        "energy_kj": "energy_points",
        "saturates_g": "saturates_points",
        "sugars_g": "sugars_points",
        "salt_g": "salt_points",
        "protein_g": "protein_points",
        "fiber_g": "fiber_points",
    }[field]
    points = [
        getattr(score(per_100g(**{field: value})), points_attr) for value in values
    ]

    assert points == sorted(points)
    assert points[0] == 0
    assert points[-1] > 0


def test_protein_counts_when_unfavorable_total_is_10() -> None:
    breakdown = score(per_100g(energy_kj=3400, protein_g=10))

    assert breakdown.unfavorable_total == 10
    assert breakdown.protein_points == 4
    assert breakdown.protein_excluded is False
    assert breakdown.favorable_total == 4
    assert breakdown.final_score == 6


def test_protein_excluded_when_unfavorable_total_is_11() -> None:
    breakdown = score(
        per_100g(energy_kj=3400, saturates_g=1.5, protein_g=10, fiber_g=3.5)
    )

    assert breakdown.unfavorable_total == 11
    assert breakdown.protein_points == 4
    assert breakdown.protein_excluded is True
    assert breakdown.favorable_total == 1
    assert breakdown.final_score == 10


def test_cheese_keeps_protein_when_unfavorable_total_is_11() -> None:
    breakdown = score(
        per_100g(
            energy_kj=3400,
            saturates_g=1.5,
            protein_g=10,
            fiber_g=3.5,
            is_cheese=True,
        )
    )

    assert breakdown.unfavorable_total == 11
    assert breakdown.protein_excluded is False
    assert breakdown.favorable_total == 5
    assert breakdown.final_score == 6


def test_final_score_can_be_negative() -> None:
    breakdown = score(per_100g(protein_g=20, fiber_g=10, fruit_veg_percent=100))

    assert breakdown.final_score == -17
    assert breakdown.grade == "A"


@pytest.mark.parametrize(
    ("final_score", "grade"),
    [
        (-5, "A"),
        (0, "A"),
        (1, "B"),
        (2, "B"),
        (3, "C"),
        (10, "C"),
        (11, "D"),
        (18, "D"),
        (19, "E"),
        (40, "E"),
    ],
)
def test_grade_boundaries(final_score: int, grade: str) -> None:
    assert grade_for_score(final_score) == grade


@pytest.mark.parametrize(
    ("grade", "background", "text"),
    [
        ("A", "#038141", "#ffffff"),
        ("B", "#85bb2f", "#333333"),
        ("C", "#fecb02", "#333333"),
        ("D", "#ee8100", "#ffffff"),
        ("E", "#e63e11", "#ffffff"),
    ],
)
def test_grade_colors(grade: str, background: str, text: str) -> None:
    assert colors_for_grade(grade) == GradeColors(background=background, text=text)


def test_unknown_grade_falls_back_to_gray() -> None:
    assert colors_for_grade("Z") == FALLBACK_COLORS
    assert FALLBACK_COLORS.background == "#AAAAAA"
    assert FALLBACK_COLORS.text == "#ffffff"


def test_granola_end_to_end(granola_record) -> None:
    breakdown = score(normalize(granola_record))

    assert breakdown.energy_points == 6
    assert breakdown.saturates_points == 3
    assert breakdown.sugars_points == 4
    assert breakdown.salt_points == 2
    assert breakdown.unfavorable_total == 15
    assert breakdown.protein_points == 4
    assert breakdown.fiber_points == 4
    assert breakdown.fruit_veg_points == 0
    assert breakdown.protein_excluded is True
    assert breakdown.favorable_total == 4
    assert breakdown.final_score == 11
    assert breakdown.grade == "D"
    assert breakdown.colors.background == "#ee8100"


def test_score_is_deterministic(granola_record) -> None:
    nutrients = normalize(granola_record)

    assert score(nutrients) == score(nutrients)
