"""FastAPI application factory."""

from dataclasses import asdict

from fastapi import FastAPI, Request

from nutriscore_grader.api.models import (
    NutrientsPer100gBody,
    ScoreBody,
    ServingNutrientsBody,
)
from nutriscore_grader.app_logging import configure_logging
from nutriscore_grader.containers import AppContainer
from nutriscore_grader.domain.nutrients import CanonicalNutrients
from nutriscore_grader.domain.scoring import ScoreBreakdown


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/nutriscore")
    async def grade_serving(body: ServingNutrientsBody, request: Request) -> ScoreBody:
        """Grade per-serving label values."""
        state_container: AppContainer = request.app.state.container
        graded = state_container.grading_service.grade_payload(body.model_dump())
        return _score_body(graded.nutrients, graded.breakdown)

    @app.post("/nutriscore/per-100g")
    async def grade_per_100g(body: NutrientsPer100gBody, request: Request) -> ScoreBody:
        """Grade values that are already per 100g."""
        state_container: AppContainer = request.app.state.container
        nutrients = CanonicalNutrients(**body.model_dump())
        breakdown = state_container.grading_service.grade_per_100g(nutrients)
        return _score_body(nutrients, breakdown)

    return app


def _score_body(nutrients: CanonicalNutrients, breakdown: ScoreBreakdown) -> ScoreBody:
    return ScoreBody(
        nutrients=NutrientsPer100gBody(**asdict(nutrients)),
        **asdict(breakdown),
    )
