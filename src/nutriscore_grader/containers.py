"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutriscore_grader.config import Settings
from nutriscore_grader.services.grading import GradingService
from nutriscore_grader.services.profiles import get_profile


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    grading_service: GradingService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    grading_service = GradingService(
        profile=get_profile(resolved_settings.scoring_profile),
        debug=resolved_settings.grading_debug,
    )
    return AppContainer(
        settings=resolved_settings,
        grading_service=grading_service,
    )
