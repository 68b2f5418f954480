"""Pytest configuration and fixtures."""

import asyncio
import json
import tempfile
from pathlib import Path

import pytest

from fitgoal.clients.base import ImagePart, PlanGenerationClient
from fitgoal.config import Settings
from fitgoal.db import WorkoutRepository, init_db
from fitgoal.errors import ConfigurationError, UpstreamError
from fitgoal.models.plan import DayPlan, Exercise, WorkoutPlan


class FakePlanClient(PlanGenerationClient):
    """Plan client that returns canned text and records its calls."""

    def __init__(self, response: str = "", configured: bool = True, error: Exception | None = None):
        self.response = response
        self.configured = configured
        self.error = error
        self.calls: list[tuple[str, list[ImagePart]]] = []

    @property
    def provider_name(self) -> str:
        return "fake"

    def ensure_configured(self) -> None:
        if not self.configured:
            raise ConfigurationError("GEMINI_API_KEY is not set")

    async def generate(self, prompt: str, images: list[ImagePart]) -> str:
        self.ensure_configured()
        self.calls.append((prompt, images))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def temp_dir():
    """Create a temporary data directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_db_path(temp_dir):
    """Create an initialized temporary database."""
    db_path = temp_dir / "test.db"
    asyncio.run(init_db(db_path))
    return db_path


@pytest.fixture
def repository(temp_db_path):
    """Workout repository on the temporary database."""
    return WorkoutRepository(temp_db_path)


@pytest.fixture
def settings(temp_dir):
    """Settings pointing at the temporary directory."""
    return Settings(
        gemini_api_key="test-key",
        data_dir=temp_dir / "data",
        static_dir=temp_dir / "public",
    )


@pytest.fixture
def sample_plan():
    """Create a sample workout plan."""
    return WorkoutPlan(
        title="Definition Protocol",
        analysis="Reduce body fat while keeping shoulder and back mass.",
        schedule=[
            DayPlan(
                day="Day 1",
                focus="Chest and Triceps",
                exercises=[
                    Exercise(name="Bench Press", sets="4x10"),
                    Exercise(name="Cable Fly", sets="3x15"),
                ],
            ),
            DayPlan(
                day="Day 2",
                focus="Back and Biceps",
                exercises=[
                    Exercise(name="Pull-up", sets="4x8"),
                    Exercise(name="Barbell Curl", sets="3x12"),
                ],
            ),
            DayPlan(day="Day 3", focus="Active Recovery", exercises=[]),
        ],
    )


@pytest.fixture
def sample_plan_json(sample_plan):
    """Sample plan as the model would return it."""
    return json.dumps(sample_plan.to_dict())


@pytest.fixture
def make_client():
    """Factory for fake plan clients."""
    return FakePlanClient


@pytest.fixture
def fake_client(sample_plan_json):
    """Configured fake client answering with the sample plan."""
    return FakePlanClient(response=sample_plan_json)


@pytest.fixture
def failing_client():
    """Fake client whose provider call fails."""
    return FakePlanClient(error=UpstreamError("Gemini API error 503: overloaded"))
