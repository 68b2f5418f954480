"""Tests for data models."""

from datetime import datetime

import pytest

from fitgoal.db.models import WorkoutRecord
from fitgoal.errors import ValidationError
from fitgoal.models.plan import DayPlan, Exercise, WorkoutPlan
from fitgoal.models.request import WorkoutRequest


class TestExercise:
    """Tests for Exercise model."""

    def test_exercise_to_dict(self):
        """Test exercise serialization."""
        exercise = Exercise(name="Squat", sets="5x5")
        assert exercise.to_dict() == {"name": "Squat", "sets": "5x5"}

    def test_numeric_sets_coerced_to_text(self):
        """Test that a bare number of sets becomes text."""
        exercise = Exercise.from_dict({"name": "Plank", "sets": 3})
        assert exercise.sets == "3"

    def test_missing_name_rejected(self):
        """Test that an exercise needs a name."""
        with pytest.raises(KeyError):
            Exercise.from_dict({"sets": "3x10"})

    def test_boolean_sets_rejected(self):
        """Test that booleans are not treated as numbers."""
        with pytest.raises(TypeError):
            Exercise.from_dict({"name": "Plank", "sets": True})


class TestWorkoutPlan:
    """Tests for WorkoutPlan model."""

    def test_plan_to_dict(self, sample_plan):
        """Test plan serialization."""
        data = sample_plan.to_dict()

        assert data["title"] == "Definition Protocol"
        assert len(data["schedule"]) == 3
        assert data["schedule"][0]["day"] == "Day 1"
        assert data["schedule"][0]["exercises"][0] == {"name": "Bench Press", "sets": "4x10"}
        assert data["schedule"][2]["exercises"] == []

    def test_plan_round_trip(self, sample_plan):
        """Test that from_dict inverts to_dict."""
        assert WorkoutPlan.from_dict(sample_plan.to_dict()) == sample_plan

    def test_extra_fields_ignored(self):
        """Test that unknown keys from the model are dropped."""
        plan = WorkoutPlan.from_dict({
            "title": "T",
            "analysis": "A",
            "goal": "hypertrophy",
            "schedule": [{"day": "Day 1", "focus": "Legs", "exercises": [], "notes": "x"}],
        })
        assert plan.to_dict() == {
            "title": "T",
            "analysis": "A",
            "schedule": [{"day": "Day 1", "focus": "Legs", "exercises": []}],
        }

    def test_empty_schedule_rejected(self):
        """Test that a plan needs at least one day."""
        with pytest.raises(ValueError):
            WorkoutPlan.from_dict({"title": "T", "analysis": "A", "schedule": []})

    def test_exercises_must_be_list(self):
        """Test that exercises must be a list."""
        with pytest.raises(TypeError):
            DayPlan.from_dict({"day": "Day 1", "focus": "Legs", "exercises": "Squat"})

    def test_summary(self, sample_plan):
        """Test summary generation."""
        summary = sample_plan.get_summary()

        assert "Plan: Definition Protocol" in summary
        assert "Day 1 - Chest and Triceps:" in summary
        assert "  - Bench Press: 4x10" in summary
        assert sample_plan.days_per_week == 3


class TestWorkoutRecord:
    """Tests for WorkoutRecord."""

    def test_record_to_dict(self, sample_plan):
        """Test history response shape."""
        record = WorkoutRecord(
            id=7,
            title=sample_plan.title,
            analysis=sample_plan.analysis,
            full_plan_json=sample_plan.to_json(),
            created_at=datetime(2026, 1, 2, 3, 4, 5),
            plan=sample_plan,
        )
        data = record.to_dict()

        assert set(data) == {"id", "title", "analysis", "full_plan_json", "created_at", "plan"}
        assert data["id"] == 7
        assert data["created_at"] == "2026-01-02T03:04:05"
        assert data["plan"] == sample_plan.to_dict()


class TestWorkoutRequest:
    """Tests for request validation."""

    def test_from_payload(self):
        """Test a complete payload."""
        request = WorkoutRequest.from_payload({
            "currentImage": "AAA",
            "goalImage": "BBB",
            "frequency": "4",
            "duration": 60,
        })

        assert request.current_image == "AAA"
        assert request.goal_image == "BBB"
        assert request.frequency == "4"
        assert request.duration == 60

    def test_preferences_optional(self):
        """Test that frequency and duration may be omitted."""
        request = WorkoutRequest.from_payload({"currentImage": "AAA", "goalImage": "BBB"})
        assert request.frequency is None
        assert request.duration is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"goalImage": "BBB"},
            {"currentImage": "AAA"},
            {"currentImage": "", "goalImage": "BBB"},
            {},
        ],
    )
    def test_missing_image_rejected(self, payload):
        """Test that both images are required."""
        with pytest.raises(ValidationError):
            WorkoutRequest.from_payload(payload)

    def test_non_string_image_rejected(self):
        """Test that images must be strings."""
        with pytest.raises(ValidationError):
            WorkoutRequest.from_payload({"currentImage": ["AAA"], "goalImage": "BBB"})

    def test_non_object_body_rejected(self):
        """Test that a JSON array body is rejected."""
        with pytest.raises(ValidationError):
            WorkoutRequest.from_payload(["AAA", "BBB"])
