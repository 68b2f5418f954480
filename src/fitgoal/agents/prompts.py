"""Prompt templates for workout plan generation."""

# Shape the model must answer with; mirrors models.plan.WorkoutPlan
PLAN_JSON_SCHEMA = """{
    "title": "Program name (e.g. Definition Protocol)",
    "analysis": "Short comparison of what has to change between the two bodies.",
    "schedule": [
        {
            "day": "Day 1",
            "focus": "Focus of the day (e.g. Chest and Triceps)",
            "exercises": [
                { "name": "Exercise name", "sets": "Sets and reps (e.g. 4x12)" }
            ]
        }
    ]
}"""

WORKOUT_PLAN_PROMPT = """Act as an elite strength coach and exercise physiologist.
Analyze "Image A" (current body) and "Image B" (goal body).

User context:
- Availability: {frequency} days per week.
- Session length: {duration} minutes.

Task:
Create a complete training plan that transforms body A into body B.
Decide from the visual comparison whether the focus should be Hypertrophy (gain mass) or Definition (lose fat).
Build one schedule entry per training day, sized to fit the session length.

Return ONLY a JSON object with this exact structure:
{schema}"""

MISSING_VALUE = "not specified"


def _format_value(value) -> str:
    """Render a user preference for the template."""
    if value is None or value == "":
        return MISSING_VALUE
    return str(value)


def build_workout_prompt(frequency, duration) -> str:
    """Build the generation prompt for the given schedule preferences.

    Args:
        frequency: Training days per week (passed through as given)
        duration: Minutes per session (passed through as given)

    Returns:
        Prompt text asking for a JSON plan
    """
    return WORKOUT_PLAN_PROMPT.format(
        frequency=_format_value(frequency),
        duration=_format_value(duration),
        schema=PLAN_JSON_SCHEMA,
    )
