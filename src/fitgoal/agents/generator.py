"""Request-to-persistence pipeline for workout plans."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..clients.base import ImagePart, PlanGenerationClient
from ..models.plan import WorkoutPlan
from ..models.request import WorkoutRequest
from ..utils.image_utils import image_mime_type, strip_data_uri
from .parser import parse_workout_plan
from .prompts import build_workout_prompt

if TYPE_CHECKING:
    # The store imports the parser from this package
    from ..db.repositories import WorkoutRepository

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Result from a pipeline run."""

    record_id: int
    plan: WorkoutPlan


class WorkoutGenerator:
    """Runs one generation request from validated input to stored plan.

    Stages run strictly in order and any failure aborts the rest, so a plan
    is only written after it parsed and validated.
    """

    def __init__(self, client: PlanGenerationClient, repository: "WorkoutRepository"):
        self.client = client
        self.repository = repository

    async def generate(self, request: WorkoutRequest) -> GenerationResult:
        """Generate, validate and store a workout plan.

        Args:
            request: Validated caller input

        Returns:
            GenerationResult with the stored record ID and the plan

        Raises:
            ConfigurationError: If the AI client is not configured
            UpstreamError: If the model call fails
            ParseError: If the model output is not a valid plan
            StorageError: If the plan could not be saved
        """
        # Fail before doing any work if the provider can't be called
        self.client.ensure_configured()

        images = [
            ImagePart(
                data=strip_data_uri(request.current_image),
                mime_type=image_mime_type(request.current_image),
            ),
            ImagePart(
                data=strip_data_uri(request.goal_image),
                mime_type=image_mime_type(request.goal_image),
            ),
        ]
        prompt = build_workout_prompt(request.frequency, request.duration)

        raw_text = await self.client.generate(prompt, images)
        plan = parse_workout_plan(raw_text)

        record_id = await self.repository.create(plan)
        logger.info("Stored workout plan %d (%s)", record_id, plan.title)

        return GenerationResult(record_id=record_id, plan=plan)
