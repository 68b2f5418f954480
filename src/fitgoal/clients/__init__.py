"""AI provider clients."""

from .base import ImagePart, PlanGenerationClient
from .gemini import GeminiPlanClient

__all__ = ["GeminiPlanClient", "ImagePart", "PlanGenerationClient"]
