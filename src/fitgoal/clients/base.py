"""Base class for plan generation clients."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ImagePart:
    """An inline image sent to the model."""

    data: str  # bare base64 payload
    mime_type: str = "image/jpeg"


class PlanGenerationClient(ABC):
    """Sends a prompt and two photos to a generative model.

    Implementations make a single attempt per call and return the raw
    response text, which is expected to be JSON.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the name of the AI provider."""
        pass

    @abstractmethod
    def ensure_configured(self) -> None:
        """Raise ConfigurationError if the client cannot make calls."""
        pass

    @abstractmethod
    async def generate(self, prompt: str, images: list[ImagePart]) -> str:
        """Generate a plan.

        Args:
            prompt: Instruction text
            images: The current-body and goal-body images, in that order

        Returns:
            Raw response text

        Raises:
            ConfigurationError: If the client is not configured
            UpstreamError: If the provider call fails or times out
        """
        pass
