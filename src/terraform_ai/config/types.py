"""Frozen configuration passed explicitly into the pipelines."""

from dataclasses import dataclass
from pathlib import Path

from terraform_ai.exceptions import MissingKeyError

from .schema import DEFAULT_LOCATION, DEFAULT_MODEL, DEFAULT_TEMPERATURE


@dataclass(frozen=True)
class ModelConfig:
    """Immutable settings for a single model invocation.

    Either ``api_key`` (Gemini Developer API) or ``project_id`` (Vertex AI)
    must be set; ``validate`` enforces this before any client is built.
    """

    api_key: str | None = None
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    project_id: str | None = None
    location: str = DEFAULT_LOCATION
    strict_rating: bool = False

    @property
    def uses_vertex(self) -> bool:
        return not self.api_key and bool(self.project_id)

    def validate(self) -> None:
        """Validate that a credential is configured"""  # noqa: D415
        if not self.api_key and not self.project_id:
            raise MissingKeyError(
                "Error: Please set the GEMINI_API_KEY environment variable "
                "(or GOOGLE_PROJECT_ID to use Vertex AI)."
            )

    def __repr__(self) -> str:
        """Representation with redacted API key for safe logging."""
        api_key_display = "[REDACTED]" if self.api_key else None
        return (
            f"ModelConfig(api_key={api_key_display!r}, model={self.model!r}, "
            f"temperature={self.temperature!r}, project_id={self.project_id!r}, "
            f"location={self.location!r}, strict_rating={self.strict_rating!r})"
        )

    __str__ = __repr__


@dataclass(frozen=True)
class GenerationPaths:
    """Input and output locations for the generation pipeline."""

    architecture_path: Path
    policy_path: Path
    output_path: Path
