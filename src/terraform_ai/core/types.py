"""Core data types for the assessment and generation pipelines.

Requests are frozen dataclasses consumed once by a prompt builder. The
assessment verdict is a frozen pydantic model so it can be validated straight
from the model's JSON payload and serialized back for the report.
"""

from __future__ import annotations

import dataclasses
from enum import Enum, auto
import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from terraform_ai.exceptions import ConfigurationError

# --- Enums ---


class ArtifactKind(Enum):
    """Output shape expected from the model."""

    STRUCTURED_ASSESSMENT = auto()
    RAW_HCL = auto()


class SuccessRating(str, Enum):
    """Ratings the assessment prompt asks the model to choose from."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


# --- Requests ---


def _read_input(path: str | Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(f"Error: File not found at '{path}'") from e


@dataclasses.dataclass(frozen=True, slots=True)
class AssessmentRequest:
    """A Terraform file to be assessed."""

    file_path: str
    file_content: str

    @classmethod
    def from_file(cls, path: str | Path) -> AssessmentRequest:
        """Read ``path`` as UTF-8 text.

        Raises:
            ConfigurationError: If the file does not exist.
        """
        return cls(file_path=str(path), file_content=_read_input(path))


@dataclasses.dataclass(frozen=True, slots=True)
class GenerationRequest:
    """Architecture and governance documents to merge into Terraform."""

    architecture_doc: str
    policy_doc: str

    @classmethod
    def from_files(
        cls, architecture_path: str | Path, policy_path: str | Path
    ) -> GenerationRequest:
        """Read both input documents as UTF-8 text.

        Raises:
            ConfigurationError: If either file does not exist.
        """
        return cls(
            architecture_doc=_read_input(architecture_path),
            policy_doc=_read_input(policy_path),
        )


# --- Artifacts ---

GenerationArtifact = str


class AssessmentResult(BaseModel):
    """Verdict returned by the assessment pipeline.

    ``success_rating`` is kept as the raw string the model produced; use
    ``rating`` to get the enum when the value is one of the known literals.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    file_path: str = ""
    success_rating: str
    observations: list[str] = Field(default_factory=list)

    @property
    def rating(self) -> SuccessRating | None:
        try:
            return SuccessRating(self.success_rating)
        except ValueError:
            return None

    def with_file_path(self, file_path: str) -> AssessmentResult:
        """Return a copy carrying ``file_path``."""
        return self.model_copy(update={"file_path": file_path})

    def to_report_json(self) -> str:
        """Indented JSON in field order: file_path, success_rating, observations."""
        return json.dumps(self.model_dump(), indent=2, ensure_ascii=False)
