"""Artifact validation for cleaned model payloads.

Two variants exist, selected by ``ArtifactKind``:

- ``StructuredAssessmentValidator`` parses the payload as the assessment JSON
  object and validates it with the ``AssessmentResult`` model.
- ``RawHclValidator`` keeps the payload verbatim; HCL is not parsed.
"""

import json
import logging
from typing import Any, Protocol, runtime_checkable

from pydantic import ValidationError

from terraform_ai.core.types import (
    ArtifactKind,
    AssessmentResult,
    GenerationArtifact,
    SuccessRating,
)
from terraform_ai.exceptions import DeserializationError, EmptyArtifactError

log = logging.getLogger(__name__)

_PREVIEW_CHARS = 200


@runtime_checkable
class ArtifactValidator(Protocol):
    """Turns a cleaned payload into the artifact for its kind."""

    kind: ArtifactKind

    def validate(self, payload: str) -> Any: ...  # noqa: D102


class StructuredAssessmentValidator:
    """Validates the assessment JSON object.

    ``file_path`` is owned by the caller: whatever the model put there is
    discarded. ``success_rating`` values outside High/Medium/Low are accepted
    with a warning unless ``strict_rating`` is set.
    """

    kind = ArtifactKind.STRUCTURED_ASSESSMENT

    def __init__(self, strict_rating: bool = False):
        self.strict_rating = strict_rating

    def validate(self, payload: str) -> AssessmentResult:
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise DeserializationError(
                f"Failed to deserialize the assessment response from the API: {e}",
                payload,
            ) from e

        if not isinstance(data, dict):
            raise DeserializationError(
                "Failed to deserialize the assessment response from the API: "
                f"expected a JSON object, got {type(data).__name__}",
                payload,
            )

        data.pop("file_path", None)
        if data.get("observations", ()) is None:
            data.pop("observations")

        try:
            result = AssessmentResult.model_validate(data)
        except ValidationError as e:
            raise DeserializationError(
                f"Assessment response did not match the expected shape: {e}",
                payload,
            ) from e

        if result.rating is None:
            known = ", ".join(rating.value for rating in SuccessRating)
            if self.strict_rating:
                raise DeserializationError(
                    f"Unknown success_rating {result.success_rating!r}; "
                    f"expected one of: {known}",
                    payload,
                )
            log.warning(
                "Model returned unrecognised success_rating %r (expected one of: %s)",
                result.success_rating,
                known,
            )

        return result


class RawHclValidator:
    """Accepts any non-empty payload as the generated Terraform."""

    kind = ArtifactKind.RAW_HCL

    def validate(self, payload: str) -> GenerationArtifact:
        if not payload:
            raise EmptyArtifactError(
                "Model returned no Terraform code after removing markdown formatting."
            )
        return payload


def validator_for(kind: ArtifactKind, *, strict_rating: bool = False) -> ArtifactValidator:
    """Return the validator for ``kind``."""
    if kind is ArtifactKind.STRUCTURED_ASSESSMENT:
        return StructuredAssessmentValidator(strict_rating=strict_rating)
    if kind is ArtifactKind.RAW_HCL:
        return RawHclValidator()
    raise ValueError(f"Unsupported artifact kind: {kind}")


def payload_preview(payload: str) -> str:
    """First characters of a payload for log and error messages."""
    if len(payload) <= _PREVIEW_CHARS:
        return payload
    return payload[:_PREVIEW_CHARS] + "..."
