"""
Response processing for model output

Cleans fenced model responses and validates the payload into the artifact
each pipeline expects.
"""  # noqa: D212, D415

from .extraction import clean_model_response
from .validation import (
    ArtifactValidator,
    RawHclValidator,
    StructuredAssessmentValidator,
    payload_preview,
    validator_for,
)

__all__ = [  # noqa: RUF022
    # Extraction
    "clean_model_response",
    # Validation
    "ArtifactValidator",
    "StructuredAssessmentValidator",
    "RawHclValidator",
    "validator_for",
    "payload_preview",
]
