"""Core data types shared by the pipelines."""

from .types import (
    ArtifactKind,
    AssessmentRequest,
    AssessmentResult,
    GenerationArtifact,
    GenerationRequest,
    SuccessRating,
)

__all__ = [
    "ArtifactKind",
    "AssessmentRequest",
    "AssessmentResult",
    "GenerationArtifact",
    "GenerationRequest",
    "SuccessRating",
]
