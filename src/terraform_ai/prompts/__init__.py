"""Prompt builders: pure functions from a typed request to prompt text."""

from .assessment_prompt_builder import AssessmentPromptBuilder
from .base import BasePromptBuilder
from .generation_prompt_builder import DEFAULT_CLOUD_PROVIDER, GenerationPromptBuilder

__all__ = [
    "DEFAULT_CLOUD_PROVIDER",
    "AssessmentPromptBuilder",
    "BasePromptBuilder",
    "GenerationPromptBuilder",
]
