"""
Terraform assessment and generation with Gemini
"""

import importlib.metadata
import logging

from .client import GeminiInvoker, ModelInvoker
from .config import EnvironmentConfigLoader, GenerationPaths, ModelConfig
from .core import (
    ArtifactKind,
    AssessmentRequest,
    AssessmentResult,
    GenerationRequest,
    SuccessRating,
)
from .exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    DeserializationError,
    EmptyArtifactError,
    MissingKeyError,
    ResponseShapeError,
    TerraformAIError,
    TransportError,
)
from .pipeline import assess_file, assess_terraform, generate_file, generate_terraform
from .response import clean_model_response

# Version handling
try:
    __version__ = importlib.metadata.version("terraform-ai")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # fallback version

# Set up a null handler for the library's root logger.
# This prevents 'No handler found' errors if the consuming app has no logging configured.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API
__all__ = [
    # Pipelines
    "assess_terraform",
    "assess_file",
    "generate_terraform",
    "generate_file",
    "clean_model_response",
    # Model access
    "GeminiInvoker",
    "ModelInvoker",
    # Configuration
    "EnvironmentConfigLoader",
    "ModelConfig",
    "GenerationPaths",
    # Types
    "ArtifactKind",
    "AssessmentRequest",
    "AssessmentResult",
    "GenerationRequest",
    "SuccessRating",
    # Exceptions
    "TerraformAIError",
    "ConfigurationError",
    "MissingKeyError",
    "APIError",
    "AuthenticationError",
    "TransportError",
    "ResponseShapeError",
    "DeserializationError",
    "EmptyArtifactError",
]
