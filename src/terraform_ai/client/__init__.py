"""Model clients for the terraform_ai pipelines."""

from .error_handler import GenerationErrorHandler
from .gemini_invoker import GeminiInvoker
from .invoker import ModelInvoker

__all__ = [
    "GeminiInvoker",
    "GenerationErrorHandler",
    "ModelInvoker",
]
