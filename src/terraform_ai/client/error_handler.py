"""
Error translation for Gemini API generation requests
"""  # noqa: D212, D415

from google.auth import exceptions as auth_exceptions
from google.genai import errors as genai_errors
import httpx

from ..exceptions import APIError, AuthenticationError, TransportError

_AUTH_STATUS_CODES = frozenset({401, 403})


class GenerationErrorHandler:
    """Maps SDK and transport errors onto the terraform_ai error taxonomy"""  # noqa: D415

    def translate(self, error: Exception, model: str) -> APIError:
        """Return the terraform_ai error for ``error``; the caller raises it"""  # noqa: D415
        if isinstance(error, APIError):
            return error

        if isinstance(error, auth_exceptions.GoogleAuthError):
            return AuthenticationError(
                f"Authentication with Google Cloud failed: {error}"
            )

        if isinstance(error, genai_errors.APIError):
            if error.code in _AUTH_STATUS_CODES:
                return AuthenticationError(
                    f"API Request Failed: {error.code} {error.status or ''}. "
                    f"Check your API key or project permissions. {error.message or ''}".strip()
                )
            return TransportError(
                f"API Request Failed: {error.code} {error.status or ''}. "
                f"{error.message or ''}".strip()
            )

        if isinstance(error, httpx.HTTPError):
            return TransportError(f"Could not reach the model API ({model}): {error}")

        return TransportError(f"Content generation failed for {model}: {error}")
