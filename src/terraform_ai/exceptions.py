"""Exceptions for the Terraform assessment and generation pipelines"""  # noqa: D415


class TerraformAIError(Exception):
    """Base exception for terraform_ai errors"""  # noqa: D415


class ConfigurationError(TerraformAIError):
    """Raised when required configuration or an input file is missing"""  # noqa: D415


class MissingKeyError(ConfigurationError):
    """Raised when no model credential (API key or Vertex project) is configured"""  # noqa: D415


class APIError(TerraformAIError):
    """Raised when the model call fails"""  # noqa: D415


class AuthenticationError(APIError):
    """Raised when the model API rejects the credential"""  # noqa: D415


class TransportError(APIError):
    """Raised when the model API call does not complete successfully"""  # noqa: D415


class ResponseShapeError(APIError):
    """Raised when the model response carries no candidate text"""  # noqa: D415


class DeserializationError(TerraformAIError):
    """Raised when a cleaned payload does not parse into the expected artifact.

    The offending text is kept on ``payload`` for diagnostics.
    """

    def __init__(self, message: str, payload: str = "") -> None:
        super().__init__(message)
        self.payload = payload


class EmptyArtifactError(TerraformAIError):
    """Raised when a cleaned payload is empty where content was required"""  # noqa: D415
