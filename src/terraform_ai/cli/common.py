"""Shared CLI plumbing: logging setup and exit codes per error kind."""

import logging
import sys

from terraform_ai.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DeserializationError,
    EmptyArtifactError,
    ResponseShapeError,
    TerraformAIError,
    TransportError,
)

# ruff: noqa: T201

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_CONFIGURATION = 3
EXIT_AUTHENTICATION = 4
EXIT_TRANSPORT = 5
EXIT_RESPONSE_SHAPE = 6
EXIT_DESERIALIZATION = 7
EXIT_EMPTY_ARTIFACT = 8
EXIT_IO = 9

# Most specific first
_EXIT_CODES: tuple[tuple[type[BaseException], int], ...] = (
    (ConfigurationError, EXIT_CONFIGURATION),
    (AuthenticationError, EXIT_AUTHENTICATION),
    (TransportError, EXIT_TRANSPORT),
    (ResponseShapeError, EXIT_RESPONSE_SHAPE),
    (DeserializationError, EXIT_DESERIALIZATION),
    (EmptyArtifactError, EXIT_EMPTY_ARTIFACT),
    (OSError, EXIT_IO),
)


def exit_code_for(error: BaseException) -> int:
    for error_type, code in _EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return 1


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # google-genai and httpx are chatty at DEBUG
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)


def report_failure(error: TerraformAIError | OSError) -> int:
    """Print the failure for the user and return its exit code."""
    message = str(error)
    if isinstance(error, OSError):
        message = f"An error occurred: {error}"
    elif not message.startswith(("Error", "API Request Failed")):
        message = f"An error occurred: {message}"
    print(message)
    if isinstance(error, DeserializationError) and error.payload:
        logging.getLogger(__name__).debug("Offending payload: %r", error.payload)
    return exit_code_for(error)
