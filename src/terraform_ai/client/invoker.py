"""Model invocation capability used by the pipelines."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ModelInvoker(Protocol):
    """Sends one prompt to a model and returns the raw response text.

    Implementations raise ``terraform_ai.exceptions.APIError`` subclasses on
    failure and never retry.
    """

    def generate(self, prompt: str) -> str: ...  # noqa: D102
