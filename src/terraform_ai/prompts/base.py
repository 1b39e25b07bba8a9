from abc import ABC, abstractmethod  # noqa: D100
from typing import Any


class BasePromptBuilder(ABC):
    """Abstract base class for all prompt builders."""

    @abstractmethod
    def create_prompt(self, request: Any) -> str:  # noqa: ANN401
        """Creates the full prompt text to be sent to the model."""
        pass  # noqa: PIE790
