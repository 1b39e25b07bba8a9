"""
Gemini implementation of the model invocation capability
"""  # noqa: D212, D415

import logging

from google import genai
from google.genai import types

from ..config.types import ModelConfig
from ..exceptions import ResponseShapeError
from ..telemetry import TelemetryContext
from .error_handler import GenerationErrorHandler

log = logging.getLogger(__name__)


class GeminiInvoker:
    """Calls ``generate_content`` once per prompt and returns the first text part.

    The credential is checked before the SDK client is created, so a missing
    key fails without any network traffic. Requests are non-streaming, carry a
    single user-role text part, and are never retried.
    """

    def __init__(self, config: ModelConfig, client: genai.Client | None = None):
        config.validate()
        self.config = config
        self.error_handler = GenerationErrorHandler()
        self.tele = TelemetryContext()
        self.client = client or self._build_client()
        log.debug(
            "GeminiInvoker initialized with model '%s' via %s.",
            config.model,
            "Vertex AI" if config.uses_vertex else "Gemini API",
        )

    def _build_client(self) -> genai.Client:
        try:
            if self.config.uses_vertex:
                return genai.Client(
                    vertexai=True,
                    project=self.config.project_id,
                    location=self.config.location,
                )
            return genai.Client(api_key=self.config.api_key)
        except Exception as e:
            raise self.error_handler.translate(e, self.config.model) from e

    def generate(self, prompt: str) -> str:
        """Send ``prompt`` and return ``candidates[0].content.parts[0].text``."""
        with self.tele("client.generate_content", model=self.config.model):
            try:
                response = self.client.models.generate_content(
                    model=self.config.model,
                    contents=[
                        types.Content(role="user", parts=[types.Part(text=prompt)])
                    ],
                    config=types.GenerateContentConfig(
                        temperature=self.config.temperature
                    ),
                )
            except Exception as e:
                raise self.error_handler.translate(e, self.config.model) from e

        return self._first_text(response)

    def _first_text(self, response: types.GenerateContentResponse) -> str:
        candidates = response.candidates or []
        if not candidates:
            raise ResponseShapeError("Model response contained no candidates.")

        content = candidates[0].content
        parts = content.parts if content is not None else None
        if not parts:
            finish_reason = getattr(candidates[0], "finish_reason", None)
            raise ResponseShapeError(
                f"Model response candidate contained no content parts "
                f"(finish_reason={finish_reason})."
            )

        text = parts[0].text
        if text is None:
            raise ResponseShapeError("First content part of the model response has no text.")

        log.debug("Received %d characters from %s", len(text), self.config.model)
        return text
