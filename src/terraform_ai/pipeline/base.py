"""Straight-line prompt -> model -> extract -> validate pipeline."""

from dataclasses import dataclass
import logging
from typing import Any

from terraform_ai.client.invoker import ModelInvoker
from terraform_ai.core.types import ArtifactKind
from terraform_ai.prompts.base import BasePromptBuilder
from terraform_ai.response.extraction import clean_model_response
from terraform_ai.response.validation import ArtifactValidator, payload_preview
from terraform_ai.telemetry import TelemetryContext

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContractPipeline:
    """Runs one request through the four contract stages.

    There is no branching and no recovery: the first stage to fail raises
    and nothing after it runs.
    """

    prompt_builder: BasePromptBuilder
    invoker: ModelInvoker
    validator: ArtifactValidator

    def run(self, request: Any) -> Any:  # noqa: ANN401
        tele = TelemetryContext()
        json_payload = self.validator.kind is ArtifactKind.STRUCTURED_ASSESSMENT

        with tele("pipeline.prompt"):
            prompt = self.prompt_builder.create_prompt(request)
        log.debug(
            "Built %d character prompt with %s",
            len(prompt),
            type(self.prompt_builder).__name__,
        )

        with tele("pipeline.invoke"):
            raw = self.invoker.generate(prompt)
        log.debug("Raw model response: %r", payload_preview(raw))

        with tele("pipeline.extract"):
            payload = clean_model_response(raw, json_payload=json_payload)
        tele.metric("pipeline.payload_chars", len(payload))

        with tele("pipeline.validate"):
            return self.validator.validate(payload)
