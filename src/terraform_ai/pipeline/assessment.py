"""Terraform assessment pipeline."""

from pathlib import Path

from terraform_ai.client.invoker import ModelInvoker
from terraform_ai.core.types import ArtifactKind, AssessmentRequest, AssessmentResult
from terraform_ai.output.writer import write_artifact
from terraform_ai.prompts.assessment_prompt_builder import AssessmentPromptBuilder
from terraform_ai.response.validation import validator_for

from .base import ContractPipeline

DEFAULT_REPORT_NAME = "assessment_report.json"


def assess_terraform(
    request: AssessmentRequest,
    invoker: ModelInvoker,
    *,
    strict_rating: bool = False,
) -> AssessmentResult:
    """Ask the model to rate ``request`` and return the validated verdict.

    The returned result always carries ``request.file_path``; the model's own
    value for that field is never trusted.
    """
    pipeline = ContractPipeline(
        prompt_builder=AssessmentPromptBuilder(),
        invoker=invoker,
        validator=validator_for(
            ArtifactKind.STRUCTURED_ASSESSMENT, strict_rating=strict_rating
        ),
    )
    result: AssessmentResult = pipeline.run(request)
    return result.with_file_path(request.file_path)


def assess_file(
    path: str | Path,
    invoker: ModelInvoker,
    *,
    output_path: str | Path = DEFAULT_REPORT_NAME,
    strict_rating: bool = False,
) -> Path:
    """Assess the Terraform file at ``path`` and write the JSON report.

    Returns:
        Resolved path of the written report. Nothing is written on failure.
    """
    request = AssessmentRequest.from_file(path)
    result = assess_terraform(request, invoker, strict_rating=strict_rating)
    return write_artifact(result.to_report_json(), output_path)
