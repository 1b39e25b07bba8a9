"""Terraform generation pipeline."""

import logging
from pathlib import Path

from terraform_ai.client.invoker import ModelInvoker
from terraform_ai.config.types import GenerationPaths
from terraform_ai.core.types import ArtifactKind, GenerationArtifact, GenerationRequest
from terraform_ai.output.writer import write_artifact
from terraform_ai.prompts.generation_prompt_builder import (
    DEFAULT_CLOUD_PROVIDER,
    GenerationPromptBuilder,
)
from terraform_ai.response.validation import validator_for

from .base import ContractPipeline

log = logging.getLogger(__name__)


def generate_terraform(
    request: GenerationRequest,
    invoker: ModelInvoker,
    *,
    cloud_provider: str = DEFAULT_CLOUD_PROVIDER,
) -> GenerationArtifact:
    """Merge the architecture and governance documents into HCL text."""
    pipeline = ContractPipeline(
        prompt_builder=GenerationPromptBuilder(cloud_provider=cloud_provider),
        invoker=invoker,
        validator=validator_for(ArtifactKind.RAW_HCL),
    )
    return pipeline.run(request)


def generate_file(
    paths: GenerationPaths,
    invoker: ModelInvoker,
    *,
    cloud_provider: str = DEFAULT_CLOUD_PROVIDER,
) -> Path:
    """Read both inputs, generate Terraform and write it to ``paths.output_path``."""
    log.info("Reading input files...")
    request = GenerationRequest.from_files(paths.architecture_path, paths.policy_path)

    log.info("Calling the model...")
    hcl = generate_terraform(request, invoker, cloud_provider=cloud_provider)
    return write_artifact(hcl, paths.output_path)
