"""Command-line entry point for Terraform generation.

Inputs default to the ``archJson``, ``govJson`` and ``terraform_file``
environment variables; the flags override them.

Usage:
    archJson=arch.json govJson=gov.json terraform_file=main.tf terraform-generate
    terraform-generate --arch arch.json --gov gov.json --output main.tf
"""

import argparse
import logging
from pathlib import Path

from terraform_ai.client.gemini_invoker import GeminiInvoker
from terraform_ai.client.invoker import ModelInvoker
from terraform_ai.config.env_loader import EnvironmentConfigLoader
from terraform_ai.config.types import ModelConfig
from terraform_ai.exceptions import TerraformAIError
from terraform_ai.pipeline.generation import generate_file
from terraform_ai.prompts.generation_prompt_builder import DEFAULT_CLOUD_PROVIDER

from .common import EXIT_OK, configure_logging, report_failure

# ruff: noqa: T201

log = logging.getLogger(__name__)


def build_invoker(config: ModelConfig) -> ModelInvoker:
    return GeminiInvoker(config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terraform-generate",
        description=(
            "Generate Terraform from an architecture definition and a "
            "governance policy with Gemini"
        ),
    )
    parser.add_argument("--arch", type=Path, default=None, help="Architecture JSON (env: archJson)")
    parser.add_argument("--gov", type=Path, default=None, help="Governance policy JSON (env: govJson)")
    parser.add_argument("--output", type=Path, default=None, help="Output .tf file (env: terraform_file)")
    parser.add_argument(
        "--provider",
        default=DEFAULT_CLOUD_PROVIDER,
        help=f"Cloud provider named in the prompt (default: {DEFAULT_CLOUD_PROVIDER})",
    )
    parser.add_argument(
        "--env-file", type=Path, default=None, help="Optional .env file to load"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        loader = EnvironmentConfigLoader(args.env_file)
        config = loader.load_model_config()
        # Credential first: nothing is read or sent without one
        config.validate()
        paths = loader.load_generation_paths(
            architecture_path=args.arch,
            policy_path=args.gov,
            output_path=args.output,
        )
        invoker = build_invoker(config)
        written = generate_file(paths, invoker, cloud_provider=args.provider)
    except (TerraformAIError, OSError) as e:
        return report_failure(e)

    log.debug("Generated Terraform at %s", written)
    print(f"SUCCESS: {paths.output_path} has been generated.")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
