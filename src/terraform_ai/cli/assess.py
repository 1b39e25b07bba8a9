"""Command-line entry point for Terraform assessment.

Usage:
    terraform-assess main.tf
    terraform-assess --output report.json --strict-rating main.tf
    python -m terraform_ai.cli.assess main.tf
"""

import argparse
import logging
from pathlib import Path

from terraform_ai.client.gemini_invoker import GeminiInvoker
from terraform_ai.client.invoker import ModelInvoker
from terraform_ai.config.env_loader import EnvironmentConfigLoader
from terraform_ai.config.types import ModelConfig
from terraform_ai.exceptions import TerraformAIError
from terraform_ai.pipeline.assessment import DEFAULT_REPORT_NAME, assess_file

from .common import (
    EXIT_CONFIGURATION,
    EXIT_OK,
    EXIT_USAGE,
    configure_logging,
    report_failure,
)

# ruff: noqa: T201

log = logging.getLogger(__name__)


def build_invoker(config: ModelConfig) -> ModelInvoker:
    return GeminiInvoker(config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terraform-assess",
        description="Assess a Terraform file with Gemini and write a JSON report",
    )
    parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=None,
        help="Path to the Terraform file to assess",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(DEFAULT_REPORT_NAME),
        help=f"Report destination (default: ./{DEFAULT_REPORT_NAME})",
    )
    parser.add_argument(
        "--strict-rating",
        action="store_true",
        help="Reject success_rating values other than High, Medium or Low",
    )
    parser.add_argument(
        "--env-file", type=Path, default=None, help="Optional .env file to load"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.path is None:
        parser.print_usage()
        return EXIT_USAGE

    if not args.path.is_file():
        print(f"Error: File not found at '{args.path}'")
        return EXIT_CONFIGURATION

    try:
        config = EnvironmentConfigLoader(args.env_file).load_model_config()
        invoker = build_invoker(config)
        report = assess_file(
            args.path,
            invoker,
            output_path=args.output,
            strict_rating=args.strict_rating or config.strict_rating,
        )
    except (TerraformAIError, OSError) as e:
        return report_failure(e)

    log.debug("Report at %s", report)
    print(f"Assessment report written to '{args.output}'")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
