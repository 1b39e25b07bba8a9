"""Assessment and generation pipelines."""

from .assessment import DEFAULT_REPORT_NAME, assess_file, assess_terraform
from .base import ContractPipeline
from .generation import generate_file, generate_terraform

__all__ = [
    "DEFAULT_REPORT_NAME",
    "ContractPipeline",
    "assess_file",
    "assess_terraform",
    "generate_file",
    "generate_terraform",
]
