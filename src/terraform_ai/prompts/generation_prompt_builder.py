"""Prompt for merging an architecture and a governance policy into Terraform"""  # noqa: D415

from terraform_ai.core.types import GenerationRequest

from .base import BasePromptBuilder

DEFAULT_CLOUD_PROVIDER = "Azure"


class GenerationPromptBuilder(BasePromptBuilder):
    """Builds a prompt that asks for raw HCL from two input documents.

    The governance policy wins over the architecture whenever both describe
    the same logical resource. That rule lives only in the prompt text; the
    output is not checked against it.
    """

    def __init__(self, cloud_provider: str = DEFAULT_CLOUD_PROVIDER):
        self.cloud_provider = cloud_provider

    def create_prompt(self, request: GenerationRequest) -> str:
        """Interpolate both documents verbatim into labeled sections."""
        return f"""You are an expert DevOps engineer and Terraform architect.

Your goal is to write a production-ready {self.cloud_provider} Terraform script (`main.tf`) based on two input files provided below.

### INPUT 1: Architecture Definition (LikeC4 JSON)
{request.architecture_doc}

### INPUT 2: Governance Policy (JSON)
{request.policy_doc}

### REQUIREMENTS:
1. Merge the logic: Use the topology from Input 1, but enforce the SKUs/Regions from Input 2.
2. Conflict Resolution: Input 2 (Governance Policy) is authoritative over Input 1 (Architecture Definition) whenever both describe the same logical resource. If Input 1 is generic (e.g., 'Database'), Input 2 decides the concrete service and SKU.
3. Output strictly valid HCL (Terraform) code.
4. Do not include markdown formatting (like ```hcl), just the raw code.
"""
