"""Prompt for rating a Terraform file as a fixed-shape JSON verdict"""  # noqa: D415

from terraform_ai.core.types import AssessmentRequest, SuccessRating

from .base import BasePromptBuilder

_RATINGS = "|".join(rating.value for rating in SuccessRating)


class AssessmentPromptBuilder(BasePromptBuilder):
    """Builds a prompt asking for a JSON assessment of one Terraform file."""

    def create_prompt(self, request: AssessmentRequest) -> str:
        """Interpolate the file content verbatim below the output contract."""
        prompt_parts = [
            "Analyze the following Terraform HCL file. Evaluate its adherence to "
            "security best practices, naming conventions, and overall code quality.",
            "",
            "Return your assessment ONLY as a JSON object with the following structure:",
            "{",
            f'  "success_rating": "[{_RATINGS}]",',
            '  "observations": [',
            '    "Observation 1",',
            '    "Observation 2"',
            "  ]",
            "}",
            "",
            "Do not include any text or markdown formatting before or after the JSON object.",
            "",
            "Terraform file content:",
            "```hcl",
            request.file_content,
            "```",
        ]
        return "\n".join(prompt_parts)
