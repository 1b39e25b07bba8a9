"""Configuration schema and validation using Pydantic.

These settings classes validate and coerce values read from the process
environment (and an optional ``.env`` file) into typed fields with defaults.
They are only used at the process boundary; pipelines receive the frozen
types from ``terraform_ai.config.types``.
"""

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_TEMPERATURE = 0.2
DEFAULT_LOCATION = "us-central1"


class ModelSettings(BaseSettings):
    """Settings for the model call, read from GEMINI_* and GOOGLE_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=None,  # Only used when explicitly requested
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Gemini Developer API key",
    )

    model: str = Field(
        default=DEFAULT_MODEL,
        description="Gemini model identifier",
        min_length=1,
    )

    temperature: float = Field(
        default=DEFAULT_TEMPERATURE,
        description="Sampling temperature; kept low for literal output",
        ge=0.0,
        le=2.0,
    )

    project_id: str | None = Field(
        default=None,
        description="Google Cloud project for Vertex AI",
        validation_alias=AliasChoices("GOOGLE_PROJECT_ID", "GOOGLE_CLOUD_PROJECT"),
    )

    location: str = Field(
        default=DEFAULT_LOCATION,
        description="Vertex AI region",
        validation_alias=AliasChoices("GOOGLE_CLOUD_LOCATION", "GOOGLE_LOCATION"),
    )

    strict_rating: bool = Field(
        default=False,
        description="Reject success_rating values outside High/Medium/Low",
        validation_alias="TERRAFORM_AI_STRICT_RATING",
    )


class GenerationPathSettings(BaseSettings):
    """File locations for the generation tool.

    The variable names are case-sensitive and match the ones the generator
    has always read: ``archJson``, ``govJson`` and ``terraform_file``.
    """

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    architecture_path: Path | None = Field(default=None, validation_alias="archJson")
    policy_path: Path | None = Field(default=None, validation_alias="govJson")
    output_path: Path | None = Field(default=None, validation_alias="terraform_file")
