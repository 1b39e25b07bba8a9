"""Environment variable configuration loading.

This is the only place that reads the process environment. It turns the
pydantic settings into the frozen config types and reports invalid or
missing values as ``ConfigurationError``.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from terraform_ai.exceptions import ConfigurationError

from .schema import GenerationPathSettings, ModelSettings
from .types import GenerationPaths, ModelConfig

log = logging.getLogger(__name__)

# Field name -> environment variable, used in error messages
_PATH_VARIABLES = {
    "architecture_path": "archJson",
    "policy_path": "govJson",
    "output_path": "terraform_file",
}


class EnvironmentConfigLoader:
    """Loads frozen configuration from environment variables.

    Args:
        env_file: Optional ``.env`` file read in addition to the process
            environment. Real environment variables take precedence.
    """

    def __init__(self, env_file: str | Path | None = None) -> None:
        if env_file is not None and not Path(env_file).exists():
            raise ConfigurationError(f"Environment file not found: {env_file}")
        self.env_file = env_file

    def load_model_config(self) -> ModelConfig:
        """Read the model settings.

        The credential is not checked here; ``ModelConfig.validate`` does that
        so a config can be inspected without one.
        """
        try:
            settings = ModelSettings(_env_file=self.env_file)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid model configuration in environment: {_summarize(e)}"
            ) from e

        config = ModelConfig(
            api_key=settings.api_key or None,
            model=settings.model,
            temperature=settings.temperature,
            project_id=settings.project_id or None,
            location=settings.location,
            strict_rating=settings.strict_rating,
        )
        log.debug("Loaded %s", config)
        return config

    def load_generation_paths(
        self,
        *,
        architecture_path: str | Path | None = None,
        policy_path: str | Path | None = None,
        output_path: str | Path | None = None,
    ) -> GenerationPaths:
        """Read the generation file locations; explicit arguments win.

        Raises:
            ConfigurationError: If any location is neither passed nor set.
        """
        try:
            settings = GenerationPathSettings(_env_file=self.env_file)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid generation paths in environment: {_summarize(e)}"
            ) from e

        resolved = {
            "architecture_path": architecture_path or settings.architecture_path,
            "policy_path": policy_path or settings.policy_path,
            "output_path": output_path or settings.output_path,
        }
        missing = [_PATH_VARIABLES[name] for name, value in resolved.items() if not value]
        if missing:
            raise ConfigurationError(
                f"Error: Please set the {', '.join(missing)} environment "
                f"variable{'s' if len(missing) > 1 else ''}."
            )

        return GenerationPaths(**{name: Path(value) for name, value in resolved.items()})


def _summarize(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )
