"""Configuration for the terraform_ai tools.

Resolve once at the process boundary, then pass the frozen result into the
pipelines:

- ``EnvironmentConfigLoader``: reads GEMINI_*, GOOGLE_* and the generator's
  path variables (optionally from a ``.env`` file)
- ``ModelConfig`` / ``GenerationPaths``: immutable values the pipelines use
"""

from .env_loader import EnvironmentConfigLoader
from .schema import GenerationPathSettings, ModelSettings
from .types import GenerationPaths, ModelConfig

__all__ = [
    "EnvironmentConfigLoader",
    "GenerationPathSettings",
    "GenerationPaths",
    "ModelConfig",
    "ModelSettings",
]
