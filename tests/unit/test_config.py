"""Unit tests for the configuration loaders.

These tests verify that:
- model settings are read from GEMINI_* / GOOGLE_* variables with defaults
- the generator's path variables are read case-sensitively
- invalid or missing values surface as ConfigurationError
"""

from pathlib import Path

import pytest

from terraform_ai.config import EnvironmentConfigLoader, GenerationPaths, ModelConfig
from terraform_ai.exceptions import ConfigurationError, MissingKeyError


@pytest.mark.unit
class TestModelConfigLoading:
    """Model settings resolution"""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-api-key-123")
        monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-pro")
        monkeypatch.setenv("GEMINI_TEMPERATURE", "0.1")

        config = EnvironmentConfigLoader().load_model_config()

        assert config.api_key == "env-api-key-123"
        assert config.model == "gemini-2.5-pro"
        assert config.temperature == pytest.approx(0.1)
        assert config.uses_vertex is False

    def test_defaults(self):
        config = EnvironmentConfigLoader().load_model_config()

        assert config == ModelConfig()
        assert config.api_key is None
        assert config.model == "gemini-2.0-flash"
        assert config.temperature == pytest.approx(0.2)
        assert config.location == "us-central1"
        assert config.strict_rating is False

    def test_vertex_project(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_PROJECT_ID", "my-project")
        monkeypatch.setenv("GOOGLE_CLOUD_LOCATION", "europe-west4")

        config = EnvironmentConfigLoader().load_model_config()

        assert config.project_id == "my-project"
        assert config.location == "europe-west4"
        assert config.uses_vertex is True

    def test_strict_rating_flag(self, monkeypatch):
        monkeypatch.setenv("TERRAFORM_AI_STRICT_RATING", "true")

        assert EnvironmentConfigLoader().load_model_config().strict_rating is True

    def test_empty_api_key_counts_as_missing(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "")

        config = EnvironmentConfigLoader().load_model_config()

        assert config.api_key is None
        with pytest.raises(MissingKeyError):
            config.validate()

    def test_invalid_temperature(self, monkeypatch):
        monkeypatch.setenv("GEMINI_TEMPERATURE", "7")

        with pytest.raises(ConfigurationError, match="temperature"):
            EnvironmentConfigLoader().load_model_config()

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GEMINI_API_KEY=from-dotenv\nGEMINI_MODEL=file-model\n")

        config = EnvironmentConfigLoader(env_file).load_model_config()

        assert config.api_key == "from-dotenv"
        assert config.model == "file-model"

    def test_environment_wins_over_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("GEMINI_MODEL=file-model\n")
        monkeypatch.setenv("GEMINI_MODEL", "env-model")

        assert EnvironmentConfigLoader(env_file).load_model_config().model == "env-model"

    def test_missing_env_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Environment file not found"):
            EnvironmentConfigLoader(tmp_path / "absent.env")


@pytest.mark.unit
class TestModelConfig:
    """Frozen model config behaviour"""

    def test_validate_requires_a_credential(self):
        with pytest.raises(MissingKeyError, match="GEMINI_API_KEY"):
            ModelConfig().validate()

    def test_validate_accepts_key_or_project(self):
        ModelConfig(api_key="k").validate()
        ModelConfig(project_id="p").validate()

    def test_repr_redacts_api_key(self):
        config = ModelConfig(api_key="super-secret-key")

        assert "super-secret-key" not in repr(config)
        assert "super-secret-key" not in str(config)
        assert "[REDACTED]" in repr(config)

    def test_api_key_takes_precedence_over_vertex(self):
        assert ModelConfig(api_key="k", project_id="p").uses_vertex is False


@pytest.mark.unit
class TestGenerationPaths:
    """Generator path variables"""

    def test_reads_generator_variable_names(self, monkeypatch):
        monkeypatch.setenv("archJson", "in/arch.json")
        monkeypatch.setenv("govJson", "in/gov.json")
        monkeypatch.setenv("terraform_file", "out/main.tf")

        paths = EnvironmentConfigLoader().load_generation_paths()

        assert paths == GenerationPaths(
            architecture_path=Path("in/arch.json"),
            policy_path=Path("in/gov.json"),
            output_path=Path("out/main.tf"),
        )

    def test_explicit_arguments_override_environment(self, monkeypatch):
        monkeypatch.setenv("archJson", "env-arch.json")
        monkeypatch.setenv("govJson", "env-gov.json")
        monkeypatch.setenv("terraform_file", "env.tf")

        paths = EnvironmentConfigLoader().load_generation_paths(output_path="cli.tf")

        assert paths.output_path == Path("cli.tf")
        assert paths.architecture_path == Path("env-arch.json")

    def test_missing_variables_are_named(self, monkeypatch):
        monkeypatch.setenv("archJson", "arch.json")

        with pytest.raises(ConfigurationError) as exc_info:
            EnvironmentConfigLoader().load_generation_paths()

        message = str(exc_info.value)
        assert "govJson" in message
        assert "terraform_file" in message
        assert "archJson" not in message
