"""
Global test configuration for terraform_ai.
"""

import logging
import os

import pytest

from tests.helpers import ScriptedInvoker

# Variables the config loaders read; tests only see what they set themselves
_ISOLATED_PREFIXES = ("GEMINI_", "GOOGLE_", "TERRAFORM_AI_")
_ISOLATED_NAMES = ("archJson", "govJson", "terraform_file", "DEBUG")


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_environment(request, monkeypatch):
    """Remove model credentials and generator paths before each test.

    Escape hatch: @pytest.mark.allow_env_pollution keeps the environment.
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith(_ISOLATED_PREFIXES) or key in _ISOLATED_NAMES:
            monkeypatch.delenv(key, raising=False)


# --- Logging Fixtures ---
@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Sets the log level for noisy external libraries to WARNING."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)


# --- Test Environment Markers ---
def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "integration: Pipeline and CLI tests with a scripted model",
        "contract: Properties every cleaned payload must satisfy",
        "allow_env_pollution: Keep GEMINI_/GOOGLE_ variables for this test",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)


# --- Core Fixtures ---


@pytest.fixture
def mock_api_key():
    """Provide a consistent, fake API key for tests."""
    return "test_api_key_12345_67890_abcdef_ghijkl"


@pytest.fixture
def mock_env(mock_api_key, monkeypatch):
    """Set the model credential in the environment."""
    monkeypatch.setenv("GEMINI_API_KEY", mock_api_key)
    return mock_api_key


@pytest.fixture
def terraform_file(tmp_path):
    """A minimal Terraform file on disk."""
    path = tmp_path / "main.tf"
    path.write_text('resource "aws_s3_bucket" "b" {}"', encoding="utf-8")
    return path


@pytest.fixture
def generation_inputs(tmp_path):
    """Architecture and governance documents plus an output location."""
    arch = tmp_path / "architecture.json"
    gov = tmp_path / "governance.json"
    arch.write_text('{"elements": {"db": {"kind": "Database"}}}', encoding="utf-8")
    gov.write_text(
        '{"Database": {"service": "Azure SQL", "sku": "Standard", "region": "westeurope"}}',
        encoding="utf-8",
    )
    return arch, gov, tmp_path / "main.tf"


@pytest.fixture
def scripted_invoker():
    """Factory for a deterministic model stand-in."""

    def _create(*responses: str | Exception) -> ScriptedInvoker:
        return ScriptedInvoker(list(responses))

    return _create
