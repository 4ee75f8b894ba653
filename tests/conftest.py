"""Shared pytest fixtures."""

from pathlib import Path

import pytest
from click.testing import CliRunner

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a CliRunner for invoking bundle-info commands."""
    return CliRunner()


@pytest.fixture
def example_bundle() -> Path:
    """Path to a valid bundle information document."""
    return FIXTURES_DIR / "example-bundle.toml"
