"""Pytest configuration and shared fixtures for stepline tests.

This module provides:
- Basic pytest configuration
- Common fixtures (fake LLM provider, fresh contexts, runner)
- Setup/teardown for test isolation
"""

import os
import sys
from pathlib import Path
import pytest

# Add project root to Python path to allow imports from stepline
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from stepline.pipeline import ExecutionContext, PipelineRunner  # noqa: E402
from tests.fixtures.fake_provider import FakeLLMProvider  # noqa: E402


# ==================== Environment Fixtures ====================

@pytest.fixture(scope="function", autouse=True)
def isolate_environment():
    """Prevent environment variable pollution between tests."""
    original_env = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)


# ==================== Pipeline Fixtures ====================

@pytest.fixture
def context() -> ExecutionContext:
    """Provide a fresh, empty execution context."""
    return ExecutionContext()


@pytest.fixture
def runner() -> PipelineRunner:
    return PipelineRunner()


@pytest.fixture
def fake_provider() -> FakeLLMProvider:
    """Provide a fake LLM provider answering "Hi there"."""
    return FakeLLMProvider(content="Hi there")
