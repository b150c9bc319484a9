"""Shared pytest fixtures for the age_engine test suite.

Fixtures defined here are available to all test modules (unit and
integration) without any import.

No AWS credentials are required: the ``agent_runner`` fixture patches
``BedrockModel`` before any SDK initialisation can attempt a network call.
"""

import datetime
import os

import pytest
from unittest.mock import MagicMock, patch

# ---------------------------------------------------------------------------
# MODEL_ARN must be present before ``age_engine.config`` is first imported so
# the module-level ``settings`` object can build the chat agent in tests.
# ---------------------------------------------------------------------------
os.environ.setdefault("MODEL_ARN", "arn:aws:bedrock:us-east-1::foundation-model/test-model")


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_bedrock_model() -> MagicMock:
    """A MagicMock standing in for ``BedrockModel``; no AWS credentials needed."""
    model = MagicMock()
    model.invoke.return_value = {
        "role": "assistant",
        "content": [{"type": "text", "text": "Mocked response"}],
    }
    return model


# ---------------------------------------------------------------------------
# Agent fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def agent_runner(mock_bedrock_model: MagicMock):
    """Fully constructed ``strands.Agent`` with ``BedrockModel`` patched out."""
    with patch("age_engine.agent.BedrockModel", return_value=mock_bedrock_model):
        from age_engine.agent import create_agent
        return create_agent()


# ---------------------------------------------------------------------------
# Date fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def today() -> datetime.date:
    """A fixed "today" in a leap year, mid-month, used by clock-dependent tests."""
    return datetime.date(2024, 6, 15)


@pytest.fixture
def fixed_clock(today: datetime.date):
    """A zero-argument clock that always returns ``today``."""
    return lambda: today


@pytest.fixture
def leap_day_birth() -> datetime.date:
    """A Feb 29 birth date (2000 is divisible by 400, so a leap year)."""
    return datetime.date(2000, 2, 29)


# ---------------------------------------------------------------------------
# Preference fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def preferences_path(tmp_path):
    """Location of a preferences file that does not exist yet."""
    return tmp_path / "prefs" / "preferences.json"
