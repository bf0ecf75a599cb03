"""
Shared fixtures for the Trust Score tests.

The OpenAI client is always replaced by a mock, so nothing here needs
network access or an API key.
"""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.models.schemas import ProfileReference
from app.services.trust.evaluator import TrustScoreEvaluator


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion response."""
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def assessment_payload() -> dict:
    """A well-formed model reply (trust_score matches the weighted sum)."""
    return {
        "trust_score": 74.0,
        "feedback": "Strong open-source portfolio. Add more detail to your LinkedIn summary.",
        "expertise_score": 80,
        "collaboration_score": 70,
        "professionalism_score": 65,
    }


@pytest.fixture
def github_only() -> ProfileReference:
    return ProfileReference(github_profile_url="https://github.com/octocat")


@pytest.fixture
def all_profiles() -> ProfileReference:
    return ProfileReference(
        github_profile_url="https://github.com/octocat",
        linkedin_profile_url="https://www.linkedin.com/in/octocat",
        stackoverflow_profile_url="https://stackoverflow.com/users/1/octocat",
        leetcode_profile_url="https://leetcode.com/u/octocat",
        other_profile_urls=["https://octocat.dev", "https://dev.to/octocat"],
    )


@pytest.fixture
def mock_client():
    """An AsyncOpenAI stand-in whose chat.completions.create is an AsyncMock."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client


@pytest.fixture
def evaluator(mock_client) -> TrustScoreEvaluator:
    return TrustScoreEvaluator(client=mock_client)


@pytest.fixture
def reply_with(mock_client):
    """Set what the mocked model replies with: a dict (sent as JSON) or a raw string/None."""
    def _reply(content):
        if isinstance(content, dict):
            content = json.dumps(content)
        mock_client.chat.completions.create.return_value = make_completion(content)
    return _reply
