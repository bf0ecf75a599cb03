"""
Tests for the HTTP surface.

The evaluator dependency is overridden with one backed by a mock client,
and requests go straight to the ASGI app (no server, no network).
"""

import httpx
import openai
import pytest
import pytest_asyncio

from app.api.routes import get_evaluator
from app.main import app
from app.services.trust import evaluator as evaluator_module


@pytest_asyncio.fixture
async def client(evaluator):
    app.dependency_overrides[get_evaluator] = lambda: evaluator
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_trust_score_returns_assessment(client, reply_with, assessment_payload):
    reply_with(assessment_payload)

    response = await client.post(
        "/api/trust-score",
        json={"github_profile_url": "https://github.com/octocat"},
    )

    assert response.status_code == 200
    assert response.json() == assessment_payload


@pytest.mark.asyncio
async def test_missing_github_url_is_rejected_before_model_call(client, mock_client):
    response = await client.post(
        "/api/trust-score",
        json={"linkedin_profile_url": "https://www.linkedin.com/in/octocat"},
    )

    assert response.status_code == 422
    mock_client.chat.completions.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_malformed_model_reply_is_bad_gateway(client, reply_with, assessment_payload):
    del assessment_payload["trust_score"]
    reply_with(assessment_payload)

    response = await client.post(
        "/api/trust-score",
        json={"github_profile_url": "https://github.com/octocat"},
    )

    assert response.status_code == 502
    assert "malformed" in response.json()["detail"]


@pytest.mark.asyncio
async def test_empty_model_reply_is_bad_gateway(client, reply_with):
    reply_with(None)

    response = await client.post(
        "/api/trust-score",
        json={"github_profile_url": "https://github.com/octocat"},
    )

    assert response.status_code == 502
    assert response.json()["detail"] == "Trust score model returned no output"


@pytest.mark.asyncio
async def test_provider_error_is_bad_gateway(client, mock_client):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    mock_client.chat.completions.create.side_effect = openai.APIConnectionError(request=request)

    response = await client.post(
        "/api/trust-score",
        json={"github_profile_url": "https://github.com/octocat"},
    )

    assert response.status_code == 502
    assert response.json()["detail"].startswith("Model provider error")


@pytest.mark.asyncio
async def test_trust_score_accepts_camel_case_body(client, mock_client, reply_with, assessment_payload):
    reply_with(assessment_payload)

    response = await client.post(
        "/api/trust-score",
        json={
            "githubProfileUrl": "https://github.com/octocat",
            "stackoverflowProfileUrl": "https://stackoverflow.com/users/1/octocat",
            "otherProfileUrls": ["https://octocat.dev"],
        },
    )

    assert response.status_code == 200
    prompt = mock_client.chat.completions.create.call_args.kwargs["messages"][1]["content"]
    assert "- Stack Overflow Profile: https://stackoverflow.com/users/1/octocat" in prompt
    assert "- Other Profiles: https://octocat.dev" in prompt


def test_evaluator_is_shared_across_requests(monkeypatch, mock_client):
    monkeypatch.setattr(evaluator_module, "AsyncOpenAI", lambda **kwargs: mock_client)
    get_evaluator.cache_clear()

    try:
        assert get_evaluator() is get_evaluator()
    finally:
        get_evaluator.cache_clear()
