"""
API Routes: the endpoints the dashboard talks to.

ENDPOINTS:
- POST /api/trust-score → Main endpoint: profile URLs → TrustAssessment

FLOW:
1. Dashboard collects the developer's profile links
2. POST them to /api/trust-score
3. Get back a TrustAssessment with the Trust Score, sub-scores and feedback

ERRORS:
The evaluator never retries or patches up a bad reply, so every failure
comes back to the dashboard as a 502 (the model, not the request, was bad).
A request without github_profile_url never reaches the model (422).
"""

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException
from openai import APIError
from pydantic import ValidationError

from app.models.schemas import ProfileReference, TrustAssessment
from app.services.trust.evaluator import TrustScoreEvaluator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


@lru_cache
def get_evaluator() -> TrustScoreEvaluator:
    """Dependency that provides the process-wide TrustScoreEvaluator (one OpenAI client, one connection pool)."""
    return TrustScoreEvaluator()


# =============================================================================
# TRUST SCORE ENDPOINT
# =============================================================================

@router.post("/trust-score", response_model=TrustAssessment)
async def trust_score(
    request: ProfileReference,
    evaluator: TrustScoreEvaluator = Depends(get_evaluator),
) -> TrustAssessment:
    """
    Score a developer's online presence.

    Example:
        POST /api/trust-score
        {"github_profile_url": "https://github.com/octocat", "other_profile_urls": []}

        Returns {"trust_score": 74.0, "feedback": "...", "expertise_score": 80, ...}
    """
    logger.info(f"Trust score requested for {request.github_profile_url}")

    try:
        return await evaluator.evaluate(request)
    except APIError as e:
        raise HTTPException(status_code=502, detail=f"Model provider error: {e}")
    except ValidationError:
        raise HTTPException(status_code=502, detail="Model returned a malformed trust assessment")
    except RuntimeError as e:
        raise HTTPException(status_code=502, detail=str(e))
