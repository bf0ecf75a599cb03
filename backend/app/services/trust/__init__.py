# Trust Score Services
#
# Everything here runs on the model's judgement, not on fetched data:
# - TrustScoreEvaluator renders the profile URLs into a prompt and
#   validates the model's JSON reply into a TrustAssessment
# - analyze_trust_score is the one-call entry point used by the API
from app.services.trust.evaluator import (
    TrustScoreEvaluator,
    analyze_trust_score,
    build_prompt,
    weighted_trust_score,
)

__all__ = [
    "TrustScoreEvaluator",
    "analyze_trust_score",
    "build_prompt",
    "weighted_trust_score",
]
