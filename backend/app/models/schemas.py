"""
Pydantic schemas for API request/response validation.

These define the shape of data that goes in and out of the API.
The TrustAssessment is the core output of the entire system.

FLOW OVERVIEW:
==============
1. Frontend sends a ProfileReference to /api/trust-score
2. TrustScoreEvaluator renders it into a prompt for the model
3. The model replies with JSON
4. The reply is validated into a TrustAssessment
5. Dashboard displays the TrustAssessment
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# =============================================================================
# INPUT SCHEMA
# =============================================================================
#
# WHEN USED:
# - ProfileReference: POST /api/trust-score request body, and the input of
#   TrustScoreEvaluator.evaluate()
#
# URLs are plain strings on purpose: they are only pasted into the prompt,
# never fetched, so we don't reject anything the user typed.
#

class ProfileReference(BaseModel):
    """
    The developer's public profiles to analyze.

    USED BY: POST /api/trust-score, TrustScoreEvaluator
    WHEN: User submits their profile links from the dashboard
    TRIGGERS: Prompt rendering → model call → TrustAssessment

    Example:
        POST /api/trust-score
        {
            "github_profile_url": "https://github.com/octocat",
            "leetcode_profile_url": "https://leetcode.com/u/octocat",
            "other_profile_urls": ["https://octocat.dev"]
        }

    The dashboard may send the same fields in camelCase (githubProfileUrl, ...);
    both spellings are accepted.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    github_profile_url: str = Field(
        description="The URL of the developer's GitHub profile."
    )
    linkedin_profile_url: str | None = Field(
        default=None,
        description="The URL of the developer's LinkedIn profile."
    )
    stackoverflow_profile_url: str | None = Field(
        default=None,
        description="The URL of the developer's Stack Overflow profile."
    )
    leetcode_profile_url: str | None = Field(
        default=None,
        description="The URL of the developer's LeetCode profile."
    )
    other_profile_urls: list[str] = Field(
        default_factory=list,
        description="URLs for the developer's other public profiles, in display order."
    )


# =============================================================================
# OUTPUT SCHEMA
# =============================================================================
#
# WHEN USED:
# - TrustAssessment: Parsed from the model's JSON reply, returned by
#   POST /api/trust-score
#
# No ge/le bounds on the scores: the model is asked for 0-100, but we
# report what it said rather than reject or clamp it.
#

class TrustAssessment(BaseModel):
    """
    The Trust Score plus its category breakdown and feedback.

    USED BY: TrustScoreEvaluator (output), POST /api/trust-score (response)
    WHEN: After the model replies and the reply validates
    DISPLAYED: Score gauge (trust_score), category bars, feedback panel

    Intended relationship (computed by the model, not by us):
        trust_score = expertise * 0.5 + collaboration * 0.3 + professionalism * 0.2
    """
    trust_score: float = Field(
        description="A numerical score representing the developer's overall trustworthiness and reputation."
    )
    feedback: str = Field(
        description="AI-generated feedback on the developer's strengths and areas for improvement."
    )
    expertise_score: float = Field(
        description="A score representing the developer's expertise based on their contributions and skills."
    )
    collaboration_score: float = Field(
        description="A score representing the developer's collaboration skills based on their contributions and interactions."
    )
    professionalism_score: float = Field(
        description="A score representing the developer's professionalism based on their online presence."
    )
