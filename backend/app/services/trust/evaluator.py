"""
Trust Score Evaluator.

WHAT THIS DOES:
Takes a developer's profile URLs → asks the model for a Trust Score with
category sub-scores and feedback → validates the reply into a TrustAssessment.

HOW IT WORKS:
1. Frontend sends GitHub (required) + LinkedIn/Stack Overflow/LeetCode (optional)
   + any other profile URLs
2. We render them into the "Developer Profiles to Analyze" section of the prompt
3. The model (JSON mode) pretends it scraped those pages and scores three categories:
   - Expertise (0-100)
   - Collaboration (0-100)
   - Professionalism (0-100)
4. The model computes the overall Trust Score and writes feedback
5. We validate the JSON against TrustAssessment

NO SCRAPING:
The model has no web access. The prompt tells it to act as if it had fetched
the pages and reason from what those platforms typically show. We never
fetch the URLs ourselves.

OVERALL SCORE:
trust_score = expertise × 0.5 + collaboration × 0.3 + professionalism × 0.2

The model does this arithmetic. We return its number as-is and only log a
warning when it drifts from the weighted sum (see weighted_trust_score).

FAILURES (all propagate, nothing is retried):
- Provider errors (network, auth, quota) → openai.APIError, re-raised
- Reply isn't valid JSON or misses a field → pydantic.ValidationError
- Reply is empty → RuntimeError

USAGE:
    evaluator = TrustScoreEvaluator()
    assessment = await evaluator.evaluate(
        ProfileReference(github_profile_url="https://github.com/octocat")
    )
    # Returns: TrustAssessment(trust_score=78.5, expertise_score=85, ...)
"""

import logging

from openai import AsyncOpenAI, APIError
from pydantic import ValidationError

from app.config import get_settings
from app.models.schemas import ProfileReference, TrustAssessment

logger = logging.getLogger(__name__)

# Category weights for the overall Trust Score (sum to 1.0)
EXPERTISE_WEIGHT = 0.5
COLLABORATION_WEIGHT = 0.3
PROFESSIONALISM_WEIGHT = 0.2

# How far (in points) the model's trust_score may drift from the weighted sum before we warn
TRUST_SCORE_TOLERANCE = 1.0

TRUST_SCORE_SYSTEM_PROMPT = """You are an AI reputation analysis expert. Your task is to analyze a developer's online presence based on provided profile URLs and generate a comprehensive Trust Score.

**Instructions:**
1.  **Simulate Web Scraping:** You do not have live web access. Act as if you have scraped the content from the URLs provided below. Based on typical content from these platforms, infer the developer's skills, project contributions, and professional conduct.
2.  **Analyze and Score:** Evaluate the inferred information across three categories: Expertise, Collaboration, and Professionalism. Assign a score from 0 to 100 for each category.
    *   **Expertise (0-100):** Assess the quality and complexity of projects from GitHub. Factor in problem-solving skills from LeetCode (e.g., number of problems solved, contest ratings). Consider technical answers on Stack Overflow.
    *   **Collaboration (0-100):** Evaluate engagement in pull requests, issue discussions on GitHub. Analyze helpfulness and quality of answers on Stack Overflow.
    *   **Professionalism (0-100):** Review the completeness and presentation of the LinkedIn profile. Check the tone of communication across all platforms.
3.  **Calculate Overall Trust Score:** The final Trust Score is the weighted average of the three category scores: (Expertise * 0.5) + (Collaboration * 0.3) + (Professionalism * 0.2).
4.  **Provide Feedback:** Generate concise, constructive feedback highlighting the developer's strengths and offering specific, actionable suggestions for improvement based on all provided profiles.

OUTPUT FORMAT (JSON):
{
  "trust_score": <number, the weighted overall Trust Score>,
  "feedback": "<strengths and actionable suggestions>",
  "expertise_score": <number 0-100>,
  "collaboration_score": <number 0-100>,
  "professionalism_score": <number 0-100>
}"""


def weighted_trust_score(
    expertise: float,
    collaboration: float,
    professionalism: float,
) -> float:
    """
    The overall Trust Score the prompt asks the model to compute.

    Example:
        weighted_trust_score(80, 60, 50)
        # 80 × 0.5 + 60 × 0.3 + 50 × 0.2 = 68.0
    """
    return (
        expertise * EXPERTISE_WEIGHT
        + collaboration * COLLABORATION_WEIGHT
        + professionalism * PROFESSIONALISM_WEIGHT
    )


def build_prompt(profiles: ProfileReference) -> str:
    """
    Render the "Developer Profiles to Analyze" message.

    Optional profiles get a line only when their URL is set (None and ""
    both count as missing). Other profiles are always listed on one line,
    space-separated in the order given.

    Example:
        build_prompt(ProfileReference(
            github_profile_url="https://github.com/octocat",
            leetcode_profile_url="https://leetcode.com/u/octocat",
        ))
        # **Developer Profiles to Analyze:**
        # - GitHub Profile: https://github.com/octocat
        # - LeetCode Profile: https://leetcode.com/u/octocat
        # - Other Profiles:
        #
        # Please provide your analysis in the specified JSON format.
    """
    lines = [
        "**Developer Profiles to Analyze:**",
        f"- GitHub Profile: {profiles.github_profile_url}",
    ]

    if profiles.linkedin_profile_url:
        lines.append(f"- LinkedIn Profile: {profiles.linkedin_profile_url}")
    if profiles.stackoverflow_profile_url:
        lines.append(f"- Stack Overflow Profile: {profiles.stackoverflow_profile_url}")
    if profiles.leetcode_profile_url:
        lines.append(f"- LeetCode Profile: {profiles.leetcode_profile_url}")

    lines.append(f"- Other Profiles: {' '.join(profiles.other_profile_urls)}")
    lines.append("")
    lines.append("Please provide your analysis in the specified JSON format.")

    return "\n".join(lines)


class TrustScoreEvaluator:
    """
    Scores a developer's online presence with a single model call.

    Stateless apart from the client, so one instance can serve
    concurrent requests.
    """

    def __init__(self, client: AsyncOpenAI | None = None):
        settings = get_settings()
        self.model = settings.trust_score_model
        self.temperature = settings.trust_score_temperature
        if client is None:
            client = AsyncOpenAI(
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url or None,
            )
        self.client = client

    async def evaluate(self, profiles: ProfileReference) -> TrustAssessment:
        """
        Ask the model for a TrustAssessment of these profiles.

        Args:
            profiles: The developer's profile URLs

        Returns:
            The validated TrustAssessment, exactly as the model scored it

        Raises:
            openai.APIError: The provider call failed
            pydantic.ValidationError: The reply isn't a valid TrustAssessment
            RuntimeError: The model returned nothing
        """
        logger.info(
            f"Analyzing trust score for {profiles.github_profile_url} "
            f"(+{len(profiles.other_profile_urls)} other profiles)"
        )

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": TRUST_SCORE_SYSTEM_PROMPT},
                    {"role": "user", "content": build_prompt(profiles)},
                ],
                response_format={"type": "json_object"},
                temperature=self.temperature,
            )
        except APIError as e:
            logger.error(f"Trust score request failed: {e}")
            raise

        content = response.choices[0].message.content if response.choices else None
        if not content:
            logger.error("Trust score model returned no output")
            raise RuntimeError("Trust score model returned no output")

        # Strict: scores must be JSON numbers ("85" and true are rejected, ints are fine)
        try:
            assessment = TrustAssessment.model_validate_json(content, strict=True)
        except ValidationError as e:
            logger.error(f"Trust score reply failed validation: {e}")
            raise

        expected = weighted_trust_score(
            assessment.expertise_score,
            assessment.collaboration_score,
            assessment.professionalism_score,
        )
        if abs(assessment.trust_score - expected) > TRUST_SCORE_TOLERANCE:
            logger.warning(
                f"Model trust_score {assessment.trust_score:.1f} differs from "
                f"weighted sum {expected:.1f}; returning model value"
            )

        logger.info(f"Trust score: {assessment.trust_score:.1f}")
        return assessment


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

async def analyze_trust_score(profiles: ProfileReference) -> TrustAssessment:
    """
    Convenience function to score a developer's profiles.

    Example:
        assessment = await analyze_trust_score(
            ProfileReference(github_profile_url="https://github.com/octocat")
        )
    """
    evaluator = TrustScoreEvaluator()
    return await evaluator.evaluate(profiles)
