"""Career fit scoring and recommendation ranking.

Turns a user's self-reported strengths, interests and focus areas into a
ranked list of career paths with a confidence percentage and a short
narrative. Everything here is pure: the catalog is passed in, nothing is read
or written, so the same inputs always give the same result.

Scoring per career:

    score = required_match * 2 + growth_match + category_boost

where ``required_match`` counts required skills found in the strengths,
``growth_match`` counts growth skills found in the focus areas and
``category_boost`` is 2 when an interest appears inside the career category.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from careerpilot.core.config import get_settings
from careerpilot.utils.constants import ScoringConstants
from careerpilot.utils.helpers import clamp, join_tokens, normalize_token, normalize_tokens
from careerpilot.utils.logger import PerformanceLogger, get_engine_logger

settings = get_settings()
logger = get_engine_logger()


@dataclass
class AssessmentSubmission:
    """Raw, sanitised form input. Casing is kept for the summary text."""

    strengths: List[str] = field(default_factory=list)
    interests: List[str] = field(default_factory=list)
    focus_areas: List[str] = field(default_factory=list)


@dataclass
class CandidateProfile:
    """Normalised attribute sets the scorer compares against."""

    strengths: List[str] = field(default_factory=list)
    focus_areas: List[str] = field(default_factory=list)
    interests: List[str] = field(default_factory=list)

    @classmethod
    def from_submission(cls, submission: AssessmentSubmission) -> "CandidateProfile":
        return cls(
            strengths=normalize_tokens(submission.strengths),
            focus_areas=normalize_tokens(submission.focus_areas),
            interests=normalize_tokens(submission.interests),
        )


@dataclass
class FitScore:
    """Score of one career against one profile, with its breakdown."""

    career_title: str
    score: int
    required_match: int = 0
    growth_match: int = 0
    category_boost: int = 0


@dataclass
class RecommendationResult:
    recommended_careers: List[str]
    confidence_score: int
    summary: str
    top_matches: List[FitScore] = field(default_factory=list)


def calculate_fit_score(profile: CandidateProfile, career: Any) -> FitScore:
    """Score a single career path against a normalised profile.

    Args:
        profile: Normalised strengths, focus areas and interests
        career: Object exposing ``title``, ``required_skills``,
            ``skills_to_grow`` and ``category`` (a ``CareerPath``)

    Returns:
        FitScore: Non-negative score and its components
    """
    strengths = set(profile.strengths)
    focus_areas = set(profile.focus_areas)
    category = normalize_token(career.category or "")

    required_match = sum(
        1 for skill in career.required_skills if normalize_token(skill) in strengths
    )
    growth_match = sum(
        1 for skill in career.skills_to_grow if normalize_token(skill) in focus_areas
    )
    # Blank interests would match every category
    has_category_interest = any(
        interest and interest in category for interest in profile.interests
    )
    category_boost = ScoringConstants.CATEGORY_BOOST if has_category_interest else 0

    score = (
        required_match * ScoringConstants.REQUIRED_SKILL_WEIGHT
        + growth_match * ScoringConstants.GROWTH_SKILL_WEIGHT
        + category_boost
    )

    return FitScore(
        career_title=career.title,
        score=score,
        required_match=required_match,
        growth_match=growth_match,
        category_boost=category_boost,
    )


def calculate_confidence(top_matches: Sequence[FitScore], has_recommendations: bool) -> int:
    """Confidence percentage derived from the summed top scores."""
    if not has_recommendations:
        return ScoringConstants.NO_MATCH_CONFIDENCE
    total = sum(match.score for match in top_matches)
    return int(clamp(
        total * ScoringConstants.CONFIDENCE_MULTIPLIER,
        ScoringConstants.CONFIDENCE_FLOOR,
        ScoringConstants.CONFIDENCE_CEILING,
    ))


def build_summary(submission: AssessmentSubmission, recommended_careers: Sequence[str]) -> str:
    if not recommended_careers:
        return ScoringConstants.FALLBACK_SUMMARY
    return (
        f"Based on your strengths in {join_tokens(submission.strengths)} "
        f"and interests in {join_tokens(submission.interests)}, "
        f"we recommend exploring {join_tokens(recommended_careers)}."
    )


def rank_careers(
    submission: AssessmentSubmission,
    catalog: Sequence[Any],
    limit: Optional[int] = None,
) -> RecommendationResult:
    """Rank the catalog for one submission.

    Ties keep catalog order (``sorted`` is stable). Zero scores inside the top
    slice count toward confidence but are never recommended. An empty catalog
    yields the fallback result rather than an error.

    Args:
        submission: Sanitised form input
        catalog: Career paths in catalog order
        limit: How many top entries to consider (defaults to configuration)

    Returns:
        RecommendationResult: Titles, confidence and summary
    """
    limit = settings.CAREER_RECOMMENDATION_COUNT if limit is None else limit
    profile = CandidateProfile.from_submission(submission)

    scored = [calculate_fit_score(profile, career) for career in catalog]
    top_matches = sorted(scored, key=lambda match: match.score, reverse=True)[:limit]

    recommended_careers = [match.career_title for match in top_matches if match.score > 0]
    confidence_score = calculate_confidence(top_matches, bool(recommended_careers))

    return RecommendationResult(
        recommended_careers=recommended_careers,
        confidence_score=confidence_score,
        summary=build_summary(submission, recommended_careers),
        top_matches=top_matches,
    )


class ScoringService:
    """Logged entry point around ``rank_careers``."""

    def __init__(self, recommendation_count: Optional[int] = None):
        self.recommendation_count = recommendation_count or settings.CAREER_RECOMMENDATION_COUNT

    def recommend(
        self,
        submission: AssessmentSubmission,
        catalog: Sequence[Any],
    ) -> RecommendationResult:
        with PerformanceLogger(
            "rank_careers",
            logger=logger,
            extra={"catalog_size": len(catalog)},
        ):
            result = rank_careers(submission, catalog, limit=self.recommendation_count)

        if not result.recommended_careers:
            logger.info(
                "No career scored above zero",
                extra={"catalog_size": len(catalog)}
            )
        else:
            logger.debug(
                "Ranked career catalog",
                extra={
                    "recommended": result.recommended_careers,
                    "confidence_score": result.confidence_score,
                }
            )
        return result


__all__ = [
    "AssessmentSubmission",
    "CandidateProfile",
    "FitScore",
    "RecommendationResult",
    "ScoringService",
    "build_summary",
    "calculate_confidence",
    "calculate_fit_score",
    "rank_careers",
]
