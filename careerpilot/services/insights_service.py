"""Student dashboard insights.

Heuristic helpers behind the student dashboard widgets: skill coverage
against a target career, a keyword-based resume check, mock interview answer
scoring and a starter list of learning tasks. The scores are display aids
with fixed formulas, not assessments of quality.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from careerpilot.services.assessment_service import AssessmentService
from careerpilot.services.career_service import CareerService
from careerpilot.services.student_service import ProfileService
from careerpilot.utils.constants import InsightConstants, LearningTaskType
from careerpilot.utils.helpers import clamp, join_tokens, js_round, percentage
from careerpilot.utils.logger import get_engine_logger

logger = get_engine_logger()

TASK_TYPES = [LearningTaskType.VIDEO, LearningTaskType.PRACTICE, LearningTaskType.PROJECT]


@dataclass
class SkillCoverage:
    core_match: int
    growth_match: int
    interest_fit: int


@dataclass
class ResumeReport:
    score: int
    keyword_matches: List[str] = field(default_factory=list)
    missing_keywords: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)


@dataclass
class MockAnswerFeedback:
    score: int
    strengths: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)


@dataclass
class LearningTask:
    id: str
    label: str
    type: LearningTaskType
    completed: bool = False


def compute_skill_coverage(
    profile: Optional[Any],
    career: Optional[Any],
    assessment: Optional[Any] = None,
) -> SkillCoverage:
    """Share of a career's skills already listed on the profile.

    Skill comparison is exact, as entered. Interest fit rewards an interest
    mentioning the career category and having taken an assessment.
    """
    skills = list(profile.skills) if profile else []
    interests = list(profile.interests) if profile else []
    required = list(career.required_skills) if career else []
    growth = list(career.skills_to_grow) if career else []

    core_match = (
        percentage(sum(1 for skill in required if skill in skills), len(required))
        if required else InsightConstants.DEFAULT_CORE_COVERAGE
    )
    growth_match = (
        percentage(sum(1 for skill in growth if skill in skills), len(growth))
        if growth else InsightConstants.DEFAULT_GROWTH_COVERAGE
    )

    if career is None:
        interest_fit = InsightConstants.DEFAULT_INTEREST_FIT
    else:
        category = (career.category or "").lower()
        mentions_category = any(category in interest.lower() for interest in interests)
        has_assessment_interests = bool(assessment and assessment.interests)
        interest_fit = min(
            100,
            InsightConstants.DEFAULT_INTEREST_FIT
            + (InsightConstants.INTEREST_CATEGORY_BONUS if mentions_category else 0)
            + (InsightConstants.ASSESSMENT_INTEREST_BONUS if has_assessment_interests else 0),
        )

    return SkillCoverage(core_match=core_match, growth_match=growth_match, interest_fit=interest_fit)


def evaluate_resume(resume: str, career: Optional[Any] = None) -> ResumeReport:
    """Keyword and length check of resume text against a career.

    Without a career a generic keyword list is used. A double space anywhere
    costs a fixed penalty.
    """
    if career is not None:
        keywords = list(career.required_skills) + list(career.skills_to_grow)
    else:
        keywords = list(InsightConstants.GENERIC_RESUME_KEYWORDS)

    lowered = resume.lower()
    keyword_matches = [keyword for keyword in keywords if keyword.lower() in lowered]
    missing_keywords = [
        keyword for keyword in keywords if keyword.lower() not in lowered
    ][:InsightConstants.MAX_MISSING_KEYWORDS]

    word_count = len(re.split(r"\s+", resume))
    length_score = min(40, js_round(word_count / 5))
    keyword_score = len(keyword_matches) * InsightConstants.KEYWORD_POINTS
    grammar_penalty = InsightConstants.GRAMMAR_PENALTY if "  " in resume else 0
    score = int(clamp(40 + length_score + keyword_score - grammar_penalty, 35, 100))

    recommendations = list(InsightConstants.RESUME_RECOMMENDATIONS)
    if missing_keywords:
        target = career.title if career is not None else "target"
        recommendations.insert(0, f"Mention: {join_tokens(missing_keywords)} to match {target} role.")

    return ResumeReport(
        score=score,
        keyword_matches=keyword_matches,
        missing_keywords=missing_keywords,
        recommendations=recommendations,
    )


def score_mock_answer(answer: str, focus: str) -> MockAnswerFeedback:
    """Score a practice interview answer on clarity, depth and structure."""
    clarity = min(30, js_round(len(re.split(r"[.!?]", answer)) * 5))
    depth = min(40, js_round(len(answer) / 20))
    structure = 30 if "because" in answer else 18

    reflection = (
        "Good reflection on learnings." if "Behavioral" in focus
        else "Clear strategic framing."
    )
    return MockAnswerFeedback(
        score=min(100, clarity + depth + structure),
        strengths=["You addressed the prompt directly.", reflection],
        improvements=[
            "Add measurable outcomes to boost credibility.",
            "Close with how the lesson influences your next role.",
        ],
    )


def generate_learning_tasks(career: Optional[Any] = None) -> List[LearningTask]:
    """Up to three starter tasks built from a career's growth skills."""
    if career is not None:
        skills = list(career.skills_to_grow)[:3]
        prefix = str(career.id) if getattr(career, "id", None) is not None else "generic"
    else:
        skills = list(InsightConstants.GENERIC_GROWTH_SKILLS)
        prefix = "generic"

    return [
        LearningTask(
            id=f"{prefix}-{skill}-{index}",
            label=f"Practice {skill} for 45 minutes",
            type=TASK_TYPES[min(index, len(TASK_TYPES) - 1)],
        )
        for index, skill in enumerate(skills)
    ]


class InsightsService:
    """Loads the caller's profile, career and latest assessment for the helpers."""

    def __init__(self, career_service=None, profile_service=None, assessment_service=None):
        self.career_service = career_service or CareerService()
        self.profile_service = profile_service or ProfileService()
        self.assessment_service = assessment_service or AssessmentService(
            career_service=self.career_service
        )

    async def skill_coverage(
        self,
        user: Optional[Dict[str, Any]],
        career_path_id: Optional[str] = None,
    ) -> SkillCoverage:
        profile = await self.profile_service.get_profile(user)
        career = await self.career_service.find_career(career_path_id)
        assessment = await self.assessment_service.get_latest_assessment(user)
        return compute_skill_coverage(profile, career, assessment)

    async def resume_report(self, resume: str, career_path_id: Optional[str] = None) -> ResumeReport:
        career = await self.career_service.find_career(career_path_id)
        report = evaluate_resume(resume, career)
        logger.debug("Resume evaluated", extra={"score": report.score})
        return report

    async def learning_tasks(self, career_path_id: str) -> List[LearningTask]:
        career = await self.career_service.get_career(career_path_id)
        return generate_learning_tasks(career)


__all__ = [
    "InsightsService",
    "LearningTask",
    "MockAnswerFeedback",
    "ResumeReport",
    "SkillCoverage",
    "compute_skill_coverage",
    "evaluate_resume",
    "generate_learning_tasks",
    "score_mock_answer",
]
