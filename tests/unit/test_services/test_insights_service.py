"""Unit tests for the student dashboard insight helpers."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest

from careerpilot.services.insights_service import (
    InsightsService,
    compute_skill_coverage,
    evaluate_resume,
    generate_learning_tasks,
    score_mock_answer,
)
from careerpilot.utils.constants import LearningTaskType


@pytest.fixture
def data_career():
    return SimpleNamespace(
        id="c1",
        title="Data Scientist",
        required_skills=["Python", "SQL", "Statistics", "Machine Learning"],
        skills_to_grow=["MLOps", "Prompt engineering", "Experiment design"],
        category="Data",
    )


class TestSkillCoverage:

    def test_defaults_without_profile_or_career(self):
        coverage = compute_skill_coverage(None, None)
        assert (coverage.core_match, coverage.growth_match, coverage.interest_fit) == (45, 38, 50)

    def test_coverage_percentages(self, data_career):
        profile = SimpleNamespace(skills=["Python", "SQL", "MLOps"], interests=["Big data"])
        assessment = SimpleNamespace(interests=["Data"])

        coverage = compute_skill_coverage(profile, data_career, assessment)

        assert coverage.core_match == 50
        assert coverage.growth_match == 33
        assert coverage.interest_fit == 100

    def test_skill_comparison_is_exact(self, data_career):
        profile = SimpleNamespace(skills=["python"], interests=[])
        coverage = compute_skill_coverage(profile, data_career)
        assert coverage.core_match == 0
        assert coverage.interest_fit == 50


class TestResumeEvaluation:

    def test_generic_keywords_without_career(self):
        report = evaluate_resume("Showed ownership and impact")

        assert report.keyword_matches == ["impact", "ownership"]
        assert report.missing_keywords == ["analysis"]
        assert report.score == 40 + 1 + 16
        assert report.recommendations[0] == "Mention: analysis to match target role."

    def test_double_space_costs_points(self):
        clean = evaluate_resume("impact ownership analysis")
        spaced = evaluate_resume("impact  ownership analysis")
        assert clean.score - spaced.score == 8

    def test_score_floor_and_ceiling(self, data_career):
        assert evaluate_resume("x  y").score >= 35
        long_resume = " ".join(["Python SQL Statistics Machine Learning MLOps"] * 60)
        assert evaluate_resume(long_resume, data_career).score == 100

    def test_no_missing_keywords_keeps_generic_recommendations(self):
        report = evaluate_resume("impact ownership analysis")
        assert report.missing_keywords == []
        assert len(report.recommendations) == 3


class TestMockAnswer:

    def test_structure_rewarded_for_reasoning(self):
        with_reason = score_mock_answer("I chose it because it scaled.", "General")
        without = score_mock_answer("I chose it as it scaled.", "General")
        assert with_reason.score > without.score

    def test_behavioral_focus_feedback(self):
        feedback = score_mock_answer("Short answer.", "Behavioral")
        assert "Good reflection on learnings." in feedback.strengths
        assert len(feedback.improvements) == 2

    def test_score_is_capped(self):
        answer = "Because. " * 400
        assert score_mock_answer(answer, "General").score <= 100


class TestLearningTasks:

    def test_tasks_from_career_growth_skills(self, data_career):
        tasks = generate_learning_tasks(data_career)

        assert [task.label for task in tasks] == [
            "Practice MLOps for 45 minutes",
            "Practice Prompt engineering for 45 minutes",
            "Practice Experiment design for 45 minutes",
        ]
        assert [task.type for task in tasks] == [
            LearningTaskType.VIDEO,
            LearningTaskType.PRACTICE,
            LearningTaskType.PROJECT,
        ]
        assert tasks[0].id == "c1-MLOps-0"
        assert not any(task.completed for task in tasks)

    def test_generic_tasks(self):
        tasks = generate_learning_tasks(None)
        assert len(tasks) == 3
        assert tasks[0].id.startswith("generic-")


class TestInsightsService:

    @pytest.fixture
    def services(self, data_career):
        career_service = Mock()
        career_service.find_career = AsyncMock(return_value=data_career)
        career_service.get_career = AsyncMock(return_value=data_career)
        profile_service = Mock()
        profile_service.get_profile = AsyncMock(
            return_value=SimpleNamespace(skills=["Python"], interests=["Data"])
        )
        assessment_service = Mock()
        assessment_service.get_latest_assessment = AsyncMock(return_value=None)
        return career_service, profile_service, assessment_service

    @pytest.mark.asyncio
    async def test_skill_coverage_loads_inputs(self, services, student_user):
        career_service, profile_service, assessment_service = services
        service = InsightsService(career_service, profile_service, assessment_service)

        coverage = await service.skill_coverage(student_user, "c1")

        career_service.find_career.assert_awaited_once_with("c1")
        profile_service.get_profile.assert_awaited_once_with(student_user)
        assert coverage.core_match == 25
        assert coverage.interest_fit == 80

    @pytest.mark.asyncio
    async def test_learning_tasks_require_existing_career(self, services):
        career_service, profile_service, assessment_service = services
        service = InsightsService(career_service, profile_service, assessment_service)

        tasks = await service.learning_tasks("c1")

        career_service.get_career.assert_awaited_once_with("c1")
        assert len(tasks) == 3
