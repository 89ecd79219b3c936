"""Unit tests for AssessmentService."""

from unittest.mock import AsyncMock, Mock

import pytest

from careerpilot.services.assessment_service import AssessmentService
from careerpilot.utils.constants import Collections
from careerpilot.utils.exceptions import AuthenticationError, ValidationError


class TestAssessmentService:
    """Test suite for AssessmentService."""

    @pytest.fixture
    def career_service(self, sample_catalog):
        service = Mock()
        service.list_careers = AsyncMock(return_value=sample_catalog)
        return service

    @pytest.fixture
    def assessment_service(self, mock_db, career_service):
        return AssessmentService(db=mock_db, career_service=career_service)

    @pytest.mark.asyncio
    async def test_submit_ranks_and_stores_once(self, assessment_service, mock_db, student_user):
        result = await assessment_service.submit_assessment(
            student_user,
            interests=["Data"],
            strengths=["Python", "SQL"],
            focus_areas=["MLOps"],
        )

        assert result.recommended_careers == ["Data Scientist"]
        assert result.confidence_score == 70
        mock_db.insert_one.assert_awaited_once()

        collection, document = mock_db.insert_one.await_args.args
        assert collection == Collections.ASSESSMENTS
        assert document["user_id"] == "user_123"
        assert document["recommended_careers"] == ["Data Scientist"]
        assert document["confidence_score"] == 70
        assert document["strengths"] == ["Python", "SQL"]

    @pytest.mark.asyncio
    async def test_comma_separated_input_is_split(self, assessment_service, mock_db, student_user):
        await assessment_service.submit_assessment(
            student_user,
            interests="design, research",
            strengths="Figma,  User Research ,",
        )

        document = mock_db.insert_one.await_args.args[1]
        assert document["strengths"] == ["Figma", "User Research"]
        assert document["interests"] == ["design", "research"]
        assert document["focus_areas"] == []

    @pytest.mark.asyncio
    async def test_no_match_stores_fallback(self, assessment_service, mock_db, student_user):
        result = await assessment_service.submit_assessment(
            student_user, interests=["music"], strengths=["Singing"]
        )

        assert result.recommended_careers == []
        assert result.confidence_score == 25
        mock_db.insert_one.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("interests,strengths", [
        ([], ["Python"]),
        (["Data"], []),
        ([" ", ""], ["Python"]),
        ("", ""),
    ])
    async def test_empty_strengths_or_interests_rejected(
        self, assessment_service, mock_db, career_service, student_user, interests, strengths
    ):
        with pytest.raises(ValidationError) as exc_info:
            await assessment_service.submit_assessment(student_user, interests=interests, strengths=strengths)

        assert exc_info.value.message == "Add at least one strength and one interest."
        career_service.list_careers.assert_not_awaited()
        mock_db.insert_one.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user", [None, {}, {"id": None, "role": "user"}])
    async def test_unauthenticated_submission_rejected(self, assessment_service, mock_db, user):
        with pytest.raises(AuthenticationError):
            await assessment_service.submit_assessment(user, interests=["Data"], strengths=["Python"])

        mock_db.insert_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_list_assessments_newest_first_for_user(self, assessment_service, mock_db, student_user):
        mock_db.find_many.return_value = [
            {
                "user_id": "user_123",
                "recommended_careers": ["Data Scientist"],
                "confidence_score": 40,
                "summary": "s",
            }
        ]

        assessments = await assessment_service.list_assessments(student_user, limit=2)

        assert len(assessments) == 1
        assert assessments[0].confidence_score == 40
        args, kwargs = mock_db.find_many.await_args
        assert args == (Collections.ASSESSMENTS, {"user_id": "user_123"})
        assert kwargs["sort"] == [("created_at", -1)]
        assert kwargs["limit"] == 2

    @pytest.mark.asyncio
    async def test_latest_assessment_none_when_empty(self, assessment_service, student_user):
        assert await assessment_service.get_latest_assessment(student_user) is None
