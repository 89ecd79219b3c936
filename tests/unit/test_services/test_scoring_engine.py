"""Unit tests for the career fit scoring engine."""

from types import SimpleNamespace

import pytest

from careerpilot.services.scoring_service import (
    AssessmentSubmission,
    CandidateProfile,
    ScoringService,
    calculate_confidence,
    calculate_fit_score,
    rank_careers,
)
from careerpilot.utils.constants import ScoringConstants


def career(title, required=(), growth=(), category=""):
    return SimpleNamespace(
        title=title,
        required_skills=list(required),
        skills_to_grow=list(growth),
        category=category,
    )


class TestCalculateFitScore:
    """Score of one career against one profile."""

    def test_required_growth_and_category_components(self):
        profile = CandidateProfile(strengths=["python"], focus_areas=["mlops"], interests=["data"])
        fit = calculate_fit_score(
            profile,
            career("Data Scientist", ["Python", "SQL"], ["MLOps"], "Data"),
        )

        assert fit.required_match == 1
        assert fit.growth_match == 1
        assert fit.category_boost == ScoringConstants.CATEGORY_BOOST
        assert fit.score == 2 + 1 + 2

    def test_matching_ignores_case_and_surrounding_whitespace(self):
        submission = AssessmentSubmission(strengths=["  PYTHON "], interests=["Data"], focus_areas=["mlops"])
        profile = CandidateProfile.from_submission(submission)
        fit = calculate_fit_score(profile, career("Data Scientist", [" python"], ["MLOPS"], " DATA "))

        assert (fit.required_match, fit.growth_match, fit.category_boost) == (1, 1, 2)

    def test_interest_substring_of_category_triggers_boost(self):
        profile = CandidateProfile(interests=["tech"])
        fit = calculate_fit_score(profile, career("Frontend Developer", category="Technology"))
        assert fit.category_boost == 2

    def test_blank_interest_does_not_match_every_category(self):
        profile = CandidateProfile(interests=[""])
        fit = calculate_fit_score(profile, career("Any", category="Design"))
        assert fit.category_boost == 0
        assert fit.score == 0

    def test_skills_listed_only_as_growth_do_not_count_as_required(self):
        profile = CandidateProfile(strengths=["mlops"])
        fit = calculate_fit_score(profile, career("Data Scientist", ["Python"], ["MLOps"], "Data"))
        assert fit.required_match == 0
        assert fit.growth_match == 0

    def test_score_is_never_negative(self):
        fit = calculate_fit_score(CandidateProfile(), career("Empty"))
        assert fit.score == 0

    def test_adding_a_matching_strength_never_lowers_score(self):
        target = career("Data Scientist", ["Python", "SQL"], ["MLOps"], "Data")
        before = calculate_fit_score(CandidateProfile(strengths=["python"]), target)
        after = calculate_fit_score(CandidateProfile(strengths=["python", "sql"]), target)
        assert after.score >= before.score
        assert after.score - before.score == ScoringConstants.REQUIRED_SKILL_WEIGHT


class TestCalculateConfidence:

    def test_no_recommendations_uses_fixed_value(self):
        assert calculate_confidence([], has_recommendations=False) == 25

    @pytest.mark.parametrize("total,expected", [(1, 35), (4, 40), (9, 90), (10, 100), (30, 100)])
    def test_clamped_multiple_of_summed_scores(self, total, expected):
        top = [SimpleNamespace(score=total)]
        assert calculate_confidence(top, has_recommendations=True) == expected


class TestRankCareers:
    """Ranking the whole catalog for a submission."""

    def test_single_matching_career(self):
        catalog = [career("Data Scientist", ["Python", "SQL"], ["MLOps"], "Data")]
        submission = AssessmentSubmission(strengths=["python"], interests=["data"], focus_areas=[])

        result = rank_careers(submission, catalog)

        assert result.recommended_careers == ["Data Scientist"]
        assert result.top_matches[0].score == 4
        assert result.confidence_score == 40
        assert result.summary == (
            "Based on your strengths in python and interests in data, "
            "we recommend exploring Data Scientist."
        )

    def test_empty_input_falls_back(self, sample_catalog):
        result = rank_careers(AssessmentSubmission(), sample_catalog)

        assert result.recommended_careers == []
        assert result.confidence_score == ScoringConstants.NO_MATCH_CONFIDENCE
        assert result.summary == ScoringConstants.FALLBACK_SUMMARY

    def test_empty_catalog_falls_back(self):
        submission = AssessmentSubmission(strengths=["Python"], interests=["Data"])
        result = rank_careers(submission, [])

        assert result.recommended_careers == []
        assert result.confidence_score == 25
        assert result.top_matches == []

    def test_orders_by_score_descending(self, sample_catalog):
        submission = AssessmentSubmission(
            strengths=["Figma", "User Research", "React"],
            interests=["design"],
            focus_areas=[],
        )
        result = rank_careers(submission, sample_catalog)

        assert result.recommended_careers == ["UX Designer", "Frontend Developer"]
        assert [match.score for match in result.top_matches] == [6, 2, 0]

    def test_zero_scores_excluded_but_count_toward_confidence(self, sample_catalog):
        submission = AssessmentSubmission(strengths=["Python"], interests=["music"])
        result = rank_careers(submission, sample_catalog)

        assert result.recommended_careers == ["Data Scientist"]
        assert len(result.top_matches) == 3
        assert result.confidence_score == 35

    def test_ties_keep_catalog_order(self):
        catalog = [
            career("First", ["Python"]),
            career("Second", ["Python"]),
            career("Third", ["Python"]),
            career("Fourth", ["Python"]),
        ]
        submission = AssessmentSubmission(strengths=["python"], interests=["x"])

        result = rank_careers(submission, catalog)

        assert result.recommended_careers == ["First", "Second", "Third"]
        assert result.confidence_score == 60

    def test_same_input_gives_same_result(self, sample_catalog):
        submission = AssessmentSubmission(strengths=["Python", "CSS"], interests=["data"], focus_areas=["MLOps"])
        assert rank_careers(submission, sample_catalog) == rank_careers(submission, sample_catalog)

    def test_limit_caps_recommendations(self, sample_catalog):
        submission = AssessmentSubmission(strengths=["Python", "React", "Figma"], interests=["x"])
        result = rank_careers(submission, sample_catalog, limit=1)

        assert result.recommended_careers == ["Data Scientist"]
        assert result.confidence_score == 35


class TestScoringService:

    def test_recommend_uses_configured_count(self, sample_catalog):
        service = ScoringService(recommendation_count=2)
        submission = AssessmentSubmission(strengths=["Python", "React", "Figma"], interests=["x"])

        result = service.recommend(submission, sample_catalog)

        assert result.recommended_careers == ["Data Scientist", "Frontend Developer"]
        assert len(result.top_matches) == 2
