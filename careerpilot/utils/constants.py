"""Constants and enums for the CareerPilot application."""

from enum import Enum
from typing import Dict, List


# ============================================================================
# CORE ENUMS
# ============================================================================

class UserRole(str, Enum):
    """Roles carried in the identity token."""

    ADMIN = "admin"
    USER = "user"
    MEMBER = "member"


class SessionStatus(str, Enum):
    """Lifecycle of a mentorship session."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class GoalStatus(str, Enum):
    """Progress of a personal goal."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class LearningTaskType(str, Enum):
    """Kind of generated learning task."""

    VIDEO = "video"
    PRACTICE = "practice"
    PROJECT = "project"


class SaveToggleStatus(str, Enum):
    """Result of toggling a saved career."""

    SAVED = "saved"
    REMOVED = "removed"


# ============================================================================
# COLLECTIONS
# ============================================================================

class Collections:
    """MongoDB collection names."""

    USERS = "users"
    PROFILES = "profiles"
    CAREER_PATHS = "career_paths"
    SAVED_CAREERS = "saved_careers"
    ASSESSMENTS = "assessments"
    COUNSELORS = "counselors"
    MENTORSHIP_SESSIONS = "mentorship_sessions"
    GOALS = "goals"
    FEEDBACK = "feedback"


# ============================================================================
# SCORING CONSTANTS
# ============================================================================

class ScoringConstants:
    """Weights and bounds of the career fit engine."""

    REQUIRED_SKILL_WEIGHT = 2
    GROWTH_SKILL_WEIGHT = 1
    CATEGORY_BOOST = 2

    CONFIDENCE_MULTIPLIER = 10
    CONFIDENCE_FLOOR = 35
    CONFIDENCE_CEILING = 100
    NO_MATCH_CONFIDENCE = 25

    DEFAULT_RECOMMENDATION_COUNT = 3

    FALLBACK_SUMMARY = (
        "We stored your preferences. Add more specific strengths or interests "
        "to unlock tailored paths."
    )


class MatchingConstants:
    """Counselor matching display values."""

    BASELINE_FIT_PERCENT = 60
    FIT_PERCENT_PER_OVERLAP = 10
    MAX_FIT_PERCENT = 100
    DEFAULT_SAMPLE_SIZE = 3


class AnalyticsConstants:
    """Dashboard analytics labels and thresholds."""

    NO_DATA_LABEL = "No data"
    NOT_ENOUGH_DATA = "Not enough data"
    DUPLICATE_SESSION_THRESHOLD = 3
    NO_RESPONSE_TIME = "—"
    BASE_RESPONSE_HOURS = 12

    # (feature, per-entity multiplier, offset, counted entity); illustrative bars only
    FEATURE_USAGE_FORMULAS: List[tuple] = [
        ("Career Explorer", 3, 42, "careers"),
        ("Mentor Connect", 5, 28, "sessions"),
        ("Innovation Hub", 0, 64, None),
        ("Learning Paths", 4, 30, "assessments"),
        ("Feedback Panel", 0, 37, None),
    ]


class InsightConstants:
    """Student dashboard helper defaults."""

    DEFAULT_CORE_COVERAGE = 45
    DEFAULT_GROWTH_COVERAGE = 38
    DEFAULT_INTEREST_FIT = 50
    INTEREST_CATEGORY_BONUS = 30
    ASSESSMENT_INTEREST_BONUS = 20

    GENERIC_RESUME_KEYWORDS = ["impact", "ownership", "analysis"]
    GENERIC_GROWTH_SKILLS = ["Storytelling", "Systems thinking", "Networking"]
    MAX_MISSING_KEYWORDS = 5
    KEYWORD_POINTS = 8
    GRAMMAR_PENALTY = 8

    RESUME_RECOMMENDATIONS = [
        "Mirror keywords from the job description.",
        "Quantify achievements with numbers.",
        "Keep a consistent tense and casing.",
    ]


# ============================================================================
# SEED DATA
# ============================================================================

DEFAULT_CAREER_PATHS: List[Dict] = [
    {
        "title": "Frontend Developer",
        "description": "Build responsive user interfaces with performance-first thinking.",
        "required_skills": ["React", "TypeScript", "CSS", "Testing"],
        "estimated_salary": "$80k - $140k",
        "growth_outlook": "High",
        "difficulty": "Entry-Mid",
        "category": "Technology",
        "skills_to_grow": ["UX storytelling", "Accessibility", "Design systems"],
    },
    {
        "title": "Product Manager",
        "description": "Coordinate product vision, customer insights, and delivery teams.",
        "required_skills": ["Strategy", "Communication", "Analytics", "Agile"],
        "estimated_salary": "$100k - $160k",
        "growth_outlook": "Stable",
        "difficulty": "Mid-Senior",
        "category": "Product",
        "skills_to_grow": ["Experimentation", "Executive storytelling", "Roadmapping"],
    },
    {
        "title": "Data Scientist",
        "description": "Translate complex datasets into business insights and ML models.",
        "required_skills": ["Python", "SQL", "Statistics", "Machine Learning"],
        "estimated_salary": "$110k - $180k",
        "growth_outlook": "High",
        "difficulty": "Mid-Senior",
        "category": "Data",
        "skills_to_grow": ["MLOps", "Prompt engineering", "Experiment design"],
    },
    {
        "title": "UX Designer",
        "description": "Design human-centered experiences backed by research.",
        "required_skills": ["Figma", "User Research", "Prototyping", "Information Architecture"],
        "estimated_salary": "$75k - $130k",
        "growth_outlook": "High",
        "difficulty": "Entry-Mid",
        "category": "Design",
        "skills_to_grow": ["Design systems", "Motion design", "Workshop facilitation"],
    },
]

DEFAULT_COUNSELORS: List[Dict] = [
    {
        "name": "Ananya Rao",
        "specialization": "Product Strategy",
        "bio": "Former FAANG PM mentoring students on product sense and leadership.",
        "experience_years": 8,
        "rating": 4.9,
        "focus_areas": ["Product", "Leadership", "Interviews"],
        "availability": ["Tue 6 PM", "Thu 8 PM", "Sat 10 AM"],
    },
    {
        "name": "Leon Chen",
        "specialization": "Data Science",
        "bio": "ML lead helping grads transition into high-impact applied science roles.",
        "experience_years": 10,
        "rating": 4.8,
        "focus_areas": ["Data", "AI", "Research"],
        "availability": ["Mon 7 PM", "Wed 9 PM", "Sun 11 AM"],
    },
    {
        "name": "Sara Velasquez",
        "specialization": "Design & Research",
        "bio": "UX director focused on storytelling portfolios and systems thinking.",
        "experience_years": 11,
        "rating": 5.0,
        "focus_areas": ["Design", "Storytelling", "Interviews"],
        "availability": ["Fri 5 PM", "Sat 1 PM", "Sun 9 AM"],
    },
]
