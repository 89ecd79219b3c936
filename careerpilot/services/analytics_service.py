"""Admin dashboard analytics.

Aggregates over mentorship session and assessment collections: peak usage
hour, duplicate-account heuristic, the most recommended career, illustrative
feature usage bars and per-counselor workload. All functions are pure and
take already-fetched collections.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from careerpilot.core.config import get_settings
from careerpilot.utils.constants import AnalyticsConstants
from careerpilot.utils.datetime_utils import get_zone, local_hour
from careerpilot.utils.helpers import format_hour_label, join_tokens
from careerpilot.utils.logger import get_engine_logger

settings = get_settings()
logger = get_engine_logger()


@dataclass
class AnalyticsSummary:
    peak_hour_label: str
    top_career: str
    total_sessions: int
    unique_learners: int


@dataclass
class DuplicateReport:
    duplicates: List[str] = field(default_factory=list)
    suspicious_logins: bool = False


@dataclass
class FeatureUsage:
    feature: str
    usage: int


@dataclass
class CounselorPerformance:
    name: str
    sessions: int
    rating: float
    focus_areas: str
    response_time: str


def peak_hour_label(sessions: Sequence[Any], timezone_name: Optional[str] = None) -> str:
    """Label of the busiest hour of day, e.g. ``Peak: 9 AM``.

    Hours are bucketed in the configured analytics timezone. When two hours
    share the top count the earlier hour of the day wins.
    """
    if not sessions:
        return AnalyticsConstants.NO_DATA_LABEL

    zone = get_zone(timezone_name or settings.ANALYTICS_TIMEZONE)
    counts = Counter(local_hour(session.session_date, zone) for session in sessions)
    peak_hour = min(counts, key=lambda hour: (-counts[hour], hour))
    return f"Peak: {format_hour_label(peak_hour)}"


def detect_duplicate_accounts(
    sessions: Sequence[Any],
    threshold: Optional[int] = None,
) -> DuplicateReport:
    """Flag users with more than ``threshold`` sessions.

    Each user is reported once, in the order they first crossed the
    threshold while walking the sessions. A heuristic for review only.
    """
    threshold = settings.DUPLICATE_SESSION_THRESHOLD if threshold is None else threshold
    per_user: Dict[str, int] = {}
    duplicates: List[str] = []

    for session in sessions:
        user_id = str(session.user_id)
        per_user[user_id] = per_user.get(user_id, 0) + 1
        if per_user[user_id] > threshold and user_id not in duplicates:
            duplicates.append(user_id)

    if duplicates:
        logger.warning(
            "Users flagged for duplicate-session review",
            extra={"flagged": len(duplicates), "threshold": threshold}
        )
    return DuplicateReport(duplicates=duplicates, suspicious_logins=bool(duplicates))


def top_career(assessments: Sequence[Any]) -> str:
    """Most frequently recommended career; first seen wins a tie."""
    frequency: Counter = Counter()
    for assessment in assessments:
        frequency.update(assessment.recommended_careers)
    if not frequency:
        return AnalyticsConstants.NOT_ENOUGH_DATA
    # Counter keeps insertion order and most_common sorts stably
    return frequency.most_common(1)[0][0]


def feature_usage(career_count: int, session_count: int, assessment_count: int) -> List[FeatureUsage]:
    """Illustrative usage bars for the dashboard heatmap.

    These are fixed linear functions of entity counts with no statistical
    meaning; they only need to be deterministic.
    """
    counts = {
        "careers": career_count,
        "sessions": session_count,
        "assessments": assessment_count,
    }
    usage = []
    for feature, multiplier, offset, entity in AnalyticsConstants.FEATURE_USAGE_FORMULAS:
        base = counts[entity] if entity else 0
        usage.append(FeatureUsage(feature=feature, usage=base * multiplier + offset))
    return usage


def compute_analytics_summary(
    sessions: Sequence[Any],
    assessments: Sequence[Any],
    timezone_name: Optional[str] = None,
) -> AnalyticsSummary:
    return AnalyticsSummary(
        peak_hour_label=peak_hour_label(sessions, timezone_name),
        top_career=top_career(assessments),
        total_sessions=len(sessions),
        unique_learners=len({str(session.user_id) for session in sessions}),
    )


def counselor_performance(
    counselors: Sequence[Any],
    sessions: Sequence[Any],
) -> List[CounselorPerformance]:
    """Sessions handled per counselor with a nominal response-time label."""
    handled_by: Counter = Counter(
        str(session.counselor_id)
        for session in sessions
        if getattr(session, "counselor_id", None) is not None
    )

    report = []
    for counselor in counselors:
        handled = handled_by.get(str(counselor.id), 0) if counselor.id is not None else 0
        if handled:
            response_time = f"{max(1, AnalyticsConstants.BASE_RESPONSE_HOURS - handled)}h SLA"
        else:
            response_time = AnalyticsConstants.NO_RESPONSE_TIME
        report.append(
            CounselorPerformance(
                name=counselor.name,
                sessions=handled,
                rating=counselor.rating,
                focus_areas=join_tokens(counselor.focus_areas),
                response_time=response_time,
            )
        )
    return report


__all__ = [
    "AnalyticsSummary",
    "CounselorPerformance",
    "DuplicateReport",
    "FeatureUsage",
    "compute_analytics_summary",
    "counselor_performance",
    "detect_duplicate_accounts",
    "feature_usage",
    "peak_hour_label",
    "top_career",
]
