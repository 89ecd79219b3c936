"""Counselor matching for recent assessments."""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from careerpilot.core.config import get_settings
from careerpilot.utils.constants import MatchingConstants
from careerpilot.utils.helpers import normalize_tokens
from careerpilot.utils.logger import get_engine_logger

settings = get_settings()
logger = get_engine_logger()


@dataclass
class CounselorMatch:
    student_focus: str
    counselor_name: str
    score_percent: int
    overlap: int = 0
    counselor_id: Optional[str] = None


def count_focus_overlap(counselor_focus: Sequence[str], student_focus: Sequence[str]) -> int:
    """Number of counselor focus areas the student also listed, ignoring case."""
    wanted = set(normalize_tokens(student_focus))
    return sum(1 for area in normalize_tokens(counselor_focus) if area in wanted)


def fit_percent(overlap: int) -> int:
    return min(
        MatchingConstants.MAX_FIT_PERCENT,
        MatchingConstants.BASELINE_FIT_PERCENT + overlap * MatchingConstants.FIT_PERCENT_PER_OVERLAP,
    )


def pick_counselor(assessment: Any, counselors: Sequence[Any]) -> Tuple[Any, int]:
    """Best counselor for one assessment and its overlap.

    Starts from the first counselor at overlap 0 and only replaces it on a
    strictly greater overlap, so the earliest counselor wins ties.
    """
    best, best_overlap = counselors[0], 0
    for counselor in counselors:
        overlap = count_focus_overlap(counselor.focus_areas, assessment.focus_areas)
        if overlap > best_overlap:
            best, best_overlap = counselor, overlap
    return best, best_overlap


def compute_counselor_matches(
    assessments: Sequence[Any],
    counselors: Sequence[Any],
    sample_size: Optional[int] = None,
) -> List[CounselorMatch]:
    """Suggest one counselor for each of the first ``sample_size`` assessments.

    Args:
        assessments: Objects with ``focus_areas``, ``recommended_careers`` and
            ``summary``, newest first
        counselors: Objects with ``name`` and ``focus_areas`` in catalog order
        sample_size: How many assessments to match (defaults to configuration)

    Returns:
        List[CounselorMatch]: Empty when either input is empty
    """
    if not assessments or not counselors:
        return []

    sample_size = settings.MATCH_SAMPLE_SIZE if sample_size is None else sample_size
    matches: List[CounselorMatch] = []

    for assessment in list(assessments)[:sample_size]:
        counselor, overlap = pick_counselor(assessment, counselors)
        recommended = assessment.recommended_careers
        counselor_id = getattr(counselor, "id", None)
        matches.append(
            CounselorMatch(
                student_focus=recommended[0] if recommended else assessment.summary,
                counselor_name=counselor.name,
                score_percent=fit_percent(overlap),
                overlap=overlap,
                counselor_id=str(counselor_id) if counselor_id is not None else None,
            )
        )

    logger.debug("Computed counselor matches", extra={"matches": len(matches)})
    return matches


__all__ = [
    "CounselorMatch",
    "compute_counselor_matches",
    "count_focus_overlap",
    "fit_percent",
    "pick_counselor",
]
