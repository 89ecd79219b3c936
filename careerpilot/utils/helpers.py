"""Helper utilities for CareerPilot.

Token normalisation for case-insensitive matching, input sanitising and a few
small numeric/label helpers shared by the scoring services.
"""

import math
from typing import Iterable, List, Optional, Sequence, Union


# Token utilities

def normalize_token(value: str) -> str:
    """Lower-case and trim a single free-text token."""
    return value.strip().lower()


def normalize_tokens(values: Optional[Iterable[str]]) -> List[str]:
    """Normalize a sequence of free-text tokens.

    Order and duplicates are preserved, so normalizing an already normalized
    list returns an identical list.

    Args:
        values: Raw skill, interest or focus-area strings

    Returns:
        List[str]: Lower-cased, trimmed tokens
    """
    if not values:
        return []
    return [normalize_token(value) for value in values]


def parse_token_list(value: Union[str, Sequence[str], None]) -> List[str]:
    """Split user input into trimmed, non-empty tokens.

    Accepts either a comma separated string ("Python, SQL") or a list of
    strings. Casing is kept so summaries can echo what the user typed.

    Args:
        value: Raw form input

    Returns:
        List[str]: Trimmed tokens with blanks removed
    """
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(",")
    else:
        parts = []
        for item in value:
            parts.extend(str(item).split(","))
    return [part.strip() for part in parts if part and part.strip()]


def join_tokens(values: Sequence[str], separator: str = ", ") -> str:
    """Join tokens for display."""
    return separator.join(values)


# Numeric utilities

def clamp(value: Union[int, float], lower: Union[int, float], upper: Union[int, float]) -> Union[int, float]:
    """Clamp ``value`` into ``[lower, upper]``."""
    return min(max(value, lower), upper)


def js_round(value: float) -> int:
    """Round half up, matching how dashboard percentages were rounded.

    Python's ``round`` uses banker's rounding, which would turn 2.5 into 2.
    """
    return math.floor(value + 0.5)


def percentage(part: int, total: int) -> int:
    """Integer percentage of ``part`` over ``total`` (0 when total is 0)."""
    if total <= 0:
        return 0
    return js_round(part / total * 100)


# Label utilities

def format_hour_label(hour: int) -> str:
    """Format an hour of day (0-23) as a 12-hour label such as ``9 AM``."""
    if not 0 <= hour <= 23:
        raise ValueError(f"Hour must be between 0 and 23, got {hour}")
    if hour >= 12:
        return f"{12 if hour == 12 else hour - 12} PM"
    return f"{hour or 12} AM"
