"""CareerPilot utilities package.

Common helpers, constants, exceptions and logging used throughout the
application.
"""

from careerpilot.utils.constants import (
    AnalyticsConstants,
    Collections,
    GoalStatus,
    MatchingConstants,
    ScoringConstants,
    SessionStatus,
    UserRole,
)
from careerpilot.utils.datetime_utils import ensure_utc, local_hour, utc_now
from careerpilot.utils.exceptions import (
    AuthenticationError,
    AuthorizationError,
    CareerPilotError,
    DatabaseError,
    ResourceNotFoundError,
    ValidationError,
)
from careerpilot.utils.helpers import (
    clamp,
    format_hour_label,
    normalize_token,
    normalize_tokens,
    parse_token_list,
)
from careerpilot.utils.logger import get_logger, setup_logging

__all__ = [
    # Constants
    "AnalyticsConstants",
    "Collections",
    "GoalStatus",
    "MatchingConstants",
    "ScoringConstants",
    "SessionStatus",
    "UserRole",
    # Datetime
    "ensure_utc",
    "local_hour",
    "utc_now",
    # Exceptions
    "AuthenticationError",
    "AuthorizationError",
    "CareerPilotError",
    "DatabaseError",
    "ResourceNotFoundError",
    "ValidationError",
    # Helpers
    "clamp",
    "format_hour_label",
    "normalize_token",
    "normalize_tokens",
    "parse_token_list",
    # Logging
    "get_logger",
    "setup_logging",
]
