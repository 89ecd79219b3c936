"""CareerPilot: career recommendations, fit scoring and mentorship analytics."""

__version__ = "1.0.0"
