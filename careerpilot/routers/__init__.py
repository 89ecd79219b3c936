"""API routers for CareerPilot."""
