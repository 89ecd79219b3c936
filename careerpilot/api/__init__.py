"""CareerPilot HTTP application."""
