"""Operational scripts run with ``python -m mentorship.scripts.<name>``."""
