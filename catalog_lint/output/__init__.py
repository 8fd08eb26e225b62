"""Output formatting for lint reports."""
