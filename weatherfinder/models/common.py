"""Common helpers shared across models."""

from datetime import datetime


def local_now() -> datetime:
    """Naive datetime in the process-local timezone."""
    return datetime.now()
