"""Day labels for forecast samples relative to the local calendar day."""

from datetime import datetime, timedelta

from weatherfinder.models.common import local_now

# Sunday-first, matching the provider's day-of-week numbering
WEEKDAYS = (
    "Sunday", "Monday", "Tuesday", "Wednesday",
    "Thursday", "Friday", "Saturday",
)


def weekday_name(moment: datetime) -> str:
    # datetime.weekday() is Monday=0
    return WEEKDAYS[(moment.weekday() + 1) % 7]


def to_local_naive(moment: datetime) -> datetime:
    """Convert aware datetimes to naive process-local time; naive ones pass through."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def format_date_label(moment: datetime, now: datetime | None = None) -> str:
    """Label a sample as "Today", "Tomorrow", a weekday name, or "".

    Both instants are compared by local calendar day. Samples dated before
    today get an empty label.
    """
    moment = to_local_naive(moment)
    today = to_local_naive(now or local_now()).date()
    day = moment.date()
    if day == today:
        return "Today"
    if day == today + timedelta(days=1):
        return "Tomorrow"
    if day > today + timedelta(days=1):
        return weekday_name(moment)
    return ""
