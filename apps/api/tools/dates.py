from datetime import datetime, timezone


def parse_when(value: str) -> datetime:
    """Parse an ISO date or timestamp; values without an offset are UTC.

    Raises ``ValueError`` for anything ``fromisoformat`` rejects.
    """
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    when = datetime.fromisoformat(value)
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return when
