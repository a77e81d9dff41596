from datetime import date, datetime, time, timezone


def normalize_date(value):
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        value_text = value.strip()
        if not value_text:
            return None
        try:
            return date.fromisoformat(value_text)
        except ValueError:
            return None
    return None


def as_utc_datetime(value):
    """Coerce a date, datetime or ISO string to an aware UTC datetime.

    Plain dates are taken as midnight UTC. Naive datetimes are assumed to be
    UTC already.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value_text = value.strip()
        if not value_text:
            return None
        try:
            value = datetime.fromisoformat(value_text.replace("Z", "+00:00"))
        except ValueError:
            value = normalize_date(value_text)
            if value is None:
                return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    return None
