from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time truncated to the millisecond precision BSON dates keep."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def strip_private_fields(doc: dict, fields=("password",)) -> dict:
    return {key: value for key, value in doc.items() if key not in fields}
