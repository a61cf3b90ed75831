from datetime import date, datetime


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
            return datetime.fromisoformat(value_text.replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None


def format_date(value) -> str:
    normalized = normalize_date(value)
    if normalized is None:
        return ""
    return normalized.isoformat()
