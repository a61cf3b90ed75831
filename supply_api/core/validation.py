"""Input checks shared by the search, order and CRUD endpoints.

Every helper either returns the (possibly converted) value or raises
``ValidationError`` with a user-facing message.
"""

from supply_api.core.errors import ValidationError


def require_value(value, message):
    if value is None or value == "":
        raise ValidationError(message)
    return value


def require_min_length(value, minimum, message):
    if len(value) < minimum:
        raise ValidationError(message)
    return value


def require_choice(value, choices, message):
    if value not in choices:
        raise ValidationError(message)
    return value


def parse_int(value, message):
    if isinstance(value, bool):
        raise ValidationError(message)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValidationError(message)


def require_at_least(value, minimum, message):
    if value < minimum:
        raise ValidationError(message)
    return value


def require_at_most(value, maximum, message):
    if value > maximum:
        raise ValidationError(message)
    return value
