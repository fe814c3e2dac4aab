from datetime import date

from marshmallow import ValidationError

NAME_MAX_LENGTH = 255


def validate_text(value: str, label: str, max_length: int = NAME_MAX_LENGTH) -> None:
    """Reject blank strings and strings longer than max_length characters."""
    if value is None or not value.strip():
        raise ValidationError(f"{label} is required.")
    if len(value) > max_length:
        raise ValidationError(f"{label} must be at most {max_length} characters.")


def validate_past(d: date) -> None:
    if d is not None and d >= date.today():
        raise ValidationError("Date must be in the past.")
