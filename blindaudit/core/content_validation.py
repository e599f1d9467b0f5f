from __future__ import annotations

from blindaudit.core.config import settings
from blindaudit.core.errors import ValidationError


def _check_text(
    field: str,
    value: str | None,
    *,
    min_length: int = 1,
    max_length: int,
) -> list[dict]:
    """
    Returns list of error dicts (empty if ok).
    Length is measured on the raw value; emptiness on the stripped value.
    """
    errors: list[dict] = []

    if value is None or value.strip() == "":
        errors.append({"field": field, "code": "required", "message": "Cannot be empty or whitespace only"})
        return errors

    if len(value.strip()) < min_length:
        errors.append({"field": field, "code": "min_length", "message": f"Must be >= {min_length} chars"})

    if len(value) > max_length:
        errors.append({"field": field, "code": "max_length", "message": f"Must be <= {max_length} chars"})

    return errors


def validate_response_content(content: str | None) -> str:
    errors = _check_text("content", content, max_length=settings.MAX_CONTENT_LENGTH)
    if errors:
        raise ValidationError("Response validation failed", errors=errors)
    return content


def validate_suggestion(name: str | None, content: str | None) -> None:
    errors: list[dict] = []
    errors.extend(_check_text("name", name, max_length=100))
    errors.extend(_check_text("content", content, min_length=10, max_length=2000))
    if errors:
        raise ValidationError("Suggestion validation failed", errors=errors)
