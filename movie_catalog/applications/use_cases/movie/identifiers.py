from movie_catalog.domain.exceptions import ValidationError


def require_identifier(value: str, label: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{label} must not be empty")
    return str(value).strip()
