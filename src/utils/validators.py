from shop.errors import ValidationError


def require_text(value: str, field: str) -> str:
    """Return value stripped, or raise ValidationError naming the field if blank."""
    if value is None or not value.strip():
        raise ValidationError(field)
    return value.strip()
