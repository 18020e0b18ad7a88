from datetime import datetime, timezone
from typing import Optional

from legal_catalog.core.exceptions import ValidationError


def utcnow() -> datetime:
    """Текущее время UTC без tzinfo (так оно хранится в БД)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def require_text(field: str, value: Optional[str]) -> str:
    """Проверка обязательного непустого текстового поля"""
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required")
    return value


def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Приведение даты с часовым поясом к наивному UTC"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
