from datetime import datetime
from typing import Any, Dict, Optional

from legal_catalog.core.exceptions import ValidationError
from legal_catalog.domains.base import require_text, utcnow


class Category:
    """Сущность категории (двуязычная группа документов)"""

    REQUIRED_FIELDS = ("name_id", "name_en")
    NULLABLE_FIELDS = ("description_id", "description_en")

    def __init__(
        self,
        id: Optional[int],
        name_id: str,
        name_en: str,
        description_id: Optional[str] = None,
        description_en: Optional[str] = None,
        created_at: Optional[datetime] = None
    ):
        self.id = id
        self.name_id = name_id
        self.name_en = name_en
        self.description_id = description_id
        self.description_en = description_en
        self.created_at = created_at or utcnow()

    @classmethod
    def create_category(
        cls,
        name_id: str,
        name_en: str,
        description_id: Optional[str] = None,
        description_en: Optional[str] = None
    ) -> "Category":
        """Создание новой категории; id присваивает хранилище"""
        return cls(
            id=None,
            name_id=require_text("name_id", name_id),
            name_en=require_text("name_en", name_en),
            description_id=description_id,
            description_en=description_en
        )

    def apply_changes(self, changes: Dict[str, Any]) -> bool:
        """Применение частичного обновления. Возвращает True, если что-то изменено"""
        for field, value in changes.items():
            if field in self.REQUIRED_FIELDS:
                value = require_text(field, value)
            elif field not in self.NULLABLE_FIELDS:
                raise ValidationError(f"Unknown category field: {field}")
            setattr(self, field, value)
        return bool(changes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Category):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Category(id={self.id}, name_id={self.name_id}, name_en={self.name_en})"
