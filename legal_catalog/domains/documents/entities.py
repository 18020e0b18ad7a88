from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from legal_catalog.core.exceptions import ValidationError
from legal_catalog.core.enums import DocumentType
from legal_catalog.domains.base import as_naive_utc, require_text, utcnow


def parse_document_type(value: Any) -> DocumentType:
    """Проверка значения типа документа по закрытому списку"""
    try:
        return DocumentType(value)
    except ValueError as e:
        raise ValidationError(f"Unknown document_type: {value}") from e


class LegalDocument:
    """Сущность правового документа (статья, закон или решение)"""

    REQUIRED_TEXT_FIELDS = ("title_id", "title_en", "content_id", "content_en")
    NULLABLE_FIELDS = (
        "summary_id", "summary_en", "document_number",
        "publication_date", "effective_date", "file_url"
    )
    NON_NULL_FIELDS = ("document_type", "category_id", "tags", "is_published")

    def __init__(
        self,
        id: Optional[int],
        title_id: str,
        title_en: str,
        content_id: str,
        content_en: str,
        document_type: DocumentType,
        category_id: int,
        summary_id: Optional[str] = None,
        summary_en: Optional[str] = None,
        document_number: Optional[str] = None,
        publication_date: Optional[datetime] = None,
        effective_date: Optional[datetime] = None,
        tags: Optional[List[str]] = None,
        file_url: Optional[str] = None,
        is_published: bool = False,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.title_id = title_id
        self.title_en = title_en
        self.content_id = content_id
        self.content_en = content_en
        self.summary_id = summary_id
        self.summary_en = summary_en
        self.document_type = DocumentType(document_type)
        self.category_id = category_id
        self.document_number = document_number
        self.publication_date = publication_date
        self.effective_date = effective_date
        self.tags = list(tags) if tags else []
        self.file_url = file_url
        self.is_published = is_published
        self.created_at = created_at or utcnow()
        self.updated_at = updated_at or self.created_at

    @classmethod
    def create_document(cls, **fields: Any) -> "LegalDocument":
        """Создание нового документа; created_at и updated_at совпадают"""
        for field in cls.REQUIRED_TEXT_FIELDS:
            require_text(field, fields.get(field))
        if fields.get("category_id") is None:
            raise ValidationError("category_id is required")
        document_type = parse_document_type(fields.get("document_type"))

        now = utcnow()
        return cls(
            id=None,
            title_id=fields["title_id"],
            title_en=fields["title_en"],
            content_id=fields["content_id"],
            content_en=fields["content_en"],
            document_type=document_type,
            category_id=fields["category_id"],
            summary_id=fields.get("summary_id"),
            summary_en=fields.get("summary_en"),
            document_number=fields.get("document_number"),
            publication_date=as_naive_utc(fields.get("publication_date")),
            effective_date=as_naive_utc(fields.get("effective_date")),
            tags=fields.get("tags") or [],
            file_url=fields.get("file_url"),
            is_published=bool(fields.get("is_published", False)),
            created_at=now,
            updated_at=now
        )

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        """Применение частичного обновления и обновление updated_at"""
        for field, value in changes.items():
            if field in self.REQUIRED_TEXT_FIELDS:
                value = require_text(field, value)
            elif field in self.NON_NULL_FIELDS:
                if value is None:
                    raise ValidationError(f"{field} cannot be null")
                if field == "document_type":
                    value = parse_document_type(value)
                elif field == "tags":
                    value = list(value)
            elif field not in self.NULLABLE_FIELDS:
                raise ValidationError(f"Unknown document field: {field}")
            elif field in ("publication_date", "effective_date"):
                value = as_naive_utc(value)
            setattr(self, field, value)
        self.touch()

    def touch(self) -> None:
        """updated_at строго возрастает даже при совпадении системного времени"""
        now = utcnow()
        if now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now

    def __eq__(self, other) -> bool:
        if not isinstance(other, LegalDocument):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return (
            f"LegalDocument(id={self.id}, title_id={self.title_id}, "
            f"type={self.document_type.value}, published={self.is_published})"
        )
