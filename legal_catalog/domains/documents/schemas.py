from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional, List
from datetime import datetime

from legal_catalog.core.enums import DocumentType, Language


class LegalDocumentBase(BaseModel):
    """Базовая схема правового документа"""
    title_id: str = Field(..., min_length=1)
    title_en: str = Field(..., min_length=1)
    content_id: str = Field(..., min_length=1)
    content_en: str = Field(..., min_length=1)
    summary_id: Optional[str] = None
    summary_en: Optional[str] = None
    document_type: DocumentType
    category_id: int
    document_number: Optional[str] = None
    publication_date: Optional[datetime] = None
    effective_date: Optional[datetime] = None
    tags: List[str] = Field(default_factory=list)
    file_url: Optional[str] = None
    is_published: bool = False

    @field_validator('title_id', 'title_en', 'content_id', 'content_en')
    @classmethod
    def validate_required_text(cls, v):
        if not v.strip():
            raise ValueError('Title and content cannot be empty')
        return v


class LegalDocumentCreate(LegalDocumentBase):
    """Схема для создания документа"""
    pass


class LegalDocumentUpdate(BaseModel):
    """Схема для частичного обновления документа.

    Не переданное поле не меняется; явный null обнуляет nullable-поле.
    """
    title_id: Optional[str] = Field(None, min_length=1)
    title_en: Optional[str] = Field(None, min_length=1)
    content_id: Optional[str] = Field(None, min_length=1)
    content_en: Optional[str] = Field(None, min_length=1)
    summary_id: Optional[str] = None
    summary_en: Optional[str] = None
    document_type: Optional[DocumentType] = None
    category_id: Optional[int] = None
    document_number: Optional[str] = None
    publication_date: Optional[datetime] = None
    effective_date: Optional[datetime] = None
    tags: Optional[List[str]] = None
    file_url: Optional[str] = None
    is_published: Optional[bool] = None

    @field_validator('title_id', 'title_en', 'content_id', 'content_en')
    @classmethod
    def validate_required_text(cls, v):
        if v is None:
            raise ValueError('Title and content cannot be null')
        if not v.strip():
            raise ValueError('Title and content cannot be empty')
        return v

    @field_validator('document_type', 'category_id', 'tags', 'is_published')
    @classmethod
    def validate_not_null(cls, v):
        if v is None:
            raise ValueError('Field cannot be null')
        return v

    def changes(self) -> dict:
        """Только явно переданные поля"""
        return self.model_dump(exclude_unset=True)


class LegalDocumentResponse(LegalDocumentBase):
    """Схема для ответа с двуязычными данными документа"""
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LocalizedDocument(BaseModel):
    """Документ на одном языке"""
    id: int
    title: str
    content: str
    summary: Optional[str]
    document_type: DocumentType
    category_id: int
    category_name: str
    document_number: Optional[str]
    publication_date: Optional[datetime]
    effective_date: Optional[datetime]
    tags: List[str]
    file_url: Optional[str]
    is_published: bool
    created_at: datetime
    updated_at: datetime


class DocumentSearchRequest(BaseModel):
    """Схема для поиска документов"""
    query: Optional[str] = None
    document_type: Optional[DocumentType] = None
    category_id: Optional[int] = None
    language: Language = Language.ID
    tags: Optional[List[str]] = None
    published_only: bool = True
    limit: int = Field(20, gt=0)
    offset: int = Field(0, ge=0)

    @field_validator('query')
    @classmethod
    def validate_query(cls, v):
        # Пустой запрос не ограничивает выборку
        if v is None or not v.strip():
            return None
        return v.strip()


class SearchResults(BaseModel):
    """Схема для ответа с результатами поиска"""
    documents: List[LocalizedDocument]
    total_count: int
    has_more: bool


class DeleteResponse(BaseModel):
    deleted: bool
