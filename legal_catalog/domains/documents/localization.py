from typing import Optional, TypeVar

from legal_catalog.domains.categories.entities import Category
from legal_catalog.domains.categories.schemas import LocalizedCategoryResponse
from legal_catalog.core.enums import Language
from legal_catalog.domains.documents.entities import LegalDocument
from legal_catalog.domains.documents.schemas import LocalizedDocument

T = TypeVar("T")


def pick(language: Language, value_id: T, value_en: T) -> T:
    """Выбор значения поля для языка; индонезийский по умолчанию"""
    return value_en if language == Language.EN else value_id


def localize_document(
    document: LegalDocument,
    category: Category,
    language: Language = Language.ID
) -> LocalizedDocument:
    """Проекция двуязычного документа на один язык.

    Локализуются только title, content, summary и category_name; остальные
    поля от языка не зависят и передаются как есть.
    """
    return LocalizedDocument(
        id=document.id,
        title=pick(language, document.title_id, document.title_en),
        content=pick(language, document.content_id, document.content_en),
        summary=pick(language, document.summary_id, document.summary_en),
        document_type=document.document_type,
        category_id=document.category_id,
        category_name=pick(language, category.name_id, category.name_en),
        document_number=document.document_number,
        publication_date=document.publication_date,
        effective_date=document.effective_date,
        tags=list(document.tags),
        file_url=document.file_url,
        is_published=document.is_published,
        created_at=document.created_at,
        updated_at=document.updated_at
    )


def localize_category(category: Category, language: Language = Language.ID) -> LocalizedCategoryResponse:
    description: Optional[str] = pick(language, category.description_id, category.description_en)
    return LocalizedCategoryResponse(
        id=category.id,
        name=pick(language, category.name_id, category.name_en),
        description=description,
        created_at=category.created_at
    )
