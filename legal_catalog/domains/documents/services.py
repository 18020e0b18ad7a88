import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from legal_catalog.core.enums import DocumentType, Language
from legal_catalog.core.exceptions import NotFoundError
from legal_catalog.db.repositories.category_repository import CategoryRepository
from legal_catalog.db.repositories.legal_document_repository import LegalDocumentRepository
from legal_catalog.domains.documents.entities import LegalDocument
from legal_catalog.domains.documents.localization import localize_document
from legal_catalog.domains.documents.schemas import (
    LegalDocumentCreate, LegalDocumentUpdate, LocalizedDocument
)

logger = logging.getLogger(__name__)


class LegalDocumentService:
    """Сервис для работы с правовыми документами"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.document_repository = LegalDocumentRepository(session)
        self.category_repository = CategoryRepository(session)

    async def create_document(self, document_data: LegalDocumentCreate) -> LegalDocument:
        """Создание нового документа в существующей категории"""
        document = LegalDocument.create_document(**document_data.model_dump())

        # Документ без существующей категории не сохраняется
        if not await self.category_repository.exists(document.category_id):
            raise NotFoundError("Category", document.category_id)

        created = await self.document_repository.create(document)
        logger.info(f"Created legal document {created.id} in category {created.category_id}")
        return created

    async def get_document(self, document_id: int, language: Language = Language.ID) -> LocalizedDocument:
        """Получение документа по id на выбранном языке"""
        found = await self.document_repository.get_with_category(document_id)

        if not found:
            raise NotFoundError("Legal document", document_id)

        document, category = found
        return localize_document(document, category, language)

    async def update_document(self, document_id: int, update_data: LegalDocumentUpdate) -> LegalDocument:
        """Частичное обновление документа; updated_at обновляется всегда"""
        document = await self.document_repository.get_by_id(document_id)

        if not document:
            raise NotFoundError("Legal document", document_id)

        changes = update_data.changes()

        if "category_id" in changes and not await self.category_repository.exists(changes["category_id"]):
            raise NotFoundError("Category", changes["category_id"])

        document.apply_changes(changes)

        updated = await self.document_repository.update(document)
        logger.info(f"Updated legal document {document_id}: {sorted(changes)}")
        return updated

    async def delete_document(self, document_id: int) -> bool:
        """Удаление документа. Для неизвестного id возвращает False"""
        deleted = await self.document_repository.delete(document_id)

        if deleted:
            logger.info(f"Deleted legal document {document_id}")

        return deleted

    async def list_by_category(self, category_id: int, language: Language = Language.ID) -> List[LocalizedDocument]:
        """Опубликованные документы категории"""
        rows = await self.document_repository.get_published(category_id=category_id)
        return [localize_document(document, category, language) for document, category in rows]

    async def list_by_type(self, document_type: DocumentType, language: Language = Language.ID) -> List[LocalizedDocument]:
        """Опубликованные документы заданного типа"""
        rows = await self.document_repository.get_published(document_type=document_type)
        return [localize_document(document, category, language) for document, category in rows]
