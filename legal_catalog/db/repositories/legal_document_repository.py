from typing import Optional, List, Sequence, Tuple, TYPE_CHECKING
from sqlalchemy import cast, exists, select, update, delete, func, or_
from sqlalchemy.dialects.postgresql import JSONB

from legal_catalog.core.enums import DocumentType, Language
from legal_catalog.db.models.category import Category as CategoryModel
from legal_catalog.db.models.legal_document import LegalDocument as LegalDocumentModel
from legal_catalog.db.repositories.base import BaseRepository
from legal_catalog.db.repositories.category_repository import CategoryRepository

if TYPE_CHECKING:
    from legal_catalog.domains.categories.entities import Category
    from legal_catalog.domains.documents.entities import LegalDocument

DocumentWithCategory = Tuple["LegalDocument", "Category"]


class LegalDocumentRepository(BaseRepository):
    """Репозиторий для работы с правовыми документами"""

    async def create(self, document: "LegalDocument") -> "LegalDocument":
        """Создание нового документа"""
        db_document = LegalDocumentModel(**self._values(document))

        self.session.add(db_document)
        await self._commit(refresh=db_document)
        return self._to_domain(db_document)

    async def get_by_id(self, document_id: int) -> Optional["LegalDocument"]:
        """Получение документа по id"""
        result = await self._execute(
            select(LegalDocumentModel)
            .where(LegalDocumentModel.id == document_id)
            .execution_options(populate_existing=True)
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def get_with_category(self, document_id: int) -> Optional[DocumentWithCategory]:
        """Получение документа вместе с категорией-владельцем"""
        result = await self._execute(
            self._joined_select().where(LegalDocumentModel.id == document_id)
        )
        row = result.first()
        return self._row_to_domain(row) if row else None

    async def update(self, document: "LegalDocument") -> "LegalDocument":
        """Обновление документа"""
        stmt = (
            update(LegalDocumentModel)
            .where(LegalDocumentModel.id == document.id)
            .values(**self._values(document))
        )

        await self._execute(stmt)
        await self._commit()

        return await self.get_by_id(document.id)

    async def delete(self, document_id: int) -> bool:
        """Удаление документа"""
        result = await self._execute(
            delete(LegalDocumentModel).where(LegalDocumentModel.id == document_id)
        )
        await self._commit()
        return result.rowcount > 0

    async def count_by_category(self, category_id: int) -> int:
        """Подсчет документов, ссылающихся на категорию"""
        result = await self._execute(
            select(func.count(LegalDocumentModel.id))
            .where(LegalDocumentModel.category_id == category_id)
        )
        return result.scalar()

    async def get_published(
        self,
        category_id: Optional[int] = None,
        document_type: Optional[DocumentType] = None
    ) -> List[DocumentWithCategory]:
        """Опубликованные документы категории и/или типа"""
        stmt = self._joined_select().where(LegalDocumentModel.is_published.is_(True))
        if category_id is not None:
            stmt = stmt.where(LegalDocumentModel.category_id == category_id)
        if document_type is not None:
            stmt = stmt.where(LegalDocumentModel.document_type == document_type)

        result = await self._execute(stmt.order_by(LegalDocumentModel.id.asc()))
        return [self._row_to_domain(row) for row in result.all()]

    def search_conditions(
        self,
        query: Optional[str] = None,
        language: Language = Language.ID,
        document_type: Optional[DocumentType] = None,
        category_id: Optional[int] = None,
        tags: Optional[Sequence[str]] = None,
        published_only: bool = True
    ) -> list:
        """Условия поиска; все они объединяются через AND"""
        conditions = []

        if published_only:
            conditions.append(LegalDocumentModel.is_published.is_(True))

        if document_type is not None:
            conditions.append(LegalDocumentModel.document_type == document_type)

        if category_id is not None:
            conditions.append(LegalDocumentModel.category_id == category_id)

        # Ищем только в полях выбранного языка
        if query:
            if language == Language.EN:
                title, content = LegalDocumentModel.title_en, LegalDocumentModel.content_en
            else:
                title, content = LegalDocumentModel.title_id, LegalDocumentModel.content_id
            conditions.append(or_(
                title.icontains(query, autoescape=True),
                content.icontains(query, autoescape=True)
            ))

        # Достаточно совпадения хотя бы одного тега
        if tags:
            conditions.append(or_(*[self._tag_condition(tag) for tag in tags]))

        return conditions

    async def search(self, conditions: list, limit: int = 20, offset: int = 0) -> List[DocumentWithCategory]:
        """Страница результатов поиска"""
        result = await self._execute(
            self._joined_select()
            .where(*conditions)
            .order_by(LegalDocumentModel.id.asc())
            .offset(offset)
            .limit(limit)
        )
        return [self._row_to_domain(row) for row in result.all()]

    async def count_search_results(self, conditions: list) -> int:
        """Подсчет результатов поиска без учета пагинации"""
        result = await self._execute(
            select(func.count(LegalDocumentModel.id))
            .select_from(LegalDocumentModel)
            .join(CategoryModel, LegalDocumentModel.category_id == CategoryModel.id)
            .where(*conditions)
        )
        return result.scalar()

    def _tag_condition(self, tag: str):
        if self.dialect_name == "postgresql":
            return cast(LegalDocumentModel.tags, JSONB).contains([tag])
        # Сравнение с каждым элементом JSON-массива целиком
        elements = func.json_each(LegalDocumentModel.tags).table_valued("value")
        return exists(select(1).select_from(elements).where(elements.c.value == tag))

    def _joined_select(self):
        return select(LegalDocumentModel, CategoryModel).join(
            CategoryModel, LegalDocumentModel.category_id == CategoryModel.id
        )

    def _values(self, document: "LegalDocument") -> dict:
        return {
            "title_id": document.title_id,
            "title_en": document.title_en,
            "content_id": document.content_id,
            "content_en": document.content_en,
            "summary_id": document.summary_id,
            "summary_en": document.summary_en,
            "document_type": document.document_type,
            "category_id": document.category_id,
            "document_number": document.document_number,
            "publication_date": document.publication_date,
            "effective_date": document.effective_date,
            "tags": list(document.tags),
            "file_url": document.file_url,
            "is_published": document.is_published,
            "created_at": document.created_at,
            "updated_at": document.updated_at,
        }

    def _row_to_domain(self, row) -> DocumentWithCategory:
        db_document, db_category = row
        return self._to_domain(db_document), CategoryRepository(self.session)._to_domain(db_category)

    def _to_domain(self, db_document: LegalDocumentModel) -> "LegalDocument":
        """Преобразование модели БД в доменную сущность"""
        from legal_catalog.domains.documents.entities import LegalDocument

        return LegalDocument(
            id=db_document.id,
            title_id=db_document.title_id,
            title_en=db_document.title_en,
            content_id=db_document.content_id,
            content_en=db_document.content_en,
            summary_id=db_document.summary_id,
            summary_en=db_document.summary_en,
            document_type=db_document.document_type,
            category_id=db_document.category_id,
            document_number=db_document.document_number,
            publication_date=db_document.publication_date,
            effective_date=db_document.effective_date,
            tags=db_document.tags or [],
            file_url=db_document.file_url,
            is_published=db_document.is_published,
            created_at=db_document.created_at,
            updated_at=db_document.updated_at
        )
