import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from legal_catalog.core.enums import Language
from legal_catalog.core.exceptions import ConflictError, NotFoundError
from legal_catalog.db.repositories.category_repository import CategoryRepository
from legal_catalog.db.repositories.legal_document_repository import LegalDocumentRepository
from legal_catalog.domains.categories.entities import Category
from legal_catalog.domains.categories.schemas import (
    CategoryCreate, CategoryUpdate, LocalizedCategoryResponse
)

logger = logging.getLogger(__name__)


class CategoryService:
    """Сервис для работы с категориями"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.category_repository = CategoryRepository(session)
        self.document_repository = LegalDocumentRepository(session)

    async def create_category(self, category_data: CategoryCreate) -> Category:
        """Создание новой категории"""
        category = Category.create_category(
            name_id=category_data.name_id,
            name_en=category_data.name_en,
            description_id=category_data.description_id,
            description_en=category_data.description_en
        )

        created = await self.category_repository.create(category)
        logger.info(f"Created category {created.id} ({created.name_id})")
        return created

    async def list_categories(self) -> List[Category]:
        """Все категории, отсортированные по name_id"""
        return await self.category_repository.get_all()

    async def list_localized_categories(self, language: Language = Language.ID) -> List[LocalizedCategoryResponse]:
        """Категории на выбранном языке (для форм и фильтров клиента)"""
        from legal_catalog.domains.documents.localization import localize_category

        categories = await self.category_repository.get_all()
        return [localize_category(category, language) for category in categories]

    async def get_category(self, category_id: int) -> Category:
        """Получение категории по id"""
        category = await self.category_repository.get_by_id(category_id)

        if not category:
            raise NotFoundError("Category", category_id)

        return category

    async def update_category(self, category_id: int, update_data: CategoryUpdate) -> Category:
        """Частичное обновление категории"""
        category = await self.get_category(category_id)

        # Без переданных полей возвращаем текущую запись
        if not category.apply_changes(update_data.changes()):
            return category

        updated = await self.category_repository.update(category)
        logger.info(f"Updated category {category_id}")
        return updated

    async def delete_category(self, category_id: int) -> bool:
        """Удаление категории, на которую не ссылается ни один документ"""
        if not await self.category_repository.exists(category_id):
            raise NotFoundError("Category", category_id)

        document_count = await self.document_repository.count_by_category(category_id)
        if document_count > 0:
            logger.info(f"Refused to delete category {category_id}: {document_count} documents reference it")
            raise ConflictError(
                f"Cannot delete category with id {category_id}. "
                f"Category has {document_count} associated documents. "
                "Please reassign or delete the documents first."
            )

        await self.category_repository.delete(category_id)
        logger.info(f"Deleted category {category_id}")
        return True
