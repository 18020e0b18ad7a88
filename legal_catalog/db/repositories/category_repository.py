from typing import Optional, List, TYPE_CHECKING
from sqlalchemy import select, update, delete

from legal_catalog.db.models.category import Category as CategoryModel
from legal_catalog.db.repositories.base import BaseRepository

if TYPE_CHECKING:
    from legal_catalog.domains.categories.entities import Category


class CategoryRepository(BaseRepository):
    """Репозиторий для работы с категориями"""

    async def create(self, category: "Category") -> "Category":
        """Создание новой категории"""
        db_category = CategoryModel(
            name_id=category.name_id,
            name_en=category.name_en,
            description_id=category.description_id,
            description_en=category.description_en,
            created_at=category.created_at
        )

        self.session.add(db_category)
        await self._commit(refresh=db_category)
        return self._to_domain(db_category)

    async def get_by_id(self, category_id: int) -> Optional["Category"]:
        """Получение категории по id"""
        result = await self._execute(
            select(CategoryModel).where(CategoryModel.id == category_id)
            .execution_options(populate_existing=True)
        )
        db_category = result.scalar_one_or_none()
        return self._to_domain(db_category) if db_category else None

    async def exists(self, category_id: int) -> bool:
        """Проверка существования категории"""
        result = await self._execute(
            select(CategoryModel.id).where(CategoryModel.id == category_id)
        )
        return result.scalar_one_or_none() is not None

    async def get_all(self) -> List["Category"]:
        """Все категории по возрастанию name_id"""
        result = await self._execute(
            select(CategoryModel).order_by(CategoryModel.name_id.asc(), CategoryModel.id.asc())
        )
        return [self._to_domain(c) for c in result.scalars().all()]

    async def update(self, category: "Category") -> "Category":
        """Обновление категории"""
        stmt = (
            update(CategoryModel)
            .where(CategoryModel.id == category.id)
            .values(
                name_id=category.name_id,
                name_en=category.name_en,
                description_id=category.description_id,
                description_en=category.description_en
            )
        )

        await self._execute(stmt)
        await self._commit()

        return await self.get_by_id(category.id)

    async def delete(self, category_id: int) -> bool:
        """Удаление категории"""
        result = await self._execute(delete(CategoryModel).where(CategoryModel.id == category_id))
        await self._commit()
        return result.rowcount > 0

    def _to_domain(self, db_category: CategoryModel) -> "Category":
        """Преобразование модели БД в доменную сущность"""
        from legal_catalog.domains.categories.entities import Category

        return Category(
            id=db_category.id,
            name_id=db_category.name_id,
            name_en=db_category.name_en,
            description_id=db_category.description_id,
            description_en=db_category.description_en,
            created_at=db_category.created_at
        )
