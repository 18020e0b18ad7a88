from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from legal_catalog.core.db import get_db
from legal_catalog.core.enums import Language
from legal_catalog.domains.categories.schemas import (
    CategoryCreate, CategoryUpdate, CategoryResponse, LocalizedCategoryResponse
)
from legal_catalog.domains.categories.services import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("/", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryCreate,
    db: AsyncSession = Depends(get_db)
):
    """Создание новой категории"""
    category = await CategoryService(db).create_category(category_data)
    return CategoryResponse.model_validate(category)


@router.get("/", response_model=List[CategoryResponse])
async def get_categories(db: AsyncSession = Depends(get_db)):
    """Список категорий по возрастанию индонезийского названия"""
    categories = await CategoryService(db).list_categories()
    return [CategoryResponse.model_validate(category) for category in categories]


@router.get("/localized", response_model=List[LocalizedCategoryResponse])
async def get_localized_categories(
    language: Language = Query(Language.ID),
    db: AsyncSession = Depends(get_db)
):
    """Список категорий на выбранном языке"""
    return await CategoryService(db).list_localized_categories(language)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Получение категории по id"""
    category = await CategoryService(db).get_category(category_id)
    return CategoryResponse.model_validate(category)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    update_data: CategoryUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Частичное обновление категории"""
    category = await CategoryService(db).update_category(category_id, update_data)
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Удаление категории без документов"""
    await CategoryService(db).delete_category(category_id)
