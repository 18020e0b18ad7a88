from legal_catalog.domains.categories.entities import Category
from legal_catalog.domains.categories.schemas import (
    CategoryBase, CategoryCreate, CategoryUpdate, CategoryResponse,
    LocalizedCategoryResponse
)
from legal_catalog.domains.categories.services import CategoryService

__all__ = [
    "Category",
    "CategoryBase", "CategoryCreate", "CategoryUpdate", "CategoryResponse",
    "LocalizedCategoryResponse",
    "CategoryService"
]
