from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional
from datetime import datetime


class CategoryBase(BaseModel):
    """Базовая схема категории"""
    name_id: str = Field(..., min_length=1)
    name_en: str = Field(..., min_length=1)
    description_id: Optional[str] = None
    description_en: Optional[str] = None

    @field_validator('name_id', 'name_en')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Category name cannot be empty')
        return v


class CategoryCreate(CategoryBase):
    """Схема для создания категории"""
    pass


class CategoryUpdate(BaseModel):
    """Схема для частичного обновления категории.

    Применяются только переданные поля (model_fields_set); явный null
    допустим только для описаний.
    """
    name_id: Optional[str] = Field(None, min_length=1)
    name_en: Optional[str] = Field(None, min_length=1)
    description_id: Optional[str] = None
    description_en: Optional[str] = None

    @field_validator('name_id', 'name_en')
    @classmethod
    def validate_name(cls, v):
        if v is None:
            raise ValueError('Category name cannot be null')
        if not v.strip():
            raise ValueError('Category name cannot be empty')
        return v

    def changes(self) -> dict:
        """Только явно переданные поля"""
        return self.model_dump(exclude_unset=True)


class CategoryResponse(CategoryBase):
    """Схема для ответа с данными категории"""
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LocalizedCategoryResponse(BaseModel):
    """Категория на одном языке"""
    id: int
    name: str
    description: Optional[str]
    created_at: datetime
