from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from legal_catalog.core.db import get_db
from legal_catalog.core.enums import DocumentType, Language
from legal_catalog.domains.documents.schemas import (
    LegalDocumentCreate, LegalDocumentUpdate, LegalDocumentResponse,
    LocalizedDocument, DocumentSearchRequest, SearchResults, DeleteResponse
)
from legal_catalog.domains.documents.search import DocumentSearchService
from legal_catalog.domains.documents.services import LegalDocumentService

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("/", response_model=LegalDocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    document_data: LegalDocumentCreate,
    db: AsyncSession = Depends(get_db)
):
    """Создание нового документа"""
    document = await LegalDocumentService(db).create_document(document_data)
    return LegalDocumentResponse.model_validate(document)


@router.post("/search", response_model=SearchResults)
async def search_documents(
    search_request: DocumentSearchRequest,
    db: AsyncSession = Depends(get_db)
):
    """Поиск документов"""
    return await DocumentSearchService(db).search(search_request)


@router.get("/by-category/{category_id}", response_model=List[LocalizedDocument])
async def get_documents_by_category(
    category_id: int,
    language: Language = Query(Language.ID),
    db: AsyncSession = Depends(get_db)
):
    """Опубликованные документы категории"""
    return await LegalDocumentService(db).list_by_category(category_id, language)


@router.get("/by-type/{document_type}", response_model=List[LocalizedDocument])
async def get_documents_by_type(
    document_type: DocumentType,
    language: Language = Query(Language.ID),
    db: AsyncSession = Depends(get_db)
):
    """Опубликованные документы заданного типа"""
    return await LegalDocumentService(db).list_by_type(document_type, language)


@router.get("/{document_id}", response_model=LocalizedDocument)
async def get_document(
    document_id: int,
    language: Language = Query(Language.ID),
    db: AsyncSession = Depends(get_db)
):
    """Получение документа по id на выбранном языке"""
    return await LegalDocumentService(db).get_document(document_id, language)


@router.put("/{document_id}", response_model=LegalDocumentResponse)
async def update_document(
    document_id: int,
    update_data: LegalDocumentUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Частичное обновление документа"""
    document = await LegalDocumentService(db).update_document(document_id, update_data)
    return LegalDocumentResponse.model_validate(document)


@router.delete("/{document_id}", response_model=DeleteResponse)
async def delete_document(
    document_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Удаление документа; неизвестный id не является ошибкой"""
    deleted = await LegalDocumentService(db).delete_document(document_id)
    return DeleteResponse(deleted=deleted)
