"""
Общие фикстуры: in-memory SQLite (aiosqlite) на каждый тест,
сессия для сервисов и HTTP-клиент с подменой get_db.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from legal_catalog.core.db import get_db
from legal_catalog.db import models  # noqa: F401
from legal_catalog.db.base import Base
from legal_catalog.domains.categories.schemas import CategoryCreate
from legal_catalog.domains.categories.services import CategoryService
from legal_catalog.domains.documents.schemas import LegalDocumentCreate
from legal_catalog.domains.documents.services import LegalDocumentService
from legal_catalog.main import app


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as db:
            yield db

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def category_service(session):
    return CategoryService(session)


@pytest.fixture
def document_service(session):
    return LegalDocumentService(session)


@pytest_asyncio.fixture
async def criminal_law(category_service):
    return await category_service.create_category(CategoryCreate(
        name_id="Hukum Pidana",
        name_en="Criminal Law",
        description_id="Kategori hukum pidana",
        description_en="Criminal law category",
    ))


@pytest.fixture
def document_data():
    """Фабрика входных данных документа с переопределяемыми полями"""
    def make(category_id: int, **overrides) -> LegalDocumentCreate:
        fields = {
            "title_id": "Undang-Undang Korupsi",
            "title_en": "Corruption Law",
            "content_id": "Isi undang-undang tentang korupsi dan tindak pidana korupsi",
            "content_en": "Content about corruption law and criminal corruption acts",
            "summary_id": "Ringkasan UU Korupsi",
            "summary_en": "Corruption Law Summary",
            "document_type": "law",
            "category_id": category_id,
            "document_number": "UU No. 31 Tahun 1999",
            "tags": ["korupsi", "pidana", "hukum"],
            "is_published": True,
        }
        fields.update(overrides)
        return LegalDocumentCreate(**fields)

    return make


@pytest_asyncio.fixture
async def corruption_documents(document_service, document_data, criminal_law):
    """Три документа: закон и статья опубликованы, решение суда нет"""
    law = await document_service.create_document(document_data(criminal_law.id))
    article = await document_service.create_document(document_data(
        criminal_law.id,
        title_id="Artikel Pencegahan Korupsi",
        title_en="Corruption Prevention Article",
        content_id="Artikel tentang cara mencegah korupsi di Indonesia",
        content_en="Article about preventing corruption in Indonesia",
        summary_id="Cara mencegah korupsi",
        summary_en="How to prevent corruption",
        document_type="article",
        document_number=None,
        tags=["korupsi", "pencegahan"],
    ))
    decision = await document_service.create_document(document_data(
        criminal_law.id,
        title_id="Putusan Mahkamah Agung",
        title_en="Supreme Court Decision",
        content_id="Putusan MA tentang kasus korupsi besar",
        content_en="Supreme Court decision on major corruption case",
        summary_id=None,
        summary_en=None,
        document_type="decision",
        document_number="Putusan No. 123/2023",
        tags=["putusan", "mahkamah", "korupsi"],
        is_published=False,
    ))
    return law, article, decision
