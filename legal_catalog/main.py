import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from legal_catalog.api.http.health import router as health_router
from legal_catalog.api.http.categories import router as categories_router
from legal_catalog.api.http.documents import router as documents_router
from legal_catalog.core.config import settings
from legal_catalog.core.db import engine
from legal_catalog.core.exceptions import (
    ConflictError, LegalCatalogError, NotFoundError, StoreError, ValidationError
)
from legal_catalog.core.logging import configure_logging
from legal_catalog.db.base import Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    if settings.auto_create_schema:
        # Импорт моделей регистрирует таблицы в metadata
        import legal_catalog.db.models  # noqa: F401

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema created")
    yield
    await engine.dispose()


app = FastAPI(
    title="Legal Catalog",
    description="Двуязычный (индонезийский/английский) каталог правовых документов",
    version="1.0.0",
    lifespan=lifespan
)

# Настройка CORS для работы с frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS = {
    ValidationError: 422,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


@app.exception_handler(LegalCatalogError)
async def catalog_error_handler(request: Request, exc: LegalCatalogError):
    """Перевод доменных ошибок в HTTP-ответы"""
    if isinstance(exc, StoreError):
        # Детали сбоя уже записаны в лог репозиторием
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal storage error"}
        )

    status_code = ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


# Подключаем роутеры
app.include_router(health_router)
app.include_router(categories_router)
app.include_router(documents_router)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": "Legal Catalog API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }
