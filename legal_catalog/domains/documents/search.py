import logging

from sqlalchemy.ext.asyncio import AsyncSession

from legal_catalog.db.repositories.legal_document_repository import LegalDocumentRepository
from legal_catalog.domains.documents.localization import localize_document
from legal_catalog.domains.documents.schemas import DocumentSearchRequest, SearchResults

logger = logging.getLogger(__name__)


class DocumentSearchService:
    """Поиск и фильтрация документов с пагинацией и локализацией"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.document_repository = LegalDocumentRepository(session)

    async def search(self, search_request: DocumentSearchRequest) -> SearchResults:
        """Поиск документов.

        Все заданные фильтры объединяются через AND; теги сравниваются по OR.
        total_count считается до пагинации, has_more = offset + limit < total_count.
        """
        conditions = self.document_repository.search_conditions(
            query=search_request.query,
            language=search_request.language,
            document_type=search_request.document_type,
            category_id=search_request.category_id,
            tags=search_request.tags,
            published_only=search_request.published_only
        )

        # AsyncSession не допускает параллельных запросов, выполняем по очереди
        total_count = await self.document_repository.count_search_results(conditions)
        rows = await self.document_repository.search(
            conditions,
            limit=search_request.limit,
            offset=search_request.offset
        )

        logger.debug(
            f"Search query={search_request.query!r} language={search_request.language.value} "
            f"matched {total_count}, returned {len(rows)}"
        )

        return SearchResults(
            documents=[
                localize_document(document, category, search_request.language)
                for document, category in rows
            ],
            total_count=total_count,
            has_more=search_request.offset + search_request.limit < total_count
        )
