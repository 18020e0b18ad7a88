from legal_catalog.domains.documents.entities import LegalDocument, parse_document_type
from legal_catalog.domains.documents.schemas import (
    LegalDocumentBase, LegalDocumentCreate, LegalDocumentUpdate,
    LegalDocumentResponse, LocalizedDocument, DocumentSearchRequest,
    SearchResults, DeleteResponse
)
from legal_catalog.domains.documents.localization import localize_document, localize_category, pick
from legal_catalog.domains.documents.services import LegalDocumentService
from legal_catalog.domains.documents.search import DocumentSearchService

__all__ = [
    "LegalDocument", "parse_document_type",
    "LegalDocumentBase", "LegalDocumentCreate", "LegalDocumentUpdate",
    "LegalDocumentResponse", "LocalizedDocument", "DocumentSearchRequest",
    "SearchResults", "DeleteResponse",
    "localize_document", "localize_category", "pick",
    "LegalDocumentService", "DocumentSearchService"
]
