from legal_catalog.db.repositories.category_repository import CategoryRepository
from legal_catalog.db.repositories.legal_document_repository import LegalDocumentRepository

__all__ = [
    "CategoryRepository",
    "LegalDocumentRepository",
]
