from legal_catalog.db.models.category import Category
from legal_catalog.db.models.legal_document import DocumentType, LegalDocument

__all__ = [
    "Category",
    "LegalDocument",
    "DocumentType",
]
