from sqlalchemy import JSON, Boolean, Column, DateTime, Enum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from legal_catalog.core.enums import DocumentType
from legal_catalog.db.base import Base


class LegalDocument(Base):
    __tablename__ = "legal_documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title_id = Column(Text, nullable=False)
    title_en = Column(Text, nullable=False)
    content_id = Column(Text, nullable=False)
    content_en = Column(Text, nullable=False)
    summary_id = Column(Text, nullable=True)
    summary_en = Column(Text, nullable=True)
    document_type = Column(
        Enum(DocumentType, name="document_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    document_number = Column(Text, nullable=True)
    publication_date = Column(DateTime, nullable=True)
    effective_date = Column(DateTime, nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    file_url = Column(Text, nullable=True)
    is_published = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    # Relationships
    category = relationship("Category", back_populates="documents")
