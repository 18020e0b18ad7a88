from sqlalchemy import Column, DateTime, Integer, Text
from sqlalchemy.orm import relationship

from legal_catalog.db.base import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name_id = Column(Text, nullable=False)
    name_en = Column(Text, nullable=False)
    description_id = Column(Text, nullable=True)
    description_en = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False)

    # Relationships
    documents = relationship("LegalDocument", back_populates="category")
