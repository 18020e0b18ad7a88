import enum


class DocumentType(str, enum.Enum):
    ARTICLE = "article"
    LAW = "law"
    DECISION = "decision"


class Language(str, enum.Enum):
    """Язык представления: индонезийский (по умолчанию) или английский"""
    ID = "id"
    EN = "en"
