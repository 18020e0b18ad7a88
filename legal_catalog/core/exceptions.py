class LegalCatalogError(Exception):
    """Базовая ошибка каталога"""


class ValidationError(LegalCatalogError):
    """Некорректные входные данные: пустое обязательное поле, неизвестное значение"""


class NotFoundError(LegalCatalogError):
    """Запись с указанным id не существует"""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class ConflictError(LegalCatalogError):
    """Операция заблокирована ссылающимися записями"""


class StoreError(LegalCatalogError):
    """Сбой хранилища"""
