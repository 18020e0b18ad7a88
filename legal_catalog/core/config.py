from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./legal_catalog.db"
    database_echo: bool = False

    log_level: str = "INFO"

    # Для dev-баз можно создавать схему без миграций
    auto_create_schema: bool = False

    cors_origins: List[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
