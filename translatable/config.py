from typing import Any

from pydantic import Field, ImportString, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _strip_wrapping_quotes(value: str) -> str:
    text = value.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in {'"', "'"}:
        return text[1:-1].strip()
    return text


class Settings(BaseSettings):
    database_dsn: str = "sqlite+pysqlite:///:memory:"
    sql_echo: bool = False
    default_locale: str = "en_US"
    # Resolved to the class itself on load, e.g. "myapp.models.ArticleTranslation".
    default_translation_class: ImportString = Field(
        "translatable.entity.translation.Translation",
        validate_default=True,
    )
    # Disable to always query the store instead of scanning the session first.
    identity_map_lookup: bool = True

    @field_validator("default_locale", mode="before")
    @classmethod
    def _normalize_default_locale(cls, value: Any) -> str:
        if value is None:
            return "en_US"
        text = _strip_wrapping_quotes(str(value))
        return text or "en_US"

    @field_validator("database_dsn", mode="before")
    @classmethod
    def _normalize_dsn(cls, value: Any) -> str:
        if value is None:
            return ""
        return _strip_wrapping_quotes(str(value))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TRANSLATABLE_",
        extra="ignore",
    )


settings = Settings()
