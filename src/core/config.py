"""
ComparatorConfig - конфигурация Comparator

Immutable Pydantic модель. Значения нормализуются при создании:
- default_locale приводится к каноническому виду (normalize_locale)
- encoding приводится к каноническому имени и проверяется на поддержку
"""

from pydantic import BaseModel, Field, field_validator

from src.core.domain.locale import DEFAULT_LOCALE, normalize_locale
from src.text.decoders import canonical_encoding


class ComparatorConfig(BaseModel):
    """Параметры сравнения."""

    default_locale: str = Field(
        DEFAULT_LOCALE,
        description="Локаль, если ни вызов, ни операнды её не указали",
    )
    encoding: str = Field(
        "utf-8",
        description="Кодировка bytes-операндов (str операнды не декодируются)",
    )
    validate_tail: bool = Field(
        True,
        description="Дочитывать источники после решения, чтобы не маскировать MalformedEncoding",
    )

    model_config = {"frozen": True}

    @field_validator("default_locale")
    @classmethod
    def _normalize_locale(cls, value: str) -> str:
        return normalize_locale(value)

    @field_validator("encoding")
    @classmethod
    def _canonical_encoding(cls, value: str) -> str:
        # UnsupportedEncoding - ValueError, pydantic превращает его в ValidationError
        return canonical_encoding(value)
