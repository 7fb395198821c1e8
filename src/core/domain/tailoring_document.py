"""
TailoringDocument - модель tailoring-документа

Immutable Pydantic модель, представляющая разобранный tailoring-документ.
Полная совместимость с JSON Schema (core/contracts/schema/tailoring_table.json):
схема проверяет форму, модель - семантику (scalar values, длина expansion).
"""

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from src.core.domain.code_point import (
    FoldSequence,
    parse_code_point,
    validate_fold_sequence,
)
from src.core.domain.locale import primary_subtag


class TailoringDocument(BaseModel):
    """Набор per-locale overrides."""

    schema_version: str = Field(..., description="Версия контракта")
    description: Optional[str] = Field(None, description="Происхождение данных")
    tailorings: Dict[str, Dict[int, FoldSequence]] = Field(
        ..., description="locale key → (code point → fold sequence)"
    )

    model_config = {"frozen": True}

    @field_validator("tailorings", mode="before")
    @classmethod
    def _parse_code_points(cls, value):
        if not isinstance(value, dict):
            return value

        parsed = {}
        for locale, mapping in value.items():
            if not isinstance(mapping, dict):
                return value
            entries: Dict[int, Tuple[int, ...]] = {}
            for raw_source, raw_target in mapping.items():
                source = parse_code_point(raw_source) if isinstance(raw_source, str) else raw_source
                target = tuple(
                    parse_code_point(item) if isinstance(item, str) else item
                    for item in raw_target
                )
                entries[source] = validate_fold_sequence(
                    target, f"tailoring {locale}/{source:04X}"
                )
            parsed[primary_subtag(locale)] = entries
        return parsed
