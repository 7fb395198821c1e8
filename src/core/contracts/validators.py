"""
Контракт tailoring-документа

Tailoring-документ (per-locale overrides поверх дефолтной таблицы) до
разбора в TailoringDocument проверяется по JSON Schema
schema/tailoring_table.json. Схема описывает форму документа: hex-ключи,
длину fold-последовательностей, отсутствие лишних полей.
"""

import json
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

SCHEMA_DIR = Path(__file__).parent / "schema"

TAILORING_TABLE_SCHEMA = "tailoring_table"


class SchemaLoader:
    """
    Загрузчик JSON Schema из каталога пакета.

    Каждая схема читается с диска один раз и проходит meta-validation.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без расширения.

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если файл не является валидной Draft 2020-12 схемой
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


class TailoringTableValidator:
    """Проверка tailoring-документа по контракту tailoring_table."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        loader = loader if loader is not None else SchemaLoader()
        self.schema = loader.load_schema(TAILORING_TABLE_SCHEMA)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое нарушение контракта (наиболее релевантное)
        """
        error = best_match(self._validator.iter_errors(data))
        if error is not None:
            raise error


_lock = threading.Lock()
_validator: Optional[TailoringTableValidator] = None


def validate_tailoring_table(data: Dict[str, Any]) -> None:
    """
    Валидация tailoring-документа.

    Raises:
        ValidationError: Если документ не соответствует схеме
    """
    global _validator
    validator = _validator
    if validator is None:
        with _lock:
            if _validator is None:
                _validator = TailoringTableValidator()
            validator = _validator
    validator.validate(data)


__all__ = [
    "SchemaLoader",
    "TailoringTableValidator",
    "validate_tailoring_table",
    "ValidationError",
]
