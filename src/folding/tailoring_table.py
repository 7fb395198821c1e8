"""
TailoringTable - per-locale overrides поверх дефолтной таблицы

Ключ - (locale key, code point), где locale key - первичный language
subtag ("tr-TR" → "tr"). Полная копия таблицы на каждую локаль не
хранится: локали отличаются от дефолта всего несколькими mappings.

Неизвестная локаль - НЕ ошибка: resolve_locale возвращает None и
используется только дефолтная таблица.

Источники данных:
- Встроенный tailoring-документ (folding/data/tailorings.json)
- Произвольный tailoring-документ (dict / JSON файл), валидируемый
  JSON Schema контрактом и TailoringDocument моделью
- Строки со статусом T из CaseFolding.txt
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from src.core.contracts import validate_tailoring_table
from src.core.domain.code_point import FoldSequence, validate_code_point, validate_fold_sequence
from src.core.domain.locale import DEFAULT_LOCALE, primary_subtag
from src.core.domain.tailoring_document import TailoringDocument
from src.folding.case_folding_file import (
    CaseFoldingEntry,
    CaseFoldingStatus,
    read_case_folding_file,
)

logger = logging.getLogger(__name__)

BUILTIN_TAILORINGS_PATH = Path(__file__).parent / "data" / "tailorings.json"

# Локали, к которым CaseFolding.txt относит статус T
TURKIC_LOCALES: Tuple[str, ...] = ("tr", "az")


class TailoringTable:
    """
    Immutable таблица locale-specific overrides.

    Example:
        >>> table = TailoringTable({"tr": {0x49: (0x131,)}})
        >>> table.lookup("tr", 0x49)
        (305,)
        >>> table.lookup("tr", 0x41) is None
        True
    """

    __slots__ = ("_tables",)

    def __init__(self, tailorings: Mapping[str, Mapping[int, Iterable[int]]]):
        """
        Args:
            tailorings: locale tag → (code point → fold sequence)

        Raises:
            TypeError / ValueError: Если entry не является валидным mapping
        """
        tables: Dict[str, Mapping[int, FoldSequence]] = {}
        for locale, mapping in tailorings.items():
            key = primary_subtag(locale)
            if key == DEFAULT_LOCALE:
                raise ValueError("tailoring for the default locale is not allowed")

            entries = dict(tables.get(key, {}))
            for source, target in mapping.items():
                validate_code_point(source, "tailoring source")
                entries[source] = validate_fold_sequence(
                    target, f"tailoring {key}/U+{source:04X}"
                )
            tables[key] = MappingProxyType(entries)

        self._tables = MappingProxyType(tables)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "TailoringTable":
        return cls({})

    @classmethod
    def from_document(cls, data: Dict[str, Any]) -> "TailoringTable":
        """
        Таблица из tailoring-документа.

        Raises:
            jsonschema.ValidationError: Если документ нарушает контракт
            pydantic.ValidationError: Если code points не являются scalar values
        """
        validate_tailoring_table(data)
        document = TailoringDocument.model_validate(data)
        return cls(document.tailorings)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "TailoringTable":
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        table = cls.from_document(data)
        logger.debug("Loaded tailorings from %s: locales=%s", path, table.locales)
        return table

    @classmethod
    def builtin(cls) -> "TailoringTable":
        return cls.from_json_file(BUILTIN_TAILORINGS_PATH)

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[CaseFoldingEntry],
        locales: Iterable[str] = TURKIC_LOCALES,
    ) -> "TailoringTable":
        """Таблица из строк CaseFolding.txt со статусом T."""
        turkic = {
            entry.code_point: entry.mapping
            for entry in entries
            if entry.status == CaseFoldingStatus.TURKIC
        }
        return cls({locale: turkic for locale in locales})

    @classmethod
    def from_case_folding_file(
        cls,
        path: Union[str, Path],
        locales: Iterable[str] = TURKIC_LOCALES,
    ) -> "TailoringTable":
        return cls.from_entries(read_case_folding_file(path), locales)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def resolve_locale(self, locale: Optional[str]) -> Optional[str]:
        """
        Ключ tailoring для тега локали или None (fallback на дефолт).
        """
        key = primary_subtag(locale)
        if key in self._tables:
            return key
        if key != DEFAULT_LOCALE:
            logger.debug("No tailoring for locale %r, using default folding", locale)
        return None

    def table_for(self, locale_key: Optional[str]) -> Optional[Mapping[int, FoldSequence]]:
        if locale_key is None:
            return None
        return self._tables.get(locale_key)

    def lookup(self, locale: Optional[str], code_point: int) -> Optional[FoldSequence]:
        """Override для (locale, code point) или None."""
        table = self._tables.get(primary_subtag(locale))
        if table is None:
            return None
        return table.get(code_point)

    @property
    def locales(self) -> Tuple[str, ...]:
        return tuple(sorted(self._tables))

    def __len__(self) -> int:
        return sum(len(table) for table in self._tables.values())

    def __contains__(self, locale: object) -> bool:
        return isinstance(locale, str) and primary_subtag(locale) in self._tables

    def __repr__(self) -> str:
        return f"TailoringTable(locales={self.locales})"
