"""
FoldingTable - дефолтная (локаль-нейтральная) таблица full case folding

Представление: code point → tuple из 1..MAX_FOLD_EXPANSION code points.
Храним только не-identity entries; всё остальное сворачивается само в себя.
Таблица неизменяема после конструирования: lookup безопасен из любого
количества потоков без блокировок.

Встроенные данные берутся из Unicode database интерпретатора:
str.casefold реализует full case folding (статусы C+F CaseFolding.txt).
"""

import logging
import sys
import unicodedata
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, Union

from src.core.domain.code_point import (
    MAX_CODE_POINT,
    SURROGATE_MAX,
    SURROGATE_MIN,
    FoldSequence,
    validate_code_point,
    validate_fold_sequence,
)
from src.folding.case_folding_file import (
    FULL_FOLDING_STATUSES,
    CaseFoldingEntry,
    read_case_folding_file,
)

logger = logging.getLogger(__name__)


class FoldingTable:
    """
    Immutable таблица case folding.

    Example:
        >>> table = FoldingTable({0xDF: (0x73, 0x73)})
        >>> table.lookup(0xDF)
        (115, 115)
        >>> table.lookup(0x61)
        (97,)
    """

    __slots__ = ("_entries", "_unicode_version")

    def __init__(
        self,
        entries: Mapping[int, Iterable[int]],
        unicode_version: Optional[str] = None,
    ):
        """
        Args:
            entries: code point → fold sequence (identity entries отбрасываются)
            unicode_version: Версия Unicode данных (для диагностики)

        Raises:
            TypeError / ValueError: Если entry не является валидным mapping
        """
        validated = {}
        for source, target in entries.items():
            validate_code_point(source, "folding source")
            sequence = validate_fold_sequence(target, f"folding of U+{source:04X}")
            if sequence != (source,):
                validated[source] = sequence

        self._entries = MappingProxyType(validated)
        self._unicode_version = unicode_version

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_unicode_database(cls) -> "FoldingTable":
        """Таблица full case folding из Unicode database интерпретатора."""
        entries = {}
        for code_point in range(MAX_CODE_POINT + 1):
            if SURROGATE_MIN <= code_point <= SURROGATE_MAX:
                continue
            char = chr(code_point)
            folded = char.casefold()
            if folded != char:
                entries[code_point] = tuple(map(ord, folded))

        table = cls(entries, unicode_version=unicodedata.unidata_version)
        logger.debug(
            "Built folding table from unicodedata %s (python %s): %d entries",
            table.unicode_version,
            sys.version.split()[0],
            len(table),
        )
        return table

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[CaseFoldingEntry],
        unicode_version: Optional[str] = None,
    ) -> "FoldingTable":
        """Таблица из разобранных строк CaseFolding.txt (статусы C и F)."""
        return cls(
            {
                entry.code_point: entry.mapping
                for entry in entries
                if entry.status in FULL_FOLDING_STATUSES
            },
            unicode_version=unicode_version,
        )

    @classmethod
    def from_case_folding_file(
        cls,
        path: Union[str, Path],
        unicode_version: Optional[str] = None,
    ) -> "FoldingTable":
        table = cls.from_entries(read_case_folding_file(path), unicode_version)
        logger.debug("Loaded folding table from %s: %d entries", path, len(table))
        return table

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get(self, code_point: int) -> Optional[FoldSequence]:
        """Fold sequence или None для identity (без аллокации)."""
        return self._entries.get(code_point)

    def lookup(self, code_point: int) -> FoldSequence:
        """Fold sequence; total для любого code point."""
        folded = self._entries.get(code_point)
        if folded is None:
            return (code_point,)
        return folded

    @property
    def unicode_version(self) -> Optional[str]:
        return self._unicode_version

    @property
    def max_expansion(self) -> int:
        return max((len(seq) for seq in self._entries.values()), default=1)

    def items(self) -> Iterable[Tuple[int, FoldSequence]]:
        return self._entries.items()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, code_point: object) -> bool:
        return code_point in self._entries

    def __repr__(self) -> str:
        return f"FoldingTable(entries={len(self)}, unicode_version={self._unicode_version!r})"
