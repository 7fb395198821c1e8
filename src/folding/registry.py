"""
Registry - build-once таблицы и FoldResolver

Folding/Tailoring таблицы - единственное глобальное состояние процесса:
строятся один раз (лениво, под lock), никогда не мутируются и не
освобождаются. После построения чтение идёт без блокировок.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Mapping, Optional

from src.core.domain.code_point import FoldSequence
from src.core.domain.locale import normalize_locale
from src.folding.folding_table import FoldingTable
from src.folding.tailoring_table import TailoringTable

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_default_folding_table: Optional[FoldingTable] = None
_default_tailoring_table: Optional[TailoringTable] = None


def get_default_folding_table() -> FoldingTable:
    """Процессный singleton дефолтной таблицы."""
    global _default_folding_table
    table = _default_folding_table
    if table is not None:
        return table

    with _lock:
        if _default_folding_table is None:
            _default_folding_table = FoldingTable.from_unicode_database()
        return _default_folding_table


def get_default_tailoring_table() -> TailoringTable:
    """Процессный singleton встроенных tailorings (tr, az)."""
    global _default_tailoring_table
    table = _default_tailoring_table
    if table is not None:
        return table

    with _lock:
        if _default_tailoring_table is None:
            _default_tailoring_table = TailoringTable.builtin()
            logger.debug("Built tailoring table: locales=%s", _default_tailoring_table.locales)
        return _default_tailoring_table


@dataclass(frozen=True)
class FoldResolver:
    """
    Пара таблиц, связанная с одной разрешённой локалью.

    resolve() сначала проверяет tailoring выбранной локали, затем дефолтную
    таблицу. None означает identity (code point сворачивается сам в себя).
    """

    folding_table: FoldingTable
    tailoring: Optional[Mapping[int, FoldSequence]]
    locale: str
    tailoring_key: Optional[str]

    def resolve(self, code_point: int) -> Optional[FoldSequence]:
        if self.tailoring is not None:
            folded = self.tailoring.get(code_point)
            if folded is not None:
                return folded
        return self.folding_table.get(code_point)

    def lookup(self, code_point: int) -> FoldSequence:
        folded = self.resolve(code_point)
        if folded is None:
            return (code_point,)
        return folded


def resolver_for(
    locale: Optional[str],
    folding_table: Optional[FoldingTable] = None,
    tailoring_table: Optional[TailoringTable] = None,
) -> FoldResolver:
    """
    FoldResolver для локали.

    Args:
        locale: Тег локали (None → дефолтная)
        folding_table: Дефолтная таблица (default: процессный singleton)
        tailoring_table: Таблица tailorings (default: процессный singleton)
    """
    folding_table = folding_table if folding_table is not None else get_default_folding_table()
    tailoring_table = tailoring_table if tailoring_table is not None else get_default_tailoring_table()

    key = tailoring_table.resolve_locale(locale)
    return FoldResolver(
        folding_table=folding_table,
        tailoring=tailoring_table.table_for(key),
        locale=normalize_locale(locale),
        tailoring_key=key,
    )
