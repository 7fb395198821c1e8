"""Folding - таблицы case folding, tailorings локалей и Fold Cursor.

- FoldingTable: дефолтная full case folding таблица (C+F)
- TailoringTable: per-locale overrides (tr/az: I/ı/İ/i)
- FoldCursor: ленивый поток folded code points с буфером expansion
"""

from .case_folding_file import (
    CaseFoldingEntry,
    CaseFoldingStatus,
    parse_case_folding,
    read_case_folding_file,
)
from .cursor import CursorState, FoldCursor
from .folding_table import FoldingTable
from .registry import (
    FoldResolver,
    get_default_folding_table,
    get_default_tailoring_table,
    resolver_for,
)
from .tailoring_table import TURKIC_LOCALES, TailoringTable

__all__ = [
    "CaseFoldingEntry",
    "CaseFoldingStatus",
    "parse_case_folding",
    "read_case_folding_file",
    "CursorState",
    "FoldCursor",
    "FoldingTable",
    "FoldResolver",
    "get_default_folding_table",
    "get_default_tailoring_table",
    "resolver_for",
    "TURKIC_LOCALES",
    "TailoringTable",
]
