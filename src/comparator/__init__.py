"""Comparator - case-insensitive equals/compare с учётом локали.

Поток данных:
    text → CodePointSource → FoldCursor (Folding/Tailoring таблицы) → Comparator → результат
"""

from .api import casefold, compare, equals, explain, fold_key, get_default_comparator
from .comparator import Comparator

__all__ = [
    "Comparator",
    "get_default_comparator",
    "equals",
    "compare",
    "explain",
    "casefold",
    "fold_key",
]
