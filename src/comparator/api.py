"""
Module-level API поверх процессного Comparator по умолчанию.

    >>> equals("Straße", "STRASSE")
    True
    >>> equals("i", "İ", "tr")
    True
"""

import threading
from typing import Optional, Tuple

from src.comparator.comparator import Comparator
from src.core.domain.ordering import ComparisonReport, Ordering
from src.text.code_point_source import TextInput

_lock = threading.Lock()
_default_comparator: Optional[Comparator] = None


def get_default_comparator() -> Comparator:
    global _default_comparator
    if _default_comparator is None:
        with _lock:
            if _default_comparator is None:
                _default_comparator = Comparator()
    return _default_comparator


def equals(text_a: TextInput, text_b: TextInput, locale: Optional[str] = None) -> bool:
    return get_default_comparator().equals(text_a, text_b, locale)


def compare(text_a: TextInput, text_b: TextInput, locale: Optional[str] = None) -> Ordering:
    return get_default_comparator().compare(text_a, text_b, locale)


def explain(text_a: TextInput, text_b: TextInput, locale: Optional[str] = None) -> ComparisonReport:
    return get_default_comparator().explain(text_a, text_b, locale)


def casefold(text: TextInput, locale: Optional[str] = None) -> str:
    return get_default_comparator().casefold(text, locale)


def fold_key(text: TextInput, locale: Optional[str] = None) -> Tuple[int, ...]:
    return get_default_comparator().fold_key(text, locale)
