"""
CodePoint - примитивы Unicode scalar values

Code point в этом пакете - обычный int в диапазоне [0, 0x10FFFF] без
суррогатов (U+D800..U+DFFF). Отдельного класса-обёртки нет: значения
атомарны и неизменяемы, а сравнение идёт по ordinal value.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любая fold-последовательность имеет длину 1..MAX_FOLD_EXPANSION
2. Все элементы fold-последовательности - валидные scalar values
"""

from typing import Final, Iterable, Tuple

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MAX_CODE_POINT: Final[int] = 0x10FFFF

SURROGATE_MIN: Final[int] = 0xD800
SURROGATE_MAX: Final[int] = 0xDFFF

HIGH_SURROGATE_MAX: Final[int] = 0xDBFF
LOW_SURROGATE_MIN: Final[int] = 0xDC00

# Максимальная длина full case folding (ß → ss, ΐ → ΐ, ﬃ → ffi)
MAX_FOLD_EXPANSION: Final[int] = 3

FoldSequence = Tuple[int, ...]


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_surrogate(value: int) -> bool:
    return SURROGATE_MIN <= value <= SURROGATE_MAX


def is_scalar_value(value: int) -> bool:
    """
    Проверка, что value - Unicode scalar value.

    Examples:
        >>> is_scalar_value(0x41)
        True
        >>> is_scalar_value(0xD800)
        False
        >>> is_scalar_value(0x110000)
        False
    """
    return 0 <= value <= MAX_CODE_POINT and not is_surrogate(value)


def validate_code_point(value: int, name: str = "code_point") -> int:
    """
    Валидация code point.

    Raises:
        TypeError: Если value не int
        ValueError: Если value вне диапазона scalar values
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if not is_scalar_value(value):
        raise ValueError(f"{name} must be a Unicode scalar value, got U+{value:04X}")
    return value


def validate_fold_sequence(values: Iterable[int], name: str = "fold sequence") -> FoldSequence:
    """
    Валидация и нормализация fold-последовательности в tuple.

    Raises:
        ValueError: Если последовательность пуста, длиннее MAX_FOLD_EXPANSION
            или содержит не-scalar значения
    """
    sequence = tuple(values)
    if not sequence:
        raise ValueError(f"{name} must not be empty")
    if len(sequence) > MAX_FOLD_EXPANSION:
        raise ValueError(
            f"{name} length {len(sequence)} exceeds MAX_FOLD_EXPANSION={MAX_FOLD_EXPANSION}"
        )
    for value in sequence:
        validate_code_point(value, name)
    return sequence


def format_code_point(value: int) -> str:
    """U+XXXX нотация для диагностики."""
    return f"U+{value:04X}"


def parse_code_point(text: str) -> int:
    """
    Разбор hex-нотации code point ("00DF", "U+00DF", "0x00df").

    Raises:
        ValueError: Если строка не является валидным code point
    """
    raw = text.strip()
    if raw[:2] in ("U+", "u+", "0x", "0X"):
        raw = raw[2:]
    return validate_code_point(int(raw, 16))
