"""
Errors - таксономия ошибок сравнения

Две категории:
- ComparisonError: вход некорректен или противоречив (MalformedEncoding,
  LocaleMismatch). Пробрасывается вызывающему, локального восстановления нет.
- UnsupportedEncoding: ошибка конфигурации (кодировка, которую Code Point
  Source не умеет декодировать).

Различие регистра НИКОГДА не является ошибкой - это обычный результат
сравнения. Неизвестная локаль тоже не ошибка: используется дефолтная таблица.
"""

from typing import Optional


# =============================================================================
# COMPARISON ERRORS
# =============================================================================


class ComparisonError(ValueError):
    """Базовый класс ошибок сравнения."""
    pass


class MalformedEncoding(ComparisonError):
    """
    Входной буфер не является корректно закодированным текстом.

    Фатально для всего сравнения: "битые данные" отличаются от
    "другого регистра" и не пропускаются молча.

    Attributes:
        encoding: Каноническое имя кодировки (или "str" для native text)
        offset: Смещение невалидной единицы (байты для bytes, символы для str)
        reason: Краткое описание нарушения
    """

    def __init__(self, encoding: str, offset: int, reason: str):
        self.encoding = encoding
        self.offset = offset
        self.reason = reason
        super().__init__(
            f"Malformed {encoding} input at offset {offset}: {reason}"
        )


class LocaleMismatch(ComparisonError):
    """
    Операнды одного вызова запрошены под разными локалями.

    Case-insensitive сравнение определено только для одного режима
    tailoring, поэтому вызов отклоняется, а не угадывается.
    """

    def __init__(self, locale_a: Optional[str], locale_b: Optional[str]):
        self.locale_a = locale_a
        self.locale_b = locale_b
        super().__init__(
            f"Cannot compare under different locales: {locale_a!r} vs {locale_b!r}"
        )


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class UnsupportedEncoding(ValueError):
    """Кодировка не поддерживается Code Point Source."""

    def __init__(self, encoding: str):
        self.encoding = encoding
        super().__init__(f"Unsupported encoding: {encoding!r}")
