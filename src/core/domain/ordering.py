"""
Ordering - результат сравнения и диагностический отчёт

Порядок - code-point-ordinal по folded-последовательностям, а НЕ
лингвистическая collation. Для сортировки естественного текста не подходит.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Ordering(int, Enum):
    """Результат compare()."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_code_points(cls, a: int, b: int) -> "Ordering":
        if a < b:
            return cls.LESS
        if a > b:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)


class MismatchKind(str, Enum):
    """
    Причина неравенства.

    - EQUAL: обе folded-последовательности совпали целиком
    - CODE_POINT: на одной позиции folded code points различаются
    - LENGTH: одна последовательность закончилась раньше другой
    """

    EQUAL = "EQUAL"
    CODE_POINT = "CODE_POINT"
    LENGTH = "LENGTH"


@dataclass(frozen=True)
class ComparisonReport:
    """Результат explain()."""

    ordering: Ordering
    mismatch_kind: MismatchKind

    # Локаль
    locale: str
    tailoring_key: Optional[str]

    # Позиция расхождения в folded-последовательности
    folded_index: int
    code_point_a: Optional[int]
    code_point_b: Optional[int]

    # Сколько source code points прочитано до решения
    consumed_a: int
    consumed_b: int

    # Для отладки
    details: str

    @property
    def equal(self) -> bool:
        return self.ordering is Ordering.EQUAL
