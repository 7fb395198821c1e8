"""
Comparator - case-insensitive сравнение двух текстов под одной локалью

Один линейный проход lock-step по двум Fold Cursor:
- один курсор отдал code point, другой закончился → не равны (LENGTH);
  закончившийся меньше
- оба отдали разные code points → не равны (CODE_POINT); порядок по
  ordinal value
- оба закончились одновременно → равны

Память ограничена двумя очередями курсоров (по MAX_FOLD_EXPANSION каждая).
Порядок - code-point-ordinal, НЕ лингвистическая collation.
"""

from typing import Optional, Tuple

from src.core.config import ComparatorConfig
from src.core.domain.code_point import format_code_point
from src.core.domain.locale import normalize_locale
from src.core.domain.ordering import ComparisonReport, MismatchKind, Ordering
from src.core.errors import LocaleMismatch
from src.folding.cursor import FoldCursor
from src.folding.folding_table import FoldingTable
from src.folding.registry import FoldResolver, resolver_for
from src.folding.tailoring_table import TailoringTable
from src.text.code_point_source import TextInput, as_code_point_source, operand_locale


# (ordering, mismatch kind, folded index, code point a, code point b)
_WalkResult = Tuple[Ordering, MismatchKind, int, Optional[int], Optional[int]]


class Comparator:
    """
    Case-insensitive Comparator.

    Состояния между вызовами нет: курсоры создаются на вызов и
    выбрасываются, таблицы неизменяемы. Экземпляр можно разделять между
    потоками.
    """

    def __init__(
        self,
        config: Optional[ComparatorConfig] = None,
        folding_table: Optional[FoldingTable] = None,
        tailoring_table: Optional[TailoringTable] = None,
    ):
        """
        Args:
            config: Конфигурация (default: ComparatorConfig())
            folding_table: Дефолтная таблица (default: процессный singleton)
            tailoring_table: Tailorings (default: встроенные tr/az)
        """
        self.config = config or ComparatorConfig()
        self.folding_table = folding_table
        self.tailoring_table = tailoring_table

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def equals(self, text_a: TextInput, text_b: TextInput, locale: Optional[str] = None) -> bool:
        """
        Case-insensitive равенство.

        Raises:
            MalformedEncoding: Если любой вход закодирован невалидно
            LocaleMismatch: Если операнды запрошены под разными локалями
        """
        result, _, _, _ = self._run(text_a, text_b, locale)
        return result[0] is Ordering.EQUAL

    def compare(self, text_a: TextInput, text_b: TextInput, locale: Optional[str] = None) -> Ordering:
        """
        Case-insensitive порядок (LESS / EQUAL / GREATER).

        Raises:
            MalformedEncoding: Если любой вход закодирован невалидно
            LocaleMismatch: Если операнды запрошены под разными локалями
        """
        result, _, _, _ = self._run(text_a, text_b, locale)
        return result[0]

    def explain(
        self, text_a: TextInput, text_b: TextInput, locale: Optional[str] = None
    ) -> ComparisonReport:
        """Сравнение с диагностикой: где и почему последовательности разошлись."""
        result, resolver, consumed_a, consumed_b = self._run(text_a, text_b, locale)
        ordering, kind, index, cp_a, cp_b = result

        if kind is MismatchKind.EQUAL:
            details = f"Equal after {index} folded code points"
        elif kind is MismatchKind.LENGTH:
            shorter = "a" if cp_a is None else "b"
            details = f"Operand {shorter} ended at folded index {index}"
        else:
            details = (
                f"Folded index {index}: {format_code_point(cp_a)} vs {format_code_point(cp_b)}"
            )

        return ComparisonReport(
            ordering=ordering,
            mismatch_kind=kind,
            locale=resolver.locale,
            tailoring_key=resolver.tailoring_key,
            folded_index=index,
            code_point_a=cp_a,
            code_point_b=cp_b,
            consumed_a=consumed_a,
            consumed_b=consumed_b,
            details=details,
        )

    def cursor(self, text: TextInput, locale: Optional[str] = None) -> FoldCursor:
        """Fold Cursor для одного операнда."""
        resolver = self._resolver(self._resolve_locale(locale, operand_locale(text)))
        return FoldCursor(as_code_point_source(text, self.config.encoding), resolver)

    def casefold(self, text: TextInput, locale: Optional[str] = None) -> str:
        """
        Материализованная folded строка.

        Для хранимых ключей; equals/compare её не строят.
        """
        return "".join(map(chr, self.cursor(text, locale)))

    def fold_key(self, text: TextInput, locale: Optional[str] = None) -> Tuple[int, ...]:
        """
        Folded code points как tuple.

        Порядок ключей совпадает с compare() под той же локалью.
        """
        return tuple(self.cursor(text, locale))

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _resolve_locale(self, *tags: Optional[str]) -> str:
        """
        Единая локаль вызова.

        Все явно указанные теги (аргумент и LocalizedText операнды) должны
        совпасть после нормализации; если не указан ни один -
        config.default_locale.

        Raises:
            LocaleMismatch: Если указаны разные теги
        """
        resolved: Optional[str] = None
        first: Optional[str] = None
        for tag in tags:
            if tag is None:
                continue
            normalized = normalize_locale(tag)
            if resolved is None:
                resolved, first = normalized, tag
            elif normalized != resolved:
                raise LocaleMismatch(first, tag)

        if resolved is None:
            return self.config.default_locale
        return resolved

    def _resolver(self, locale: str) -> FoldResolver:
        return resolver_for(locale, self.folding_table, self.tailoring_table)

    def _run(self, text_a: TextInput, text_b: TextInput, locale: Optional[str]):
        locale = self._resolve_locale(locale, operand_locale(text_a), operand_locale(text_b))
        resolver = self._resolver(locale)

        encoding = self.config.encoding
        cursor_a = FoldCursor(as_code_point_source(text_a, encoding), resolver)
        cursor_b = FoldCursor(as_code_point_source(text_b, encoding), resolver)

        result = _walk(cursor_a, cursor_b)
        consumed_a, consumed_b = cursor_a.consumed, cursor_b.consumed

        if self.config.validate_tail:
            cursor_a.drain_source()
            cursor_b.drain_source()

        return result, resolver, consumed_a, consumed_b


def _walk(cursor_a: FoldCursor, cursor_b: FoldCursor) -> _WalkResult:
    index = 0
    while True:
        a = cursor_a.next()
        b = cursor_b.next()

        if a is None:
            if b is None:
                return Ordering.EQUAL, MismatchKind.EQUAL, index, None, None
            return Ordering.LESS, MismatchKind.LENGTH, index, None, b
        if b is None:
            return Ordering.GREATER, MismatchKind.LENGTH, index, a, None
        if a != b:
            return Ordering.from_code_points(a, b), MismatchKind.CODE_POINT, index, a, b

        index += 1
