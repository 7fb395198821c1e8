"""
Fold Cursor - ленивый поток folded code points

Состояния:
- SOURCING: очередь пуста, следующий next() читает из источника
- DRAINING: очередь не пуста, next() отдаёт буферизованные code points
- EXHAUSTED: источник исчерпан и очередь пуста (терминальное)

Переходы:
- SOURCING → DRAINING: прочитан code point с непустой fold sequence
- DRAINING → DRAINING: в очереди больше одного элемента
- DRAINING → SOURCING: очередь опустела после pop
- SOURCING → EXHAUSTED: источник ничего не вернул

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый next() отдаёт ровно один folded code point (или None в конце)
2. Очередь содержит expansion не более одного source code point
3. Очередь пополняется только когда пуста
4. Folded строка целиком никогда не материализуется
"""

from enum import Enum
from typing import Iterable, Iterator, Optional

from src.core.domain.code_point import FoldSequence
from src.folding.registry import FoldResolver


class CursorState(str, Enum):
    """Состояние Fold Cursor."""

    SOURCING = "SOURCING"
    DRAINING = "DRAINING"
    EXHAUSTED = "EXHAUSTED"


class FoldCursor:
    """
    Fold Cursor над Code Point Source.

    Очередь - это tuple из таблицы плюс позиция чтения: ёмкость ограничена
    MAX_FOLD_EXPANSION, копирования нет.

    Example:
        >>> from src.folding.registry import resolver_for
        >>> cursor = FoldCursor([0xDF], resolver_for(None))
        >>> cursor.next(), cursor.state.value
        (115, 'DRAINING')
        >>> cursor.next(), cursor.next()
        (115, None)
    """

    __slots__ = ("_source", "_resolver", "_pending", "_pending_pos", "_state", "_consumed", "_emitted")

    def __init__(self, source: Iterable[int], resolver: FoldResolver):
        """
        Args:
            source: Code Point Source (или любой iterable code points)
            resolver: Разрешённая пара таблиц для локали сравнения
        """
        self._source: Iterator[int] = iter(source)
        self._resolver = resolver
        self._pending: Optional[FoldSequence] = None
        self._pending_pos = 0
        self._state = CursorState.SOURCING
        self._consumed = 0
        self._emitted = 0

    def next(self) -> Optional[int]:
        """
        Следующий folded code point или None в конце последовательности.

        Raises:
            MalformedEncoding: Если источник содержит невалидную кодировку
        """
        # DRAINING: отдаём буферизованное
        pending = self._pending
        if pending is not None:
            code_point = pending[self._pending_pos]
            self._pending_pos += 1
            if self._pending_pos >= len(pending):
                self._pending = None
                self._state = CursorState.SOURCING
            self._emitted += 1
            return code_point

        if self._state is CursorState.EXHAUSTED:
            return None

        # SOURCING: читаем следующий source code point
        try:
            source_code_point = next(self._source)
        except StopIteration:
            self._state = CursorState.EXHAUSTED
            return None
        self._consumed += 1

        folded = self._resolver.resolve(source_code_point)
        self._emitted += 1
        if folded is None:
            return source_code_point
        if len(folded) > 1:
            self._pending = folded
            self._pending_pos = 1
            self._state = CursorState.DRAINING
        return folded[0]

    def drain_source(self) -> int:
        """
        Дочитать источник без folding.

        Нужен, чтобы MalformedEncoding в хвосте входа не маскировался ранним
        решением сравнения. Очередь сбрасывается, курсор становится EXHAUSTED.

        Returns:
            Количество дочитанных source code points
        """
        drained = 0
        if self._state is not CursorState.EXHAUSTED:
            for _ in self._source:
                drained += 1
        self._consumed += drained
        self._pending = None
        self._state = CursorState.EXHAUSTED
        return drained

    @property
    def state(self) -> CursorState:
        return self._state

    @property
    def consumed(self) -> int:
        """Прочитано source code points."""
        return self._consumed

    @property
    def emitted(self) -> int:
        """Отдано folded code points."""
        return self._emitted

    @property
    def resolver(self) -> FoldResolver:
        return self._resolver

    def __iter__(self) -> "FoldCursor":
        return self

    def __next__(self) -> int:
        code_point = self.next()
        if code_point is None:
            raise StopIteration
        return code_point

    def __repr__(self) -> str:
        return (
            f"FoldCursor(state={self._state.value}, consumed={self._consumed}, "
            f"emitted={self._emitted})"
        )
