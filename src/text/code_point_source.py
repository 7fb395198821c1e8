"""
CodePointSource - адаптер текстового буфера в последовательность code points

Контракт:
- Ленивая, конечная, перезапускаемая последовательность: каждый iter()
  начинает с начала буфера (возобновления с середины нет)
- Буфер заимствуется через memoryview, байты не копируются
- Невалидная или обрезанная единица кодирования → MalformedEncoding,
  ошибка пробрасывается и никогда не пропускается
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Union

from src.text.decoders import canonical_encoding, decode_str, get_decoder

BytesLike = Union[bytes, bytearray, memoryview]


class CodePointSource:
    """
    Последовательность Unicode scalar values поверх str или bytes-like.

    Example:
        >>> list(CodePointSource(b"Stra\\xc3\\x9fe"))
        [83, 116, 114, 97, 223, 101]
    """

    __slots__ = ("_data", "_encoding")

    def __init__(self, data: Union[str, BytesLike], encoding: str = "utf-8"):
        """
        Args:
            data: Native text (str) или закодированный буфер
            encoding: Кодировка буфера (игнорируется для str)

        Raises:
            TypeError: Если data не текст и не bytes-like
            UnsupportedEncoding: Если кодировка не поддерживается
        """
        if isinstance(data, str):
            self._data = data
            self._encoding = "str"
        elif isinstance(data, (bytes, bytearray, memoryview)):
            self._data = memoryview(data).cast("B")
            self._encoding = canonical_encoding(encoding)
        else:
            raise TypeError(
                f"text input must be str or bytes-like, got {type(data).__name__}"
            )

    @property
    def encoding(self) -> str:
        """Каноническое имя кодировки или "str" для native text."""
        return self._encoding

    @property
    def is_native_text(self) -> bool:
        return isinstance(self._data, str)

    def __iter__(self) -> Iterator[int]:
        if isinstance(self._data, str):
            return decode_str(self._data)
        return get_decoder(self._encoding)(self._data)

    def __repr__(self) -> str:
        return f"CodePointSource(encoding={self._encoding!r}, length={len(self._data)})"


@dataclass(frozen=True)
class LocalizedText:
    """
    Операнд сравнения, несущий собственный тег локали.

    Если операнды одного вызова несут разные локали (или расходятся с явно
    переданной), сравнение отклоняется с LocaleMismatch.
    """

    text: Union[str, BytesLike, CodePointSource]
    locale: str


TextInput = Union[str, BytesLike, CodePointSource, LocalizedText]


def operand_locale(value: TextInput) -> Optional[str]:
    """Локаль операнда, если он её несёт."""
    if isinstance(value, LocalizedText):
        return value.locale
    return None


def as_code_point_source(value: TextInput, encoding: str = "utf-8") -> CodePointSource:
    """
    Приведение любого TextInput к CodePointSource.

    Raises:
        TypeError: Если значение нельзя интерпретировать как текст
        UnsupportedEncoding: Если кодировка не поддерживается
    """
    if isinstance(value, LocalizedText):
        value = value.text
    if isinstance(value, CodePointSource):
        return value
    return CodePointSource(value, encoding)
