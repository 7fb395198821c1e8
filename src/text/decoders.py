"""
Decoders - строгие ленивые декодеры UTF-8 / UTF-16 / UTF-32

Каждый декодер - генератор code points поверх memoryview: буфер не
копируется, невалидная единица кодирования сразу даёт MalformedEncoding
со смещением в байтах.

Строгость (Unicode 3.9, Table 3-7 для UTF-8):
- UTF-8: нет overlong форм, нет суррогатов, нет значений > U+10FFFF,
  нет висячих continuation bytes, нет обрезанных последовательностей
- UTF-16: суррогаты только парами, чётная длина
- UTF-32: нет суррогатов и значений > U+10FFFF, длина кратна 4
"""

import codecs
from typing import Callable, Dict, Final, Iterator

from src.core.domain.code_point import (
    HIGH_SURROGATE_MAX,
    LOW_SURROGATE_MIN,
    MAX_CODE_POINT,
    SURROGATE_MAX,
    SURROGATE_MIN,
    is_surrogate,
)
from src.core.errors import MalformedEncoding, UnsupportedEncoding

Decoder = Callable[[memoryview], Iterator[int]]

UTF8_BOM: Final[bytes] = b"\xef\xbb\xbf"
UTF16_BE_BOM: Final[bytes] = b"\xfe\xff"
UTF16_LE_BOM: Final[bytes] = b"\xff\xfe"
UTF32_BE_BOM: Final[bytes] = b"\x00\x00\xfe\xff"
UTF32_LE_BOM: Final[bytes] = b"\xff\xfe\x00\x00"


# =============================================================================
# UTF-8
# =============================================================================


def _utf8_bounds(lead: int):
    """(длина, min второго байта, max второго байта) для lead byte, иначе None."""
    if 0xC2 <= lead <= 0xDF:
        return 2, 0x80, 0xBF
    if lead == 0xE0:
        return 3, 0xA0, 0xBF
    if lead == 0xED:
        # Исключаем суррогаты U+D800..U+DFFF
        return 3, 0x80, 0x9F
    if 0xE1 <= lead <= 0xEF:
        return 3, 0x80, 0xBF
    if lead == 0xF0:
        return 4, 0x90, 0xBF
    if 0xF1 <= lead <= 0xF3:
        return 4, 0x80, 0xBF
    if lead == 0xF4:
        # Исключаем > U+10FFFF
        return 4, 0x80, 0x8F
    return None


def decode_utf8(buffer: memoryview, encoding: str = "utf-8", start: int = 0) -> Iterator[int]:
    size = len(buffer)
    i = start
    while i < size:
        lead = buffer[i]
        if lead < 0x80:
            yield lead
            i += 1
            continue

        bounds = _utf8_bounds(lead)
        if bounds is None:
            if 0x80 <= lead <= 0xBF:
                raise MalformedEncoding(encoding, i, f"unexpected continuation byte 0x{lead:02X}")
            raise MalformedEncoding(encoding, i, f"invalid lead byte 0x{lead:02X}")

        length, second_min, second_max = bounds
        if i + 1 >= size:
            raise MalformedEncoding(encoding, i, "truncated multi-byte sequence")

        second = buffer[i + 1]
        if not second_min <= second <= second_max:
            raise MalformedEncoding(
                encoding, i + 1, f"invalid byte 0x{second:02X} after lead 0x{lead:02X}"
            )

        value = (lead & (0xFF >> (length + 1))) << 6 | (second & 0x3F)
        for k in range(2, length):
            if i + k >= size:
                raise MalformedEncoding(encoding, i, "truncated multi-byte sequence")
            trail = buffer[i + k]
            if not 0x80 <= trail <= 0xBF:
                raise MalformedEncoding(encoding, i + k, f"invalid continuation byte 0x{trail:02X}")
            value = value << 6 | (trail & 0x3F)

        yield value
        i += length


def decode_utf8_sig(buffer: memoryview, encoding: str = "utf-8-sig") -> Iterator[int]:
    start = len(UTF8_BOM) if bytes(buffer[:3]) == UTF8_BOM else 0
    return decode_utf8(buffer, encoding, start)


# =============================================================================
# UTF-16
# =============================================================================


def _decode_utf16(buffer: memoryview, encoding: str, big_endian: bool, start: int = 0) -> Iterator[int]:
    size = len(buffer)
    hi, lo = (0, 1) if big_endian else (1, 0)
    i = start
    while i < size:
        if i + 1 >= size:
            raise MalformedEncoding(encoding, i, "truncated code unit")
        unit = buffer[i + hi] << 8 | buffer[i + lo]

        if not is_surrogate(unit):
            yield unit
            i += 2
            continue

        if unit >= LOW_SURROGATE_MIN:
            raise MalformedEncoding(encoding, i, f"unpaired low surrogate 0x{unit:04X}")
        if i + 3 >= size:
            raise MalformedEncoding(encoding, i, "truncated surrogate pair")

        trail = buffer[i + 2 + hi] << 8 | buffer[i + 2 + lo]
        if not LOW_SURROGATE_MIN <= trail <= SURROGATE_MAX:
            raise MalformedEncoding(encoding, i, f"unpaired high surrogate 0x{unit:04X}")

        yield 0x10000 + ((unit - SURROGATE_MIN) << 10) + (trail - LOW_SURROGATE_MIN)
        i += 4


def decode_utf16_le(buffer: memoryview, encoding: str = "utf-16-le") -> Iterator[int]:
    return _decode_utf16(buffer, encoding, big_endian=False)


def decode_utf16_be(buffer: memoryview, encoding: str = "utf-16-be") -> Iterator[int]:
    return _decode_utf16(buffer, encoding, big_endian=True)


def decode_utf16(buffer: memoryview, encoding: str = "utf-16") -> Iterator[int]:
    """UTF-16 с BOM; без BOM - big-endian (Unicode 3.10, D98)."""
    head = bytes(buffer[:2])
    if head == UTF16_LE_BOM:
        return _decode_utf16(buffer, encoding, big_endian=False, start=2)
    if head == UTF16_BE_BOM:
        return _decode_utf16(buffer, encoding, big_endian=True, start=2)
    return _decode_utf16(buffer, encoding, big_endian=True)


# =============================================================================
# UTF-32
# =============================================================================


def _decode_utf32(buffer: memoryview, encoding: str, big_endian: bool, start: int = 0) -> Iterator[int]:
    size = len(buffer)
    order = "big" if big_endian else "little"
    i = start
    while i < size:
        if i + 3 >= size:
            raise MalformedEncoding(encoding, i, "truncated code unit")
        value = int.from_bytes(buffer[i:i + 4], order)
        if value > MAX_CODE_POINT:
            raise MalformedEncoding(encoding, i, f"value 0x{value:X} beyond U+10FFFF")
        if is_surrogate(value):
            raise MalformedEncoding(encoding, i, f"surrogate value 0x{value:04X}")
        yield value
        i += 4


def decode_utf32_le(buffer: memoryview, encoding: str = "utf-32-le") -> Iterator[int]:
    return _decode_utf32(buffer, encoding, big_endian=False)


def decode_utf32_be(buffer: memoryview, encoding: str = "utf-32-be") -> Iterator[int]:
    return _decode_utf32(buffer, encoding, big_endian=True)


def decode_utf32(buffer: memoryview, encoding: str = "utf-32") -> Iterator[int]:
    head = bytes(buffer[:4])
    if head == UTF32_LE_BOM:
        return _decode_utf32(buffer, encoding, big_endian=False, start=4)
    if head == UTF32_BE_BOM:
        return _decode_utf32(buffer, encoding, big_endian=True, start=4)
    return _decode_utf32(buffer, encoding, big_endian=True)


# =============================================================================
# NATIVE TEXT
# =============================================================================


def decode_str(text: str) -> Iterator[int]:
    """
    Code points Python str.

    str может содержать одиночные суррогаты (surrogateescape, json "\\ud800"),
    они не являются scalar values.
    """
    for offset, char in enumerate(text):
        value = ord(char)
        if SURROGATE_MIN <= value <= SURROGATE_MAX:
            kind = "high" if value <= HIGH_SURROGATE_MAX else "low"
            raise MalformedEncoding("str", offset, f"lone {kind} surrogate U+{value:04X}")
        yield value


# =============================================================================
# REGISTRY
# =============================================================================


DECODERS: Final[Dict[str, Decoder]] = {
    "utf-8": decode_utf8,
    "utf-8-sig": decode_utf8_sig,
    "utf-16": decode_utf16,
    "utf-16-le": decode_utf16_le,
    "utf-16-be": decode_utf16_be,
    "utf-32": decode_utf32,
    "utf-32-le": decode_utf32_le,
    "utf-32-be": decode_utf32_be,
}

SUPPORTED_ENCODINGS: Final[frozenset] = frozenset(DECODERS)


def canonical_encoding(encoding: str) -> str:
    """
    Каноническое имя кодировки через codec registry ("UTF8" → "utf-8").

    Raises:
        UnsupportedEncoding: Если кодировка неизвестна или не поддерживается
    """
    try:
        name = codecs.lookup(encoding).name
    except LookupError as e:
        raise UnsupportedEncoding(encoding) from e

    name = name.replace("_", "-")
    if name not in DECODERS:
        raise UnsupportedEncoding(encoding)
    return name


def get_decoder(encoding: str) -> Decoder:
    return DECODERS[canonical_encoding(encoding)]
