"""
Text - Code Point Source и строгие декодеры.
"""

from .code_point_source import (
    BytesLike,
    CodePointSource,
    LocalizedText,
    TextInput,
    as_code_point_source,
    operand_locale,
)
from .decoders import SUPPORTED_ENCODINGS, canonical_encoding

__all__ = [
    "BytesLike",
    "CodePointSource",
    "LocalizedText",
    "TextInput",
    "as_code_point_source",
    "operand_locale",
    "SUPPORTED_ENCODINGS",
    "canonical_encoding",
]
