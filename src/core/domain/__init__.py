"""
Domain models and value objects.

Contains code point primitives, locale tags, ordering results and the
tailoring document model.
"""

from src.core.domain.code_point import (
    MAX_CODE_POINT,
    MAX_FOLD_EXPANSION,
    FoldSequence,
    format_code_point,
    is_scalar_value,
    is_surrogate,
    parse_code_point,
    validate_code_point,
    validate_fold_sequence,
)
from src.core.domain.locale import (
    DEFAULT_LOCALE,
    is_default_locale,
    normalize_locale,
    primary_subtag,
)
from src.core.domain.ordering import ComparisonReport, MismatchKind, Ordering
from src.core.domain.tailoring_document import TailoringDocument

__all__ = [
    # Code points
    "MAX_CODE_POINT",
    "MAX_FOLD_EXPANSION",
    "FoldSequence",
    "format_code_point",
    "is_scalar_value",
    "is_surrogate",
    "parse_code_point",
    "validate_code_point",
    "validate_fold_sequence",
    # Locale tags
    "DEFAULT_LOCALE",
    "is_default_locale",
    "normalize_locale",
    "primary_subtag",
    # Ordering
    "Ordering",
    "MismatchKind",
    "ComparisonReport",
    # Tailoring document
    "TailoringDocument",
]
