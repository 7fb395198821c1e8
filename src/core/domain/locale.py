"""
LocaleTag - нормализация тегов локали

Тег локали - непрозрачный идентификатор, используемый только как ключ
поиска в Tailoring Table. Нормализация приводит регистр и разделители
("tr_TR" → "tr-tr"), чтобы одинаковые теги в разной записи совпадали.
"""

from typing import Final, Optional

# Локаль-нейтральная (дефолтная) таблица
DEFAULT_LOCALE: Final[str] = "und"

# Синонимы дефолтной локали
_DEFAULT_ALIASES: Final[frozenset] = frozenset({"", "und", "root"})


def normalize_locale(tag: Optional[str]) -> str:
    """
    Нормализация тега локали.

    Args:
        tag: Тег локали (None, "", "root" → DEFAULT_LOCALE)

    Returns:
        Тег в нижнем регистре с "-" в качестве разделителя

    Raises:
        TypeError: Если tag не строка

    Examples:
        >>> normalize_locale("tr_TR")
        'tr-tr'
        >>> normalize_locale(None)
        'und'
    """
    if tag is None:
        return DEFAULT_LOCALE
    if not isinstance(tag, str):
        raise TypeError(f"locale must be str, got {type(tag).__name__}")

    normalized = tag.strip().replace("_", "-").lower()
    if normalized in _DEFAULT_ALIASES:
        return DEFAULT_LOCALE
    return normalized


def primary_subtag(tag: Optional[str]) -> str:
    """
    Первичный language subtag ("tr-tr" → "tr").

    POSIX-суффиксы (".UTF-8", "@euro") отбрасываются.
    """
    normalized = normalize_locale(tag)
    for separator in (".", "@"):
        normalized = normalized.split(separator, 1)[0]
    return normalized.split("-", 1)[0] or DEFAULT_LOCALE


def is_default_locale(tag: Optional[str]) -> bool:
    return normalize_locale(tag) == DEFAULT_LOCALE
