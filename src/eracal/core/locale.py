from __future__ import annotations

from functools import lru_cache
from typing import Optional, Union

from babel import Locale
from babel.core import UnknownLocaleError

FALLBACK_LANGUAGE = "en"

LocaleLike = Union[None, str, Locale]


def _split_extension(tag: str) -> tuple[str, str]:
    """'th-TH-u-ca-buddhist' -> ('th-TH', 'ca-buddhist')."""
    norm = tag.replace("_", "-")
    for marker in ("-u-", "-U-"):
        if marker in norm:
            head, _, ext = norm.partition(marker)
            return head, ext.lower()
    return norm, ""


@lru_cache(maxsize=256)
def _language_of_tag(tag: str) -> str:
    head, _ = _split_extension(tag.strip())
    if not head:
        return FALLBACK_LANGUAGE
    try:
        return Locale.parse(head, sep="-").language
    except (ValueError, UnknownLocaleError):
        # Babel has no data for this tag; its primary subtag is still the language.
        return head.split("-", 1)[0].lower()


def language_of(locale: LocaleLike) -> str:
    """Language code of a locale given as a tag, a babel.Locale, or None."""
    if locale is None:
        return FALLBACK_LANGUAGE
    if isinstance(locale, Locale):
        return locale.language
    return _language_of_tag(str(locale))


def calendar_type_of(locale: LocaleLike) -> Optional[str]:
    """Value of the Unicode 'ca' extension key, e.g. 'buddhist' for 'th-TH-u-ca-buddhist'."""
    if locale is None or isinstance(locale, Locale):
        return None
    _, ext = _split_extension(str(locale).strip())
    parts = ext.split("-") if ext else []
    for i, key in enumerate(parts):
        if key == "ca" and i + 1 < len(parts):
            return parts[i + 1]
    return None
