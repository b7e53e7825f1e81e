"""Tax ID / VAT string cleaning helpers."""
import re
from typing import Optional

from taxid.models.country import SWISS_UID_PREFIX

_SEPARATORS = re.compile(r"[\s.\-]")


def clean_tax_id(raw: Optional[str]) -> str:
    """Strip whitespace, dots and hyphens, then uppercase.

    Any other character is kept so it can fail format validation later.

    Examples:
        >>> clean_tax_id("pt 502-011.378")
        'PT502011378'
        >>> clean_tax_id(None)
        ''
    """
    if not raw:
        return ""
    return _SEPARATORS.sub("", raw).upper()


def strip_country_prefix(cleaned: str, country: str) -> str:
    """Remove the country prefix from a cleaned tax ID.

    Switzerland may carry the 3-letter "CHE" form. Numbers whose country was
    inferred from their format have no prefix and are returned unchanged.
    """
    if country == "CH" and cleaned.startswith(SWISS_UID_PREFIX):
        return cleaned[len(SWISS_UID_PREFIX):]
    if cleaned.startswith(country):
        return cleaned[len(country):]
    return cleaned
