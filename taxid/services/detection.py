"""Country detection for raw tax ID strings.

Priority order:
1. "CHE" Swiss UID prefix (checked before the 2-letter rule so the 3-letter
   form is never split into "CH" + "E...").
2. Canonical 2-letter prefix followed by at least one character. A matching
   prefix always wins, even if the payload later fails validation.
3. Prefix-less legacy numbers: 9 digits → PT checksum, 8 digits → DK then CZ
   checksum. Only these jurisdictions are guessed blind.
"""
import logging
import re
from typing import Optional

from taxid.models.country import SWISS_UID_PREFIX, CountryCode
from taxid.services.country_reference import to_country_code
from taxid.utils.vat import clean_tax_id
from taxid.validators.checksum import validate_cz, validate_dk, validate_pt

logger = logging.getLogger(__name__)

_NINE_DIGITS = re.compile(r"[0-9]{9}")
_EIGHT_DIGITS = re.compile(r"[0-9]{8}")

# Tried in order; the first checksum that passes wins
_PREFIXLESS_CANDIDATES = (
    (_NINE_DIGITS, ((CountryCode.PT, validate_pt),)),
    (_EIGHT_DIGITS, ((CountryCode.DK, validate_dk), (CountryCode.CZ, validate_cz))),
)


def detect_cleaned(cleaned: str) -> Optional[CountryCode]:
    """Detect the issuing country of an already-cleaned tax ID."""
    if cleaned.startswith(SWISS_UID_PREFIX) and len(cleaned) > len(SWISS_UID_PREFIX):
        logger.debug("Detected CH from %s prefix", SWISS_UID_PREFIX)
        return CountryCode.CH

    prefix = to_country_code(cleaned[:2]) if len(cleaned) > 2 else None
    if prefix is not None:
        logger.debug("Detected %s from prefix", prefix.value)
        return prefix

    for pattern, candidates in _PREFIXLESS_CANDIDATES:
        if not pattern.fullmatch(cleaned):
            continue
        for country, validator in candidates:
            if validator(cleaned).valid:
                logger.debug("Detected %s from prefix-less format", country.value)
                return country

    return None


def detect_country(raw: Optional[str]) -> Optional[CountryCode]:
    """
    Detect country from a tax ID string.
    Tries prefix matching first, then format-based detection.

    Examples:
        >>> detect_country("pt 502 011 378")
        <CountryCode.PT: 'PT'>
        >>> detect_country("10150817")
        <CountryCode.DK: 'DK'>
        >>> detect_country("12345") is None
        True
    """
    return detect_cleaned(clean_tax_id(raw))
