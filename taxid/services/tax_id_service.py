"""Tax ID validation pipeline: clean → detect → strip prefix → validate."""
import logging
import re
from typing import Optional

from taxid.models.tax_id import TaxIdValidation
from taxid.services.country_reference import CHECKSUM_COUNTRIES
from taxid.services.detection import detect_cleaned
from taxid.utils.vat import clean_tax_id, strip_country_prefix
from taxid.validators.registry import get_validator

logger = logging.getLogger(__name__)

MIN_LENGTH = 4
MAX_LENGTH = 20

ERROR_INVALID_LENGTH = "Invalid length"
ERROR_UNKNOWN_COUNTRY = "Cannot determine country"

_ALPHANUMERIC = re.compile(r"[A-Z0-9]+")


def validate_tax_id(raw: Optional[str]) -> TaxIdValidation:
    """Validate a European tax ID / VAT number.

    Supports 30 countries (27 EU + GB, NO, CH). Returns format validity, the
    detected country, the normalized ``country + payload`` form and whether a
    check digit was verified. Failures are reported in ``error``, never raised.

    Examples:
        >>> validate_tax_id("PT 502 011 378").normalized
        'PT502011378'
        >>> validate_tax_id("XX123456789").error
        'Cannot determine country'
    """
    cleaned = clean_tax_id(raw)

    if not MIN_LENGTH <= len(cleaned) <= MAX_LENGTH:
        logger.debug("Rejected tax ID of length %d", len(cleaned))
        return TaxIdValidation(valid=False, normalized=cleaned, error=ERROR_INVALID_LENGTH)

    country = detect_cleaned(cleaned)
    if country is None:
        logger.debug("No country detected for %r", cleaned)
        return TaxIdValidation(valid=False, normalized=cleaned, error=ERROR_UNKNOWN_COUNTRY)

    payload = strip_country_prefix(cleaned, country.value)
    validator = get_validator(country)
    if validator is None:
        # Unreachable while every CountryCode has a registered validator
        logger.warning("No validator registered for %s", country.value)
        return TaxIdValidation(
            valid=bool(_ALPHANUMERIC.fullmatch(payload)),
            country=country,
            normalized=country.value + payload,
            checksum_verified=False,
        )

    result = validator(payload)
    if not result.valid:
        logger.debug("%s validation failed: %s", country.value, result.error)

    return TaxIdValidation(
        valid=result.valid,
        country=country,
        normalized=country.value + result.normalized,
        checksum_verified=result.valid and country in CHECKSUM_COUNTRIES,
        error=result.error,
    )
