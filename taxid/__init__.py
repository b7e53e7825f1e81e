"""Validation and normalization of European tax / VAT identifiers."""
from taxid.models.country import CountryCode, CountryInfo
from taxid.models.tax_id import TaxIdValidation
from taxid.services.country_reference import (
    CHECKSUM_COUNTRIES,
    COUNTRIES,
    COUNTRY_PREFIXES,
    get_country,
    is_eu_member,
)
from taxid.services.detection import detect_country
from taxid.services.formatting import format_vat_number
from taxid.services.tax_id_service import validate_tax_id

__version__ = "1.0.0"

__all__ = [
    "CHECKSUM_COUNTRIES",
    "COUNTRIES",
    "COUNTRY_PREFIXES",
    "CountryCode",
    "CountryInfo",
    "TaxIdValidation",
    "detect_country",
    "format_vat_number",
    "get_country",
    "is_eu_member",
    "validate_tax_id",
]
