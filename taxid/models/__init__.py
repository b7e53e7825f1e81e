"""Domain models."""
from taxid.models.country import CountryCode, CountryInfo
from taxid.models.tax_id import CheckResult, TaxIdValidation

__all__ = ["CountryCode", "CountryInfo", "CheckResult", "TaxIdValidation"]
