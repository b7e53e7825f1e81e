"""Format-only validators (regex, no checksum)."""
import re
from typing import Callable

from taxid.models.country import CountryCode
from taxid.models.tax_id import CheckResult

Validator = Callable[[str], CheckResult]


def pattern_validator(pattern: str, error: str) -> Validator:
    """Build a validator accepting payloads that fully match ``pattern``."""
    compiled = re.compile(pattern, re.ASCII)

    def validate(payload: str) -> CheckResult:
        if compiled.fullmatch(payload):
            return CheckResult(True, payload)
        return CheckResult(False, payload, error)

    return validate


# ── UK: company number or VAT ──────────────────────────────────────

_GB_PATTERNS = (
    re.compile(r"\d{9}", re.ASCII),  # VAT
    re.compile(r"\d{12}", re.ASCII),  # VAT, branch traders
    re.compile(r"\d{8}", re.ASCII),  # company number
    re.compile(r"[A-Z]{2}\d{6}", re.ASCII),  # company number, e.g. SC123456
)


def validate_gb(value: str) -> CheckResult:
    if any(p.fullmatch(value) for p in _GB_PATTERNS):
        return CheckResult(True, value)
    return CheckResult(False, value, "GB: 8-digit company number or 9/12-digit VAT")


# ── Estonia: registry code ─────────────────────────────────────────

_EE_PATTERN = re.compile(r"\d{8,9}", re.ASCII)


def validate_ee(digits: str) -> CheckResult:
    if not _EE_PATTERN.fullmatch(digits):
        return CheckResult(False, digits, "EE registry code must be 8-9 digits")
    return CheckResult(True, digits)


# ── Generic EU validators ───────────────────────────────────────────

GENERIC_VALIDATORS: dict[CountryCode, Validator] = {
    CountryCode.AT: pattern_validator(r"U?\d{8,9}", "AT VAT: U + 8 digits"),
    CountryCode.BE: pattern_validator(r"[01]\d{9}", "BE VAT: 10 digits starting with 0 or 1"),
    CountryCode.BG: pattern_validator(r"\d{9,10}", "BG VAT: 9 or 10 digits"),
    CountryCode.CY: pattern_validator(r"\d{8}[A-Z]", "CY VAT: 8 digits + letter"),
    CountryCode.DE: pattern_validator(r"\d{9}", "DE VAT: 9 digits"),
    CountryCode.EL: pattern_validator(r"\d{9}", "EL VAT: 9 digits"),
    CountryCode.ES: pattern_validator(r"[A-Z0-9]\d{7}[A-Z0-9]", "ES VAT: letter/digit + 7 digits + letter/digit"),
    CountryCode.FR: pattern_validator(r"[A-Z0-9]{2}\d{9}", "FR VAT: 2 chars + 9 digits"),
    CountryCode.HR: pattern_validator(r"\d{11}", "HR VAT: 11 digits"),
    CountryCode.HU: pattern_validator(r"\d{8}", "HU VAT: 8 digits"),
    CountryCode.IE: pattern_validator(r"[0-9A-Z]\d{5,6}[A-Z]{1,2}", "IE VAT: 7-8 chars"),
    CountryCode.IT: pattern_validator(r"\d{11}", "IT VAT: 11 digits"),
    CountryCode.LT: pattern_validator(r"\d{9,12}", "LT VAT: 9 or 12 digits"),
    CountryCode.LU: pattern_validator(r"\d{8}", "LU VAT: 8 digits"),
    CountryCode.LV: pattern_validator(r"\d{11}", "LV VAT: 11 digits"),
    CountryCode.MT: pattern_validator(r"\d{8}", "MT VAT: 8 digits"),
    CountryCode.NL: pattern_validator(r"\d{9}B\d{2}", "NL VAT: 9 digits + B + 2 digits"),
    CountryCode.RO: pattern_validator(r"\d{2,10}", "RO VAT: 2-10 digits"),
    CountryCode.SE: pattern_validator(r"\d{12}", "SE VAT: 12 digits"),
    CountryCode.SI: pattern_validator(r"\d{8}", "SI VAT: 8 digits"),
    CountryCode.SK: pattern_validator(r"\d{10}", "SK VAT: 10 digits"),
}
