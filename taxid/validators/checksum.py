"""Checksum validators (weighted modulo-11) for PT, DK, NO, FI, PL, CZ and CH.

Each validator receives the payload with the country prefix already stripped
and returns a CheckResult. The payload is echoed back as ``normalized`` on
both success and failure.
"""
import re

from taxid.models.tax_id import CheckResult


_NON_DIGIT = re.compile(r"[^0-9]")

PT_WEIGHTS = (9, 8, 7, 6, 5, 4, 3, 2)
PT_ALLOWED_FIRST_DIGITS = frozenset("12356789")
DK_WEIGHTS = (2, 7, 6, 5, 4, 3, 2, 1)
NO_WEIGHTS = (3, 2, 7, 6, 5, 4, 3, 2)
FI_WEIGHTS = (7, 9, 10, 5, 8, 4, 2)
PL_WEIGHTS = (6, 5, 7, 2, 3, 4, 5, 6, 7)
CZ_WEIGHTS = (8, 7, 6, 5, 4, 3, 2)
CH_WEIGHTS = (5, 4, 3, 2, 7, 6, 5, 4)


def _is_digits(value: str, length: int) -> bool:
    """Exactly ``length`` ASCII digits."""
    return len(value) == length and value.isascii() and value.isdigit()


def _weighted_sum(digits: str, weights: tuple[int, ...]) -> int:
    return sum(int(d) * w for d, w in zip(digits, weights))


def _eleven_minus(remainder: int) -> int:
    """Common mod-11 rule: 0 stays 0, otherwise 11 - remainder."""
    return 0 if remainder == 0 else 11 - remainder


# ── Portugal: NIF ──────────────────────────────────────────────────

def validate_pt(digits: str) -> CheckResult:
    """Portuguese NIF: 9 digits, restricted first digit, mod-11 check digit."""
    if not _is_digits(digits, 9):
        return CheckResult(False, digits, "PT NIF must be 9 digits")
    if digits[0] not in PT_ALLOWED_FIRST_DIGITS:
        return CheckResult(False, digits, "PT NIF invalid first digit")

    remainder = _weighted_sum(digits, PT_WEIGHTS) % 11
    check_digit = 0 if remainder < 2 else 11 - remainder
    if int(digits[8]) != check_digit:
        return CheckResult(False, digits, "PT NIF checksum failed")
    return CheckResult(True, digits)


# ── Denmark: CVR ───────────────────────────────────────────────────

def validate_dk(digits: str) -> CheckResult:
    """Danish CVR: all 8 digits weighted, sum must be divisible by 11."""
    if not _is_digits(digits, 8):
        return CheckResult(False, digits, "DK CVR must be 8 digits")
    if _weighted_sum(digits, DK_WEIGHTS) % 11 != 0:
        return CheckResult(False, digits, "DK CVR checksum failed")
    return CheckResult(True, digits)


# ── Norway: Organisasjonsnummer ────────────────────────────────────

def validate_no(digits: str) -> CheckResult:
    if not _is_digits(digits, 9):
        return CheckResult(False, digits, "NO org.nr must be 9 digits")

    remainder = _weighted_sum(digits, NO_WEIGHTS) % 11
    if remainder == 1:
        return CheckResult(False, digits, "NO org.nr checksum invalid")
    if int(digits[8]) != _eleven_minus(remainder):
        return CheckResult(False, digits, "NO org.nr checksum failed")
    return CheckResult(True, digits)


# ── Finland: Y-tunnus ──────────────────────────────────────────────

def validate_fi(value: str) -> CheckResult:
    """Finnish Y-tunnus: 7 digits + check digit, written 1234567-8."""
    cleaned = value.replace("-", "")
    if not _is_digits(cleaned, 8):
        return CheckResult(False, cleaned, "FI Y-tunnus must be 7 digits + check digit")

    remainder = _weighted_sum(cleaned, FI_WEIGHTS) % 11
    if remainder == 1:
        return CheckResult(False, cleaned, "FI Y-tunnus checksum invalid")
    if int(cleaned[7]) != _eleven_minus(remainder):
        return CheckResult(False, cleaned, "FI Y-tunnus checksum failed")
    return CheckResult(True, cleaned)


# ── Poland: NIP ────────────────────────────────────────────────────

def validate_pl(digits: str) -> CheckResult:
    """Polish NIP: 10 digits; a weighted sum of 10 mod 11 has no valid check digit."""
    if not _is_digits(digits, 10):
        return CheckResult(False, digits, "PL NIP must be 10 digits")

    check_digit = _weighted_sum(digits, PL_WEIGHTS) % 11
    if check_digit == 10 or int(digits[9]) != check_digit:
        return CheckResult(False, digits, "PL NIP checksum failed")
    return CheckResult(True, digits)


# ── Czech Republic: IČO / DIČ ──────────────────────────────────────

def validate_cz(digits: str) -> CheckResult:
    """Czech IČO (8 digits, checksum). 9-10 digit DIČ numbers are accepted as-is."""
    if not _is_digits(digits, 8):
        if len(digits) in (9, 10) and digits.isascii() and digits.isdigit():
            return CheckResult(True, digits)
        return CheckResult(False, digits, "CZ IČO must be 8 digits")

    remainder = _weighted_sum(digits, CZ_WEIGHTS) % 11
    if remainder == 0:
        check_digit = 1
    elif remainder == 1:
        check_digit = 0
    else:
        check_digit = 11 - remainder

    if int(digits[7]) != check_digit:
        return CheckResult(False, digits, "CZ IČO checksum failed")
    return CheckResult(True, digits)


# ── Switzerland: UID ───────────────────────────────────────────────

def validate_ch(digits: str) -> CheckResult:
    """Swiss UID: CHE-XXX.XXX.XXX or bare 9 digits, last one is the check digit."""
    cleaned = _NON_DIGIT.sub("", digits)
    if not _is_digits(cleaned, 9):
        return CheckResult(False, cleaned, "CH UID must be 9 digits")

    remainder = _weighted_sum(cleaned, CH_WEIGHTS) % 11
    if remainder == 10:
        return CheckResult(False, cleaned, "CH UID checksum invalid")
    if int(cleaned[8]) != _eleven_minus(remainder):
        return CheckResult(False, cleaned, "CH UID checksum failed")
    return CheckResult(True, cleaned)
