"""
Country reference data for tax ID validation.
Covers the 27 EU members plus the United Kingdom, Norway and Switzerland.
Used for prefix detection, EU-membership checks and the /countries endpoints.
"""
from typing import Optional

from taxid.models.country import CountryCode, CountryInfo


# Canonical order of the 2-letter prefixes
COUNTRY_PREFIXES: tuple[str, ...] = tuple(code.value for code in CountryCode)

# Jurisdictions whose identifiers embed a verifiable check digit
CHECKSUM_COUNTRIES: frozenset[CountryCode] = frozenset({
    CountryCode.PT,
    CountryCode.DK,
    CountryCode.NO,
    CountryCode.FI,
    CountryCode.PL,
    CountryCode.CZ,
    CountryCode.CH,
})

_NON_EU = frozenset({CountryCode.GB, CountryCode.NO, CountryCode.CH})

# Format: code → (name, local_name, tax_id_name, format_description)
_COUNTRY_DATA: dict[CountryCode, tuple[str, str, str, str]] = {
    CountryCode.AT: ("Austria", "Österreich", "UID", "U + 8 digits"),
    CountryCode.BE: ("Belgium", "België", "BTW", "10 digits starting with 0 or 1"),
    CountryCode.BG: ("Bulgaria", "България", "ЕИК", "9 or 10 digits"),
    CountryCode.CH: ("Switzerland", "Schweiz", "UID", "9 digits (CHE + 6 + check)"),
    CountryCode.CY: ("Cyprus", "Κύπρος", "ΦΠΑ", "8 digits + letter"),
    CountryCode.CZ: ("Czech Republic", "Česko", "IČO", "8 digits with checksum"),
    CountryCode.DE: ("Germany", "Deutschland", "USt-IdNr", "9 digits"),
    CountryCode.DK: ("Denmark", "Danmark", "CVR", "8 digits with Modulo 11"),
    CountryCode.EE: ("Estonia", "Eesti", "Registrikood", "8-9 digits"),
    CountryCode.EL: ("Greece", "Ελλάδα", "ΑΦΜ", "9 digits"),
    CountryCode.ES: ("Spain", "España", "NIF/CIF", "letter/digit + 7 digits + letter/digit"),
    CountryCode.FI: ("Finland", "Suomi", "Y-tunnus", "8 digits with Modulo 11"),
    CountryCode.FR: ("France", "France", "SIREN", "2 chars + 9 digits"),
    CountryCode.GB: ("United Kingdom", "United Kingdom", "VAT/Company No.", "8-digit company or 9/12-digit VAT"),
    CountryCode.HR: ("Croatia", "Hrvatska", "OIB", "11 digits"),
    CountryCode.HU: ("Hungary", "Magyarország", "Adószám", "8 digits"),
    CountryCode.IE: ("Ireland", "Éire", "VAT", "7-8 alphanumeric"),
    CountryCode.IT: ("Italy", "Italia", "P.IVA", "11 digits"),
    CountryCode.LT: ("Lithuania", "Lietuva", "PVM kodas", "9 or 12 digits"),
    CountryCode.LU: ("Luxembourg", "Luxembourg", "TVA", "8 digits"),
    CountryCode.LV: ("Latvia", "Latvija", "PVN", "11 digits"),
    CountryCode.MT: ("Malta", "Malta", "VAT", "8 digits"),
    CountryCode.NL: ("Netherlands", "Nederland", "BTW", "9 digits + B + 2 digits"),
    CountryCode.NO: ("Norway", "Norge", "Org.nr", "9 digits with Modulo 11"),
    CountryCode.PL: ("Poland", "Polska", "NIP", "10 digits with checksum"),
    CountryCode.PT: ("Portugal", "Portugal", "NIF", "9 digits with Modulo 11"),
    CountryCode.RO: ("Romania", "România", "CUI", "2-10 digits"),
    CountryCode.SE: ("Sweden", "Sverige", "Org.nr", "12 digits"),
    CountryCode.SI: ("Slovenia", "Slovenija", "DDV", "8 digits"),
    CountryCode.SK: ("Slovakia", "Slovensko", "IČ DPH", "10 digits"),
}

COUNTRIES: dict[str, CountryInfo] = {
    code.value: CountryInfo(
        code=code,
        name=name,
        local_name=local_name,
        tax_id_name=tax_id_name,
        eu_member=code not in _NON_EU,
        has_checksum=code in CHECKSUM_COUNTRIES,
        format_description=format_description,
    )
    for code, (name, local_name, tax_id_name, format_description) in _COUNTRY_DATA.items()
}


def to_country_code(value: Optional[str]) -> Optional[CountryCode]:
    """Map a (case-insensitive) 2-letter string to its CountryCode, or None."""
    if not value:
        return None
    try:
        return CountryCode(value.strip().upper())
    except ValueError:
        return None


def get_country(code: Optional[str]) -> Optional[CountryInfo]:
    """Return metadata for a country code, or None if the code is unknown."""
    country = to_country_code(code)
    if country is None:
        return None
    return COUNTRIES[country.value]


def is_eu_member(code: Optional[str]) -> bool:
    """True for the 27 EU members (case-insensitive); False for GB, NO, CH and unknown codes."""
    info = get_country(code)
    return bool(info and info.eu_member)


def list_countries(eu_only: bool = False) -> list[CountryInfo]:
    """All countries in canonical prefix order, optionally EU members only."""
    countries = [COUNTRIES[code] for code in COUNTRY_PREFIXES]
    if eu_only:
        return [c for c in countries if c.eu_member]
    return countries
