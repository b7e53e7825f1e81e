"""Display formatting of tax IDs with country-specific digit grouping."""
import re
from typing import Callable, Optional

from taxid.services.detection import detect_cleaned
from taxid.utils.vat import clean_tax_id, strip_country_prefix


def _regroup(pattern: str, template: str) -> Callable[[str], str]:
    """Rewrite the first match of ``pattern`` with ``template``, leave the rest untouched."""
    compiled = re.compile(pattern, re.ASCII)
    return lambda d: compiled.sub(template, d, count=1)


def _format_gb(d: str) -> str:
    # 9-digit VAT: 123 4567 89, company numbers stay as-is
    if len(d) == 9:
        return re.sub(r"(\d{3})(\d{4})(\d{2})", r"\1 \2 \3", d, count=1, flags=re.ASCII)
    return d


def _format_fi(d: str) -> str:
    return f"{d[:7]}-{d[7:]}" if len(d) == 8 else d


def _format_fr(d: str) -> str:
    if len(d) == 11:
        return f"{d[:2]} {d[2:5]} {d[5:8]} {d[8:]}"
    return d


def _format_es(d: str) -> str:
    return f"{d[0]}-{d[1:8]}-{d[8]}" if len(d) == 9 else d


def _format_se(d: str) -> str:
    return f"{d[:6]}-{d[6:10]}-{d[10:]}" if len(d) == 12 else d


_THREE_BY_THREE = _regroup(r"(\d{3})(\d{3})(\d{3})", r"\1 \2 \3")

FORMAT_RULES: dict[str, Callable[[str], str]] = {
    "PT": _THREE_BY_THREE,  # 502 011 378
    "DK": _regroup(r"(\d{2})(\d{2})(\d{2})(\d{2})", r"\1 \2 \3 \4"),  # 10 15 08 17
    "GB": _format_gb,
    "NO": _THREE_BY_THREE,  # 923 609 016
    "FI": _format_fi,  # 0123456-2
    "PL": _regroup(r"(\d{3})(\d{3})(\d{2})(\d{2})", r"\1-\2-\3-\4"),  # 774-000-14-54
    "CZ": _regroup(r"(\d{3})(\d{2})(\d{3})", r"\1 \2 \3"),  # 255 96 641
    "CH": _regroup(r"(\d{3})(\d{3})(\d{3})", r"\1.\2.\3"),  # 105.835.786
    "DE": _THREE_BY_THREE,
    "FR": _format_fr,  # XX 123 456 789
    "IT": _regroup(r"(\d{3})(\d{4})(\d{4})", r"\1 \2 \3"),  # 123 4567 8901
    "ES": _format_es,  # X-1234567-X
    "NL": lambda d: d,
    "BE": _regroup(r"(\d{4})(\d{3})(\d{3})", r"\1.\2.\3"),  # 0123.456.789
    "SE": _format_se,  # 123456-7890-01
}


def format_vat_number(raw: Optional[str], country: Optional[str] = None) -> str:
    """
    Format a tax ID with country-specific grouping for display.

    The country is inferred when not given. If it cannot be inferred the
    cleaned input is returned unchanged; this function never raises.

    Examples:
        >>> format_vat_number("PT502011378")
        'PT 502 011 378'
        >>> format_vat_number("502011378", "pt")
        'PT 502 011 378'
        >>> format_vat_number("XXXXX")
        'XXXXX'
    """
    cleaned = clean_tax_id(raw)

    code = country.strip().upper() if country else None
    if not code:
        detected = detect_cleaned(cleaned)
        if detected is None:
            return cleaned
        code = detected.value

    digits = strip_country_prefix(cleaned, code)
    rule = FORMAT_RULES.get(code)
    formatted = rule(digits) if rule else digits
    return f"{code} {formatted}"
