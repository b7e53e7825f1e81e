"""Country code → validator dispatch table."""
from typing import Optional

from taxid.models.country import CountryCode
from taxid.validators.checksum import (
    validate_ch,
    validate_cz,
    validate_dk,
    validate_fi,
    validate_no,
    validate_pl,
    validate_pt,
)
from taxid.validators.format import GENERIC_VALIDATORS, Validator, validate_ee, validate_gb

VALIDATORS: dict[CountryCode, Validator] = {
    CountryCode.PT: validate_pt,
    CountryCode.GB: validate_gb,
    CountryCode.DK: validate_dk,
    CountryCode.NO: validate_no,
    CountryCode.FI: validate_fi,
    CountryCode.EE: validate_ee,
    CountryCode.PL: validate_pl,
    CountryCode.CZ: validate_cz,
    CountryCode.CH: validate_ch,
    **GENERIC_VALIDATORS,
}


def get_validator(country: CountryCode) -> Optional[Validator]:
    return VALIDATORS.get(country)
