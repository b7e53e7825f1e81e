"""Country code enum and metadata model."""
import enum

from pydantic import BaseModel

# Alternate 3-letter Swiss UID prefix
SWISS_UID_PREFIX = "CHE"


class CountryCode(str, enum.Enum):
    """Canonical 2-letter tax ID prefixes (27 EU members + GB, NO, CH)."""

    AT = "AT"
    BE = "BE"
    BG = "BG"
    CH = "CH"
    CY = "CY"
    CZ = "CZ"
    DE = "DE"
    DK = "DK"
    EE = "EE"
    EL = "EL"
    ES = "ES"
    FI = "FI"
    FR = "FR"
    GB = "GB"
    HR = "HR"
    HU = "HU"
    IE = "IE"
    IT = "IT"
    LT = "LT"
    LU = "LU"
    LV = "LV"
    MT = "MT"
    NL = "NL"
    NO = "NO"
    PL = "PL"
    PT = "PT"
    RO = "RO"
    SE = "SE"
    SI = "SI"
    SK = "SK"


class CountryInfo(BaseModel):
    """Static metadata for one issuing jurisdiction."""

    code: CountryCode
    name: str
    local_name: str
    tax_id_name: str
    eu_member: bool
    has_checksum: bool
    format_description: str

    model_config = {"frozen": True}
