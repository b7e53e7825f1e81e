"""Tax ID request/response schemas."""
from typing import Annotated, Optional

from pydantic import BaseModel, Field

from taxid.models.country import CountryCode

# Raw input cap per identifier, separators included
MAX_VALUE_LENGTH = 200


class TaxIdValidateRequest(BaseModel):
    """Schema for validating a single tax ID."""

    value: str = Field(..., max_length=MAX_VALUE_LENGTH)


class TaxIdBatchRequest(BaseModel):
    """Schema for validating several tax IDs in one call."""

    values: list[Annotated[str, Field(max_length=MAX_VALUE_LENGTH)]] = Field(..., min_length=1)


class TaxIdDetectRead(BaseModel):
    value: str
    country: Optional[CountryCode] = None


class TaxIdFormatRead(BaseModel):
    value: str
    formatted: str
