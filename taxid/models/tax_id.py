"""Validation result types."""
from typing import NamedTuple, Optional

from pydantic import BaseModel

from taxid.models.country import CountryCode


class CheckResult(NamedTuple):
    """Outcome of a single country validator.

    ``normalized`` is always set, even on failure, so callers can echo back
    the best-effort canonical payload.
    """

    valid: bool
    normalized: str
    error: Optional[str] = None


class TaxIdValidation(BaseModel):
    """Final result of validating a raw tax ID string."""

    valid: bool
    country: Optional[CountryCode] = None
    normalized: str
    checksum_verified: bool = False
    error: Optional[str] = None

    model_config = {"frozen": True}
