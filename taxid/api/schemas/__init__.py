"""API schemas."""
from taxid.api.schemas.tax_id import (
    TaxIdBatchRequest,
    TaxIdDetectRead,
    TaxIdFormatRead,
    TaxIdValidateRequest,
)

__all__ = ["TaxIdValidateRequest", "TaxIdBatchRequest", "TaxIdDetectRead", "TaxIdFormatRead"]
