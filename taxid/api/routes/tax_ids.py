"""Tax ID validation endpoints."""
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from taxid.api.schemas.tax_id import (
    TaxIdBatchRequest,
    TaxIdDetectRead,
    TaxIdFormatRead,
    TaxIdValidateRequest,
)
from taxid.core.config import settings
from taxid.models.tax_id import TaxIdValidation
from taxid.services.detection import detect_cleaned
from taxid.services.formatting import format_vat_number
from taxid.services.tax_id_service import validate_tax_id
from taxid.utils.vat import clean_tax_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tax-ids", tags=["tax-ids"])


@router.post("/validate", response_model=TaxIdValidation)
async def validate(body: TaxIdValidateRequest) -> TaxIdValidation:
    """Validate one tax ID. Invalid numbers are a 200 with valid=false."""
    return validate_tax_id(body.value)


@router.post("/validate/batch", response_model=List[TaxIdValidation])
async def validate_batch(body: TaxIdBatchRequest) -> List[TaxIdValidation]:
    """Validate several tax IDs, results in input order."""
    if len(body.values) > settings.max_batch_size:
        raise HTTPException(
            status_code=422,
            detail=f"At most {settings.max_batch_size} values per batch",
        )
    results = [validate_tax_id(v) for v in body.values]
    logger.info(
        "Batch validation: %d values, %d valid",
        len(results),
        sum(1 for r in results if r.valid),
    )
    return results


@router.get("/detect", response_model=TaxIdDetectRead)
async def detect(value: str = Query(..., max_length=200)) -> TaxIdDetectRead:
    """Detect the issuing country without validating the payload."""
    cleaned = clean_tax_id(value)
    return TaxIdDetectRead(value=cleaned, country=detect_cleaned(cleaned))


@router.get("/format", response_model=TaxIdFormatRead)
async def format_tax_id(
    value: str = Query(..., max_length=200),
    country: Optional[str] = Query(None, max_length=3),
) -> TaxIdFormatRead:
    """Display form with country-specific grouping."""
    return TaxIdFormatRead(value=value, formatted=format_vat_number(value, country))
