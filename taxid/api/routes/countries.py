"""Country reference endpoints."""
from typing import List

from fastapi import APIRouter, HTTPException

from taxid.models.country import CountryInfo
from taxid.services.country_reference import get_country, list_countries

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", response_model=List[CountryInfo])
async def get_countries(eu_only: bool = False) -> List[CountryInfo]:
    """List supported countries in canonical prefix order."""
    return list_countries(eu_only=eu_only)


@router.get("/{code}", response_model=CountryInfo)
async def get_country_by_code(code: str) -> CountryInfo:
    """Get one country by its 2-letter code (case-insensitive)."""
    info = get_country(code)
    if info is None:
        raise HTTPException(status_code=404, detail="Country not found")
    return info
