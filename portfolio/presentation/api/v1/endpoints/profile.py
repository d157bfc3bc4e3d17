"""Owner endpoints for the profile."""

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio.application.schemas import ProfileResponse, ProfileUpsert
from portfolio.application.services import ProfileService
from portfolio.domain.exceptions import EntityNotFoundError, RecordValidationError
from portfolio.infrastructure.dependencies import get_profile_service

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=ProfileResponse)
async def get_profile(
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    try:
        profile = await service.get_profile()
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProfileResponse.model_validate(profile, from_attributes=True)


@router.put("", response_model=ProfileResponse)
async def upsert_profile(
    data: ProfileUpsert,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Create or replace the owner's profile."""
    try:
        profile = await service.upsert_profile(data)
    except RecordValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, detail=str(e))
    return ProfileResponse.model_validate(profile, from_attributes=True)
