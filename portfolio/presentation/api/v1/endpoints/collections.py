"""Owner endpoints for list-style records (education, experience, projects, skills)."""

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio.application.schemas import (
    CollectionRecordCreate,
    CollectionRecordResponse,
    CollectionRecordUpdate,
)
from portfolio.application.services import CollectionRecordService
from portfolio.domain.exceptions import EntityNotFoundError, RecordValidationError, StoreError
from portfolio.infrastructure.dependencies import get_collection_record_service

router = APIRouter(prefix="/collections", tags=["Collections"])


@router.get("/{kind}", response_model=list[CollectionRecordResponse])
async def list_records(
    service: CollectionRecordService = Depends(get_collection_record_service),
) -> list[CollectionRecordResponse]:
    """List the owner's records of one kind, ordered by order_key."""
    records = await service.list_records()
    return [CollectionRecordResponse.model_validate(r, from_attributes=True) for r in records]


@router.post("/{kind}", response_model=CollectionRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_record(
    data: CollectionRecordCreate,
    service: CollectionRecordService = Depends(get_collection_record_service),
) -> CollectionRecordResponse:
    """Insert a record; the server assigns its id and owner scope."""
    try:
        record = await service.create_record(data)
    except RecordValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return CollectionRecordResponse.model_validate(record, from_attributes=True)


@router.patch("/{kind}/{record_id}", response_model=CollectionRecordResponse)
async def update_record(
    record_id: str,
    data: CollectionRecordUpdate,
    service: CollectionRecordService = Depends(get_collection_record_service),
) -> CollectionRecordResponse:
    """Apply a partial update to fields, category and/or order_key."""
    try:
        record = await service.update_record(record_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except RecordValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return CollectionRecordResponse.model_validate(record, from_attributes=True)


@router.delete("/{kind}/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record(
    record_id: str,
    service: CollectionRecordService = Depends(get_collection_record_service),
) -> None:
    """Delete a record. Deleting an absent record also answers 204."""
    await service.delete_record(record_id)
