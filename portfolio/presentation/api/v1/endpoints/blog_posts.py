"""Owner endpoints for blog posts."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from portfolio.application.schemas import BlogPostCreate, BlogPostResponse, BlogPostUpdate
from portfolio.application.services import BlogPostService
from portfolio.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    RecordValidationError,
)
from portfolio.infrastructure.dependencies import get_blog_post_service

router = APIRouter(prefix="/blog-posts", tags=["Blog Posts"])


@router.get("", response_model=list[BlogPostResponse])
async def list_posts(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: BlogPostService = Depends(get_blog_post_service),
) -> list[BlogPostResponse]:
    """List all of the owner's posts, drafts included."""
    posts = await service.list_posts(skip=skip, limit=limit)
    return [BlogPostResponse.model_validate(p, from_attributes=True) for p in posts]


@router.get("/{post_id}", response_model=BlogPostResponse)
async def get_post(
    post_id: int,
    service: BlogPostService = Depends(get_blog_post_service),
) -> BlogPostResponse:
    try:
        post = await service.get_post(post_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return BlogPostResponse.model_validate(post, from_attributes=True)


@router.post("", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    data: BlogPostCreate,
    service: BlogPostService = Depends(get_blog_post_service),
) -> BlogPostResponse:
    """Create a post; the slug is derived from the title when omitted."""
    try:
        post = await service.create_post(data)
    except RecordValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return BlogPostResponse.model_validate(post, from_attributes=True)


@router.patch("/{post_id}", response_model=BlogPostResponse)
async def update_post(
    post_id: int,
    data: BlogPostUpdate,
    service: BlogPostService = Depends(get_blog_post_service),
) -> BlogPostResponse:
    try:
        post = await service.update_post(post_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except RecordValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return BlogPostResponse.model_validate(post, from_attributes=True)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    service: BlogPostService = Depends(get_blog_post_service),
) -> None:
    """Delete a post; absent posts also answer 204."""
    try:
        await service.delete_post(post_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
