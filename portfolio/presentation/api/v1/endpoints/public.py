"""Public, read-only endpoints for the portfolio site. No credential required."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from portfolio.application.schemas import (
    BlogPostResponse,
    CategoryGroupResponse,
    CollectionRecordResponse,
    ProfileResponse,
)
from portfolio.application.services import BlogPostService, ProfileService, PublicPortfolioService
from portfolio.domain.exceptions import EntityNotFoundError
from portfolio.infrastructure.dependencies import (
    get_public_blog_post_service,
    get_public_portfolio_service,
    get_public_profile_service,
)

router = APIRouter(prefix="/public", tags=["Public"])


@router.get("/collections/{kind}", response_model=list[CollectionRecordResponse])
async def list_public_records(
    kind: str,
    service: PublicPortfolioService = Depends(get_public_portfolio_service),
) -> list[CollectionRecordResponse]:
    try:
        records = await service.list_records(kind)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [CollectionRecordResponse.model_validate(r, from_attributes=True) for r in records]


@router.get("/skills/grouped", response_model=list[CategoryGroupResponse])
async def list_grouped_skills(
    service: PublicPortfolioService = Depends(get_public_portfolio_service),
) -> list[CategoryGroupResponse]:
    """Skills grouped by category, categories in order of first appearance."""
    groups = await service.grouped_records("skills")
    return [
        CategoryGroupResponse(
            category=category,
            records=[CollectionRecordResponse.model_validate(r, from_attributes=True) for r in records],
        )
        for category, records in groups.items()
    ]


@router.get("/blog-posts", response_model=list[BlogPostResponse])
async def list_published_posts(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    category: str | None = Query(None, max_length=100),
    service: BlogPostService = Depends(get_public_blog_post_service),
) -> list[BlogPostResponse]:
    """Published posts only, newest first, optionally narrowed to one category."""
    posts = await service.list_published(skip=skip, limit=limit, category=category)
    return [BlogPostResponse.model_validate(p, from_attributes=True) for p in posts]


@router.get("/blog-posts/{slug}", response_model=BlogPostResponse)
async def get_published_post(
    slug: str,
    service: BlogPostService = Depends(get_public_blog_post_service),
) -> BlogPostResponse:
    try:
        post = await service.get_published_by_slug(slug)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return BlogPostResponse.model_validate(post, from_attributes=True)


@router.get("/profile", response_model=ProfileResponse)
async def get_public_profile(
    service: ProfileService = Depends(get_public_profile_service),
) -> ProfileResponse:
    """The site owner's profile for the hero and about sections."""
    try:
        profile = await service.get_public_profile()
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProfileResponse.model_validate(profile, from_attributes=True)
