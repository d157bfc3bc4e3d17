"""Tests for the blog post endpoints, owner and public."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_derives_slug(client: AsyncClient, owner_headers: dict):
    response = await client.post(
        "/api/v1/blog-posts",
        json={"title": "Điện Biên Phủ Street", "content": "Body"},
        headers=owner_headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["slug"] == "dien-bien-phu-street"
    assert body["lifecycle_state"] == "draft"
    assert body["published_at"] is None


@pytest.mark.asyncio
async def test_duplicate_slug_is_409(client: AsyncClient, owner_headers: dict):
    payload = {"title": "Same", "content": "Body"}
    await client.post("/api/v1/blog-posts", json=payload, headers=owner_headers)
    response = await client.post("/api/v1/blog-posts", json=payload, headers=owner_headers)
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_publish_then_retitle_keeps_slug(client: AsyncClient, owner_headers: dict):
    created = (await client.post(
        "/api/v1/blog-posts", json={"title": "Hello", "content": "Body"}, headers=owner_headers
    )).json()

    published = (await client.patch(
        f"/api/v1/blog-posts/{created['id']}",
        json={"lifecycle_state": "published"},
        headers=owner_headers,
    )).json()
    assert published["published_at"] is not None

    retitled = (await client.patch(
        f"/api/v1/blog-posts/{created['id']}",
        json={"title": "Hello again"},
        headers=owner_headers,
    )).json()
    assert retitled["slug"] == "hello"
    assert retitled["published_at"] is not None


@pytest.mark.asyncio
async def test_public_view_only_shows_published(client: AsyncClient, owner_headers: dict):
    await client.post(
        "/api/v1/blog-posts", json={"title": "Draft", "content": "A"}, headers=owner_headers
    )
    await client.post(
        "/api/v1/blog-posts",
        json={"title": "Live", "content": "B", "lifecycle_state": "published"},
        headers=owner_headers,
    )

    listing = await client.get("/api/v1/public/blog-posts")
    assert [p["slug"] for p in listing.json()] == ["live"]
    assert (await client.get("/api/v1/public/blog-posts/live")).status_code == 200
    assert (await client.get("/api/v1/public/blog-posts/draft")).status_code == 404


@pytest.mark.asyncio
async def test_delete_post_twice(client: AsyncClient, owner_headers: dict):
    created = (await client.post(
        "/api/v1/blog-posts", json={"title": "Bye", "content": "Body"}, headers=owner_headers
    )).json()
    url = f"/api/v1/blog-posts/{created['id']}"
    assert (await client.delete(url, headers=owner_headers)).status_code == 204
    assert (await client.delete(url, headers=owner_headers)).status_code == 204
    assert (await client.get(url, headers=owner_headers)).status_code == 404


@pytest.mark.asyncio
async def test_blog_posts_require_credential(client: AsyncClient):
    response = await client.post("/api/v1/blog-posts", json={"title": "X", "content": "Y"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_public_listing_filters_by_category(client: AsyncClient, owner_headers: dict):
    for title, category in (("Typed Python", "python"), ("React hooks", "react")):
        await client.post(
            "/api/v1/blog-posts",
            json={"title": title, "content": "Body", "category": category, "lifecycle_state": "published"},
            headers=owner_headers,
        )

    response = await client.get("/api/v1/public/blog-posts", params={"category": "python"})

    assert [p["slug"] for p in response.json()] == ["typed-python"]
