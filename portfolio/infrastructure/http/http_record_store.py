"""Portfolio API client — implements the RemoteRecordStore interface over HTTP.

Lets a CollectionEditor run outside the server process and reconcile its
list through the owner endpoints (``/collections/{kind}``).
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from portfolio.application.interfaces import RemoteRecordStore
from portfolio.domain.entities import CollectionRecord, RecordStatus
from portfolio.domain.exceptions import EntityNotFoundError, StoreError

logger = logging.getLogger(__name__)


class HttpRecordStore(RemoteRecordStore):
    """Infrastructure adapter — talks to the portfolio REST API with httpx.

    The bearer token is the owner's session credential; the server binds it
    to the owner scope, so no scope is ever sent in a request body.
    """

    def __init__(
        self,
        kind: str,
        token: str,
        base_url: str = "http://localhost:8000/api/v1",
        http_client: httpx.AsyncClient | None = None,
    ):
        self._kind = kind
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the shared client if provided, otherwise a short-lived one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=30.0)

    async def _request(
        self, operation: str, method: str, path: str, payload: dict | None = None
    ) -> httpx.Response:
        url = f"{self._base_url}/collections/{self._kind}{path}"
        client = await self._get_client()
        should_close = self._http_client is None
        try:
            logger.debug("%s %s", method, url)
            return await client.request(method, url, headers=self._get_headers(), json=payload)
        except httpx.HTTPError as exc:
            raise StoreError(operation, str(exc)) from exc
        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _raise_store_error(operation: str, response: httpx.Response) -> None:
        try:
            detail = response.json().get("detail", response.text)
        except ValueError:
            detail = response.text
        raise StoreError(operation, str(detail), status_code=response.status_code)

    @staticmethod
    def _parse_record(data: dict[str, Any]) -> CollectionRecord:
        return CollectionRecord(
            id=data["id"],
            kind=data["kind"],
            fields=data.get("fields") or {},
            category=data.get("category"),
            order_key=data["order_key"],
            status=RecordStatus.CLEAN,
        )

    async def list(self) -> list[CollectionRecord]:
        response = await self._request("list", "GET", "")
        if response.status_code != 200:
            self._raise_store_error("list", response)
        return [self._parse_record(item) for item in response.json()]

    async def insert(self, record: CollectionRecord) -> CollectionRecord:
        payload = {
            "fields": record.fields,
            "category": record.category,
            "order_key": record.order_key,
        }
        response = await self._request("insert", "POST", "", payload)
        if response.status_code != 201:
            self._raise_store_error("insert", response)
        return self._parse_record(response.json())

    async def update(self, record_id: str, changes: dict[str, Any]) -> CollectionRecord:
        response = await self._request("update", "PATCH", f"/{record_id}", changes)
        if response.status_code == 404 and self._names_record(response, record_id):
            raise EntityNotFoundError(self._kind, record_id)
        if response.status_code != 200:
            self._raise_store_error("update", response)
        return self._parse_record(response.json())

    async def delete(self, record_id: str) -> bool:
        response = await self._request("delete", "DELETE", f"/{record_id}")
        if response.status_code == 404 and self._names_record(response, record_id):
            return False
        if response.status_code not in (200, 204):
            self._raise_store_error("delete", response)
        return True

    @staticmethod
    def _names_record(response: httpx.Response, record_id: str) -> bool:
        """True when a 404 is about the record itself.

        A 404 for an unknown kind or a wrong base URL does not name the
        record and is reported as a StoreError instead.
        """
        try:
            detail = response.json().get("detail")
        except ValueError:
            return False
        return isinstance(detail, str) and record_id in detail
