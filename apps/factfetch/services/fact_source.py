"""HTTP client for the remote fact source."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class FactPayload(BaseModel):
    fact: str


class FactFetchError(Exception):
    """Base class for every way a fact fetch can fail."""

    kind = "unknown"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class TransportError(FactFetchError):
    kind = "transport"


class HttpStatusError(FactFetchError):
    kind = "http_status"

    def __init__(self, status_code: int, detail: str | None = None) -> None:
        super().__init__(detail or f"HTTP error! status: {status_code}")
        self.status_code = status_code


class PayloadShapeError(FactFetchError):
    kind = "payload_shape"


class FactSourceClient:
    """Issues a single GET against the configured fact endpoint."""

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not endpoint:
            raise ValueError("Fact source endpoint is required")
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    async def fetch_fact(self) -> FactPayload:
        client_kwargs: dict[str, Any] = {
            "headers": JSON_HEADERS,
            "transport": self._transport,
            "follow_redirects": True,
        }
        if self.timeout is not None:
            client_kwargs["timeout"] = self.timeout

        async with httpx.AsyncClient(**client_kwargs) as client:
            try:
                response = await client.get(self.endpoint)
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise TransportError(f"{type(exc).__name__}: {exc}") from exc

        logger.debug("Fact source responded with status %s", response.status_code)
        if not response.is_success:
            raise HttpStatusError(response.status_code)

        return parse_fact_payload(response)


def parse_fact_payload(response: httpx.Response) -> FactPayload:
    try:
        data = response.json()
    except (ValueError, RecursionError) as exc:
        raise PayloadShapeError(
            f"Response body did not contain valid JSON: {type(exc).__name__}: {exc}"
        ) from exc

    try:
        return FactPayload.model_validate(data)
    except ValidationError as exc:
        raise PayloadShapeError(
            f"Response is missing a text 'fact' field: {exc.errors()[0]['msg']}"
        ) from exc


__all__ = [
    "FactFetchError",
    "FactPayload",
    "FactSourceClient",
    "HttpStatusError",
    "JSON_HEADERS",
    "PayloadShapeError",
    "TransportError",
    "parse_fact_payload",
]
