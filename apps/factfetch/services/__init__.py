"""Services package for the fact fetcher."""

from .fact_source import (
    FactFetchError,
    FactPayload,
    FactSourceClient,
    HttpStatusError,
    PayloadShapeError,
    TransportError,
)

__all__ = [
    "FactFetchError",
    "FactPayload",
    "FactSourceClient",
    "HttpStatusError",
    "PayloadShapeError",
    "TransportError",
]
