"""Utility modules for pgrest-openapi."""

from pgrest_openapi.utils.constants import (
    ErrorCode,
    ERROR_MESSAGES,
    ContentType,
)
from pgrest_openapi.utils.exceptions import (
    PgRestOpenAPIError,
    SnapshotLoadError,
    ProxyContractError,
)

__all__ = [
    "ErrorCode",
    "ERROR_MESSAGES",
    "ContentType",
    "PgRestOpenAPIError",
    "SnapshotLoadError",
    "ProxyContractError",
]
