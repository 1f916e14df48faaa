"""Constants for pgrest-openapi."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error code enumeration."""

    SNAPSHOT_LOAD_FAILED = "ERR_001"
    PROXY_CONTRACT_VIOLATED = "ERR_002"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.SNAPSHOT_LOAD_FAILED: "Unable to load the database structure snapshot",
    ErrorCode.PROXY_CONTRACT_VIOLATED: "Proxy URI passed validation but cannot be parsed",
}


class ContentType(str, Enum):
    """Media types advertised by the generated document."""

    APPLICATION_JSON = "application/json"
    SINGULAR_JSON = "application/vnd.pgrst.object+json"
    TEXT_CSV = "text/csv"
    OPENAPI = "application/openapi+json"


PRODUCT_VERSION = "5.2.0"
DOCS_VERSION = "v5.2"
DOCS_BASE_URL = "https://postgrest.org/en/"

API_TITLE = "PostgREST API"
DEFAULT_API_DESCRIPTION = "This is a dynamic API generated by PostgREST"

# Server host settings that mean "listen on every interface"
WILDCARD_HOSTS = frozenset({"*", "*4", "!4", "*6", "!6"})
