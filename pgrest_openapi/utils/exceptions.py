"""Exception classes for pgrest-openapi."""

from pgrest_openapi.utils.constants import ErrorCode, ERROR_MESSAGES


class PgRestOpenAPIError(Exception):
    """Base exception class for pgrest-openapi."""

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        details: dict | None = None
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, "Unknown error")
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert the exception to a dictionary format.

        Returns:
            A dictionary representation of the error.
        """
        return {
            "status": "error",
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details
            }
        }


class SnapshotLoadError(PgRestOpenAPIError):
    """Database structure snapshot could not be read or validated."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(
            code=ErrorCode.SNAPSHOT_LOAD_FAILED,
            message=message,
            details={"path": path} if path else None
        )


class ProxyContractError(PgRestOpenAPIError):
    """Internal defect: a proxy URI reached the parser but cannot be parsed.

    Malformed proxy URIs are expected to be rejected before parsing, so
    this is never the result of ordinary bad configuration.
    """

    def __init__(self, uri: str):
        super().__init__(
            code=ErrorCode.PROXY_CONTRACT_VIOLATED,
            details={"uri": uri}
        )
