from typing import Any, Dict, Optional

from media_relay.models.response import ErrorResponse


class RelayError(Exception):
    """
    Base relay failure.
    Carries the status code and JSON payload returned to the caller.
    """

    status_code: int = 500

    def __init__(
        self,
        error: str,
        message: Optional[str] = None,
        details: Optional[str] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(error)
        if status_code is not None:
            self.status_code = status_code
        self.response = ErrorResponse(error=error, message=message, details=details)

    @property
    def payload(self) -> Dict[str, Any]:
        return self.response.model_dump(exclude_none=True)


class ClientInputError(RelayError):
    """Required input absent or unreadable"""
    status_code = 400


class UpstreamError(RelayError):
    """Upstream answered with a non-2xx status; the status is mirrored"""

    def __init__(self, status_code: int, error: str, message: Optional[str] = None, details: Optional[str] = None):
        super().__init__(error, message=message, details=details, status_code=status_code)


class InternalError(RelayError):
    """Anything else that went wrong while relaying"""
    status_code = 500

    def __init__(self, message: str, error: str = "Internal server error"):
        super().__init__(error, message=message)
