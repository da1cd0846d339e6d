from .errors import ClientInputError, InternalError, RelayError, UpstreamError

__all__ = ["ClientInputError", "InternalError", "RelayError", "UpstreamError"]
