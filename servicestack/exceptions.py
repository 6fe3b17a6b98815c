"""Public exceptions for the ServiceStack client."""


class ServiceStackError(Exception):
    """Base exception for all client errors.

    Also raised directly for caller-supplied failures that fit no other kind.
    """


class ServiceStackAPIError(ServiceStackError):
    """Non-success HTTP status returned by the API.

    The message is the raw response body text; it is never decoded since an
    error body need not match the success response type.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ServiceStackTransportError(ServiceStackError):
    """Connection, timeout, TLS or protocol failure reported by the transport."""


class ServiceStackDecodeError(ServiceStackError):
    """Request or response body does not match the expected shape."""


class ServiceStackMethodError(ServiceStackError):
    """HTTP method outside GET, POST, PUT, DELETE and PATCH."""

    def __init__(self, method: str) -> None:
        super().__init__(f"Unsupported HTTP method: {method}")
        self.method = method


class ServiceStackConfigError(ServiceStackError):
    """Configuration error (missing env vars, incomplete request contract)."""
