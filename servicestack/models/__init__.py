"""Message contract models.

    from servicestack.models import ServiceStackRequest, ServiceStackResponse

    class HelloResponse(ServiceStackResponse):
        result: str

    class Hello(ServiceStackRequest[HelloResponse]):
        name: str

        def path(self) -> str:
            return "/hello"
"""

from servicestack.models.contract import (
    DEFAULT_METHOD,
    HTTP_METHODS,
    HttpMethod,
    ServiceStackRequest,
    ServiceStackResponse,
    normalize_method,
    resolve_method,
    resolve_path,
    resolve_response_type,
)

__all__ = [
    "DEFAULT_METHOD",
    "HTTP_METHODS",
    "HttpMethod",
    "ServiceStackRequest",
    "ServiceStackResponse",
    "normalize_method",
    "resolve_method",
    "resolve_path",
    "resolve_response_type",
]
