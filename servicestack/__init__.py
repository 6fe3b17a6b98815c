"""ServiceStack client for Python.

Typed JSON calls against ServiceStack-style HTTP APIs.

Public API:
    JsonServiceClient - Dispatches request models and decodes their responses
    ServiceStackRequest, ServiceStackResponse - Message contract base models
    ServiceStackError and subclasses - Error kinds raised by the client
"""

from servicestack._version import __version__
from servicestack.client import JsonServiceClient
from servicestack.exceptions import (
    ServiceStackAPIError,
    ServiceStackConfigError,
    ServiceStackDecodeError,
    ServiceStackError,
    ServiceStackMethodError,
    ServiceStackTransportError,
)
from servicestack.models import HttpMethod, ServiceStackRequest, ServiceStackResponse

__all__ = [
    "__version__",
    "JsonServiceClient",
    "HttpMethod",
    "ServiceStackRequest",
    "ServiceStackResponse",
    "ServiceStackError",
    "ServiceStackAPIError",
    "ServiceStackConfigError",
    "ServiceStackDecodeError",
    "ServiceStackMethodError",
    "ServiceStackTransportError",
]
