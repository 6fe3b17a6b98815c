"""Typed JSON client for ServiceStack-style HTTP APIs.

Example usage:
    from servicestack import JsonServiceClient

    async with JsonServiceClient("https://api.example.com") as client:
        client.set_bearer_token("your-token")
        response = await client.post(Hello(name="World"))
        print(response.result)
"""

import json
import os
import sys
from typing import Any, TypeVar

import httpx

from servicestack._internal.codec import decode_response, encode_body, response_adapter
from servicestack._internal.http import DEFAULT_TIMEOUT, create_http_client
from servicestack._internal.redaction import redact
from servicestack.exceptions import (
    ServiceStackAPIError,
    ServiceStackConfigError,
    ServiceStackTransportError,
)
from servicestack.models.contract import (
    HttpMethod,
    ServiceStackRequest,
    normalize_method,
    resolve_method,
    resolve_path,
    resolve_response_type,
)

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)

T = TypeVar("T")


class JsonServiceClient:
    """Issues one typed JSON call per invocation against a fixed base URL.

    Request models carry their own path, verb and response type (see
    ``servicestack.models``). Every call either returns the decoded response or
    raises exactly one ServiceStackError subclass; nothing is retried.

    Calls may run concurrently on one client. The bearer token is the only
    mutable state and is read without locking when each call assembles its
    headers, so a token change racing an in-flight call may or may not apply
    to it. Callers that need strict ordering must serialize token updates
    themselves.
    """

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        *,
        bearer_token: str | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Target origin, e.g. "https://api.example.com". Trailing
                slashes are stripped.
            http_client: Pre-configured transport (custom timeout, proxy, TLS).
                When omitted, a default one is created and owned by this client.
            bearer_token: Optional initial bearer token.
            debug: Enable debug logging to stderr.
        """
        self._base_url = base_url.rstrip("/")
        self._owns_http_client = http_client is None
        self._http_client = http_client if http_client is not None else create_http_client()
        self._bearer_token = bearer_token
        self._debug = debug

    @classmethod
    def from_env(cls) -> "JsonServiceClient":
        """Create a client from environment variables.

        Required environment variables:
            SERVICESTACK_BASE_URL: The target origin.

        Optional environment variables:
            SERVICESTACK_BEARER_TOKEN: Initial bearer token.
            SERVICESTACK_TIMEOUT_MS: Request timeout in milliseconds.
            SERVICESTACK_DEBUG: Set to "1" to enable debug logging.

        Raises:
            ServiceStackConfigError: If SERVICESTACK_BASE_URL is not set.
            ValueError: If SERVICESTACK_TIMEOUT_MS is not an integer.
        """
        base_url = os.environ.get("SERVICESTACK_BASE_URL")
        if not base_url:
            raise ServiceStackConfigError("SERVICESTACK_BASE_URL is not set")

        bearer_token = os.environ.get("SERVICESTACK_BEARER_TOKEN") or None
        debug = os.environ.get("SERVICESTACK_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("SERVICESTACK_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(
            base_url,
            create_http_client(timeout=timeout_ms / 1000),
            bearer_token=bearer_token,
            debug=debug,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def base_url(self) -> str:
        """Base URL without trailing slash."""
        return self._base_url

    @property
    def http_client(self) -> httpx.AsyncClient:
        """The underlying transport."""
        return self._http_client

    @property
    def bearer_token(self) -> str | None:
        """The current bearer token, if any."""
        return self._bearer_token

    def set_bearer_token(self, token: str) -> None:
        """Use ``token`` for every call issued from now on."""
        self._bearer_token = token

    def clear_bearer_token(self) -> None:
        """Stop sending an Authorization header."""
        self._bearer_token = None

    def resolve_url(self, path: str) -> str:
        """Absolute call target for ``path``."""
        return f"{self._base_url}{path}"

    # =========================================================================
    # Typed Calls
    # =========================================================================

    async def get(self, request: ServiceStackRequest[T]) -> T:
        """Send ``request`` as GET (no body)."""
        return await self._send_request(request, "GET")

    async def post(self, request: ServiceStackRequest[T]) -> T:
        """Send ``request`` as POST with a JSON body."""
        return await self._send_request(request, "POST")

    async def put(self, request: ServiceStackRequest[T]) -> T:
        """Send ``request`` as PUT with a JSON body."""
        return await self._send_request(request, "PUT")

    async def delete(self, request: ServiceStackRequest[T]) -> T:
        """Send ``request`` as DELETE with a JSON body."""
        return await self._send_request(request, "DELETE")

    async def patch(self, request: ServiceStackRequest[T]) -> T:
        """Send ``request`` as PATCH with a JSON body."""
        return await self._send_request(request, "PATCH")

    async def send(self, request: ServiceStackRequest[T]) -> T:
        """Send ``request`` with the verb declared by its ``method()`` (POST by default)."""
        return await self._send_request(request, resolve_method(request))

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        response_type: Any = Any,
    ) -> Any:
        """Make a raw call bypassing the request model contract.

        Args:
            method: HTTP verb, case-insensitive.
            path: Endpoint path appended to the base URL.
            body: Optional JSON body; attached for any verb when not None.
            response_type: Type the response body is decoded into. Defaults to
                plain JSON data.

        Returns:
            The decoded response.
        """
        verb = normalize_method(method)
        adapter = response_adapter(response_type)
        payload = encode_body(body) if body is not None else None
        return await self._execute(verb, path, payload, body is not None, adapter)

    async def _send_request(self, request: Any, method: str) -> Any:
        """Resolve the contract of ``request`` and dispatch it."""
        verb = normalize_method(method)
        path = resolve_path(request)
        adapter = response_adapter(resolve_response_type(request))

        has_body = verb != "GET"
        payload = encode_body(request) if has_body else None
        return await self._execute(verb, path, payload, has_body, adapter)

    async def _execute(
        self,
        verb: HttpMethod,
        path: str,
        payload: Any,
        has_body: bool,
        adapter: Any,
    ) -> Any:
        url = self.resolve_url(path)
        headers = self._get_headers()

        kwargs: dict[str, Any] = {}
        if has_body:
            kwargs["json"] = payload

        self._log_debug(f"{verb} {url}")
        if has_body:
            self._log_debug(f"Request body: {json.dumps(redact(payload), default=str)}")

        try:
            response = await self._http_client.request(verb, url, headers=headers, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._log_debug(f"{verb} {url} failed: {e!r}")
            raise ServiceStackTransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            self._log_debug(f"{verb} {url} failed with status {response.status_code}")
            raise ServiceStackAPIError(response.text, status_code=response.status_code)

        self._log_debug(f"{verb} {url} succeeded with status {response.status_code}")
        return decode_response(response.content, adapter)

    def _get_headers(self) -> dict[str, str]:
        """Get request headers, with authorization when a token is set."""
        headers = {"Accept": "application/json"}
        token = self._bearer_token
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[servicestack] {message}", file=sys.stderr)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "JsonServiceClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
