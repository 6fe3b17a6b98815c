"""Default HTTP transport configuration."""

import httpx

from servicestack._version import __version__

DEFAULT_TIMEOUT = 30.0


def create_http_client(*, timeout: float = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    """Create the transport used when the caller does not supply one.

    Args:
        timeout: Request timeout in seconds, fixed for the client's lifetime.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": f"servicestack-python/{__version__}"},
    )
