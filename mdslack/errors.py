"""Error types and probe failure classification."""

import asyncio
import httpx


class MdslackError(Exception):
    """Base class for all mdslack errors."""
    pass

class ConfigError(MdslackError):
    """Invalid settings (bad timeout, unreadable .env, ...)."""
    pass


def classify_probe_error(e: BaseException) -> str:
    """Classify a liveness-probe exception into a short rejection reason.

    The converter never surfaces these errors; the reason only ends up in
    debug logs and in ``Admission.reason``.
    """
    # 1: HTTP status errors (probe used raise_for_status)
    if isinstance(e, httpx.HTTPStatusError):
        return f"HTTP {e.response.status_code}"

    # 2-3: Network / timeout errors
    if isinstance(e, httpx.TimeoutException):
        return "timed out"
    if isinstance(e, asyncio.TimeoutError):
        return "timed out"
    if isinstance(e, httpx.ConnectError):
        return "connection failed"
    if isinstance(e, httpx.TooManyRedirects):
        return "too many redirects"

    # 4: URL httpx refuses to send
    if isinstance(e, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return "invalid URL"

    # 5: Anything else from the transport layer
    if isinstance(e, httpx.HTTPError):
        return f"request failed ({type(e).__name__})"

    # 6: Fallback — include type name for debugging
    return f"probe error ({type(e).__name__})"
