"""Image admission — decide whether an image URL may become an image block.

Slack fetches image blocks itself and rejects the whole message when an
image_url cannot be downloaded, so every image goes through two gates:

1. Syntactic: absolute http(s) URL, not a local or embedded path.
2. Liveness: a HEAD request must answer with a status below 400.

Rejection is silent: callers just leave the image out.
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional
from urllib.parse import urlsplit

import httpx

from .config import MdslackSettings, load_settings
from .errors import classify_probe_error

logger = logging.getLogger("mdslack.images")

# A probe returns the HTTP status for a URL, or raises when unreachable
Probe = Callable[[str], Awaitable[int]]

ALLOWED_SCHEMES = frozenset({"http", "https"})

# Windows drives and exported-document placeholders
LOCAL_PATH_PREFIXES = ("C:", "D:", "file:", "embedded:")


def is_valid_http_url(url: str) -> bool:
    """Return True if url is an absolute http:// or https:// URL."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return parts.scheme in ALLOWED_SCHEMES and bool(parts.netloc)


def is_local_or_embedded_path(url: str) -> bool:
    return url.startswith(LOCAL_PATH_PREFIXES)


@dataclass(frozen=True)
class Admission:
    """Outcome of the admission gates for one URL."""
    url: str
    admitted: bool
    reason: str = ""  # empty when admitted


class HttpProbe:
    """Default liveness probe: HEAD request through a shared httpx client.

    Use as an async context manager so the client is closed when the
    conversion finishes.
    """

    def __init__(self, settings: Optional[MdslackSettings] = None, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings or load_settings()
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "HttpProbe":
        if self._client is None:
            timeout = self.settings.probe_timeout if self.settings.probe_timeout > 0 else None
            self._client = httpx.AsyncClient(
                timeout=timeout,
                follow_redirects=self.settings.follow_redirects,
                headers={"User-Agent": self.settings.probe_user_agent},
            )
        return self

    async def __aexit__(self, *exc_info):
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __call__(self, url: str) -> int:
        if self._client is None:
            raise RuntimeError("HttpProbe used outside of 'async with'")
        response = await self._client.head(url)
        return response.status_code


class ImageAdmission:
    """Two-stage gate applied to every image URL, wherever it appears."""

    def __init__(self, probe: Probe):
        self.probe = probe

    def check_syntax(self, url: Optional[str]) -> Admission:
        """Synchronous stage: scheme and path rules only."""
        if not url:
            return Admission(url or "", False, "missing URL")
        if is_local_or_embedded_path(url):
            return Admission(url, False, "local or embedded path")
        if not is_valid_http_url(url):
            return Admission(url, False, "not an http(s) URL")
        return Admission(url, True)

    async def admit(self, url: Optional[str]) -> Admission:
        """Run both stages. Never raises."""
        result = self.check_syntax(url)
        if not result.admitted:
            logger.debug(f"Image rejected ({result.reason}): {url!r}")
            return result

        # First failure is final: no retries
        try:
            status = await self.probe(url)
        except Exception as e:
            result = Admission(url, False, classify_probe_error(e))
        else:
            if not isinstance(status, int) or isinstance(status, bool):
                result = Admission(url, False, f"invalid status {status!r}")
            elif status >= 400:
                result = Admission(url, False, f"HTTP {status}")

        if not result.admitted:
            logger.debug(f"Image rejected ({result.reason}): {url}")
        return result
