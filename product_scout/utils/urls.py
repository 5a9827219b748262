from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlparse

from ..errors import URLError

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")


def validate_request_url(url: str) -> str:
    """
    Check that ``url`` is an absolute http(s) URL with a host.
    Raises URLError otherwise.
    """
    if not isinstance(url, str) or not url.strip():
        raise URLError(f"Invalid URL: {url!r}")
    try:
        parsed = urlparse(url.strip())
    except ValueError as exc:
        raise URLError(f"Invalid URL: {url!r}") from exc
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise URLError(f"Invalid URL: {url!r}")
    return url.strip()


_DEFAULT_PORTS = {"http": 80, "https": 443}


def origin_of(url: str) -> str:
    """scheme://host[:port], without credentials or a default port."""
    parsed = urlparse(url)
    host = parsed.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    port = parsed.port
    if port is not None and port != _DEFAULT_PORTS.get(parsed.scheme):
        host = f"{host}:{port}"
    return f"{parsed.scheme}://{host}"


def hostname_of(url: str) -> str:
    return urlparse(url).hostname or ""


def make_absolute_url(value: Optional[str], request_url: str) -> Optional[str]:
    """
    Resolve a possibly relative URL found in the page against the request URL.

    Scheme-qualified values are returned as-is, protocol-relative ones get
    ``https:``, root-relative ones get the request origin, and anything else is
    appended to the request URL with its trailing slash removed.
    """
    if not value:
        return None
    if _SCHEME.match(value):
        return value
    if value.startswith("//"):
        return f"https:{value}"
    if value.startswith("/"):
        return f"{origin_of(request_url)}{value}"
    base = request_url[:-1] if request_url.endswith("/") else request_url
    return f"{base}/{value}"
