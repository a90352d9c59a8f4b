"""
Utility helpers shared across routers/services.
"""

import re
from urllib.parse import urlparse

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_NETWORK_SCHEMES = {"http", "https", "ftp", "ws", "wss"}


def absolute_url(path: str, base: str) -> str:
    """
    Join a relative path onto the public base address.
    """
    base_url = (base or "").rstrip("/")
    if not path:
        return base_url + "/"
    if path.startswith("http://") or path.startswith("https://"):
        return path
    if not path.startswith("/"):
        path = "/" + path
    return base_url + path


def is_absolute_url(value: str | None) -> bool:
    """
    True when value parses as an absolute URL.

    Network schemes need a host without whitespace; spaces elsewhere are
    accepted (browsers percent-encode them). Other schemes only need the
    scheme itself, e.g. ``mailto:`` or ``foo:``.
    """
    candidate = (value or "").strip()
    if not candidate:
        return False
    try:
        parsed = urlparse(candidate)
    except ValueError:
        return False
    if not parsed.scheme or not _SCHEME_RE.match(parsed.scheme):
        return False
    if any(ch.isspace() for ch in parsed.netloc):
        return False
    if parsed.scheme.lower() in _NETWORK_SCHEMES:
        return bool(parsed.hostname)
    return True
