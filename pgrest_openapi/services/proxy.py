"""Reverse proxy URI handling.

When the API runs behind a proxy, the document must advertise the proxy's
scheme, host, port and path instead of the server's own.
"""

import logging
from typing import NamedTuple, Optional
from urllib.parse import SplitResult, urlsplit

from pgrest_openapi.models.schema import Proxy
from pgrest_openapi.utils.exceptions import ProxyContractError

logger = logging.getLogger("proxy-uri")

DEFAULT_PORTS = {"http": 80, "https": 443}
FALLBACK_PORT = 80


class Authority(NamedTuple):
    """Authority component of a URI.

    ``port`` is None when no ``:`` follows the host, and the raw text after
    it otherwise (possibly empty or non-numeric).
    """

    userinfo: Optional[str]
    host: str
    port: Optional[str]


def _authority(uri: str, parts: SplitResult) -> Optional[Authority]:
    remainder = uri.strip()
    if parts.scheme:
        remainder = remainder[len(parts.scheme) + 1:]
    if not remainder.startswith("//"):
        return None

    userinfo, at, hostport = parts.netloc.rpartition("@")
    if hostport.startswith("[") and "]" in hostport:
        end = hostport.index("]") + 1
        host, rest = hostport[:end], hostport[end:]
    else:
        host, colon, port = hostport.partition(":")
        rest = colon + port
    port = rest[1:] if rest.startswith(":") else None
    return Authority(userinfo if at else None, host, port)


def _parse_port(port: str) -> Optional[int]:
    if port.isascii() and port.isdigit():
        return int(port)
    return None


def is_malformed_proxy_uri(uri: Optional[str]) -> bool:
    """Check whether a proxy URI is unusable.

    A usable proxy URI is absolute, uses ``http`` or ``https``, has no query
    and has an authority with a host, no user info and, if given, a port in
    the 1-65535 range. An absent URI is not malformed.
    """
    if uri is None:
        return False
    try:
        parts = urlsplit(uri)
    except ValueError:
        return True

    if not parts.scheme or parts.fragment or parts.query:
        return True
    if parts.scheme not in DEFAULT_PORTS:
        return True

    authority = _authority(uri, parts)
    if authority is None or authority.userinfo is not None or not authority.host:
        return True
    if authority.port is None:
        return False
    port = _parse_port(authority.port)
    return port is None or not 0 < port < 65536


def pick_proxy(
    proxy_uri: Optional[str],
    is_malformed: Optional[bool] = None
) -> Optional[Proxy]:
    """Decode a proxy URI into its scheme, host, port and path.

    Args:
        proxy_uri: The configured proxy URI, if any.
        is_malformed: Result of :func:`is_malformed_proxy_uri` for the same
            URI when the caller has already computed it.

    Returns:
        The proxy location, or None when there is no usable proxy.

    Raises:
        ProxyContractError: If a URI accepted as well formed cannot be split
            or has no authority.
    """
    if proxy_uri is None:
        return None
    if is_malformed is None:
        is_malformed = is_malformed_proxy_uri(proxy_uri)
    if is_malformed:
        # Callers reject malformed URIs before they get here
        logger.warning("Ignoring malformed proxy URI: %s", proxy_uri)
        return None

    try:
        parts = urlsplit(proxy_uri)
    except ValueError:
        raise ProxyContractError(proxy_uri)
    authority = _authority(proxy_uri, parts)
    if authority is None:
        raise ProxyContractError(proxy_uri)

    scheme = parts.scheme.lower()
    if authority.port is None:
        port = DEFAULT_PORTS.get(scheme, FALLBACK_PORT)
    else:
        port = _parse_port(authority.port)
        if port is None:
            port = FALLBACK_PORT

    return Proxy(
        scheme=scheme,
        host=authority.host,
        port=port,
        path=parts.path or "/",
    )
