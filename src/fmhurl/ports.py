"""fmhurl.ports
Scheme registries: default ports and which schemes carry an authority.
"""

import re
import types

from collections.abc import Mapping

# Only uses_netloc is borrowed from urllib.parse; it's the closest thing the stdlib has
# to a list of schemes that are always written with "//".
from urllib.parse import uses_netloc

from .errors import InvalidPort

# Special-scheme default ports from the WHATWG URL Standard.
# Every other scheme (sftp, ssh, mailto, unregistered ones...) has no default.
DEFAULT_PORTS: Mapping[str, int] = types.MappingProxyType(
    {
        "ftp": 21,
        "http": 80,
        "https": 443,
        "ws": 80,
        "wss": 443,
    }
)

AUTHORITY_SCHEMES: frozenset[str] = frozenset(s for s in uses_netloc if len(s) > 0) | frozenset(DEFAULT_PORTS)

# port = *DIGIT
# (The empty port is handled by callers, so at least one digit is required here.)
_PORT_PAT: re.Pattern[str] = re.compile(r"[0-9]+")

_MAX_PORT: int = 65535


def parse_port(raw: str) -> int:
    """Returns raw as a port number, dropping leading 0s.
    e.g. parse_port("08080") == 8080
    """
    if _PORT_PAT.fullmatch(raw) is None:
        raise InvalidPort(f"port is not a decimal number: {raw!r}")
    port: int = int(raw, base=10)
    if port > _MAX_PORT:
        raise InvalidPort(f"port out of range 0-{_MAX_PORT}: {raw!r}")
    return port


def default_port(scheme: str) -> int | None:
    return DEFAULT_PORTS.get(scheme.lower())


def resolve_port(scheme: str, port: int | None) -> str:
    """Returns the effective port as decimal text, or "" when the scheme has no default."""
    if port is None:
        port = default_port(scheme)
    return str(port) if port is not None else ""


def uses_authority(scheme: str) -> bool:
    return scheme.lower() in AUTHORITY_SCHEMES
