"""fmhurl.host
Host canonicalization: domains get their labels reversed so that keys sort
from the TLD down, IPv4 is left alone, and IPv6 is written out in full so
that every spelling of an address produces the same key.
"""

import idna

from .errors import InvalidIPv6, MalformedURL
from .grammar import IPV4_PAT, IPV6_PAT


def _ipv4_to_h16s(address: str) -> list[str]:
    """e.g. _ipv4_to_h16s("192.0.2.1") == ["c000", "201"]"""
    octets: list[int] = [int(octet, base=10) for octet in address.split(".")]
    return [f"{octets[0] << 8 | octets[1]:x}", f"{octets[2] << 8 | octets[3]:x}"]


def _split_h16s(part: str) -> list[str]:
    groups: list[str] = part.split(":") if len(part) > 0 else []
    if len(groups) > 0 and "." in groups[-1]:
        groups += _ipv4_to_h16s(groups.pop())
    return groups


def expand_ipv6(address: str) -> str:
    """Expands an (unbracketed) IPv6address to 8 zero-padded lowercase groups.
    e.g. expand_ipv6("::1") == "0000:0000:0000:0000:0000:0000:0000:0001"
    """
    if IPV6_PAT.fullmatch(address) is None:
        raise InvalidIPv6(f"invalid IPv6 address: {address!r}")

    head, double_colon, tail = address.partition("::")
    head_groups: list[str] = _split_h16s(head)
    tail_groups: list[str] = _split_h16s(tail)
    missing: int = 8 - len(head_groups) - len(tail_groups)

    groups: list[str] = head_groups + ["0"] * missing + tail_groups if len(double_colon) > 0 else head_groups
    if len(groups) != 8 or (len(double_colon) > 0 and missing < 1):
        raise InvalidIPv6(f"IPv6 address does not have 8 groups: {address!r}")
    return ":".join(f"{int(group, base=16):04x}" for group in groups)


def _encode_label(label: str) -> str:
    if label.isascii():
        return label.lower()
    try:
        return idna.encode(label, uts46=True).decode("ascii")
    except idna.IDNAError as e:
        raise MalformedURL(f"host label is not valid IDNA: {label!r}") from e


def _reverse_labels(domain: str) -> str:
    return ".".join(reversed(domain.split(".")))


def canonicalize_host(host: str) -> str:
    """Returns the form of host that leads a hierarchical string.
    e.g. canonicalize_host("sub.example.com") == "com.example.sub"
    """
    if len(host) == 0:
        return host
    if host.startswith("["):
        if not host.endswith("]"):
            raise InvalidIPv6(f"unterminated IP literal: {host!r}")
        return f"[{expand_ipv6(host[1:-1])}]"
    if IPV4_PAT.fullmatch(host) is not None:
        return host
    return _reverse_labels(".".join(_encode_label(label) for label in host.split(".")))


def revert_host(canonical: str) -> str:
    """Inverse of canonicalize_host, up to case, IDNA, and IPv6 compression.
    Label reversal is its own inverse, so this is canonicalize_host minus the normalization.
    """
    if canonical.startswith("["):
        if not canonical.endswith("]") or IPV6_PAT.fullmatch(canonical[1:-1]) is None:
            raise InvalidIPv6(f"invalid IPv6 literal: {canonical!r}")
        return canonical
    if IPV4_PAT.fullmatch(canonical) is not None:
        return canonical
    return _reverse_labels(canonical)
