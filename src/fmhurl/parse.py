"""fmhurl.parse
Splits a URL into the seven pieces the hierarchical form is built from.
This is a lenient splitter, not a validator: only the scheme, the port,
and the shape of the authority are checked.
"""

import dataclasses

from typing import Self

from .errors import MalformedURL
from .grammar import SCHEME_PAT
from .ports import parse_port


@dataclasses.dataclass
class URLRecord:
    """A decomposed URL. Use parse_url or fmhurl.codec.parse_hierarchical to build one.
    Missing string components are "", never None; a missing port is None.
    """

    scheme: str
    userinfo: str
    host: str
    port: int | None
    path: str
    query: str
    fragment: str
    has_authority: bool = False

    @property
    def authority(self: Self) -> str | None:
        """userinfo@host:port"""
        if not (self.has_authority or len(self.host) > 0 or len(self.userinfo) > 0 or self.port is not None):
            return None
        result: str = ""
        if len(self.userinfo) > 0:
            result += f"{self.userinfo}@"
        result += self.host
        if self.port is not None:
            result += f":{self.port}"
        return result

    def serialize(self: Self) -> str:
        """RFC 3986 section 5.3, with "" standing in for undefined components"""
        result: str = f"{self.scheme}:"
        authority: str | None = self.authority
        if authority is not None:
            result += f"//{authority}"
        result += self.path
        if len(self.query) > 0:
            result += f"?{self.query}"
        if len(self.fragment) > 0:
            result += f"#{self.fragment}"
        return result


def _parse_authority(authority: str, url: str) -> tuple[str, str, int | None]:
    """authority = [ userinfo "@" ] host [ ":" port ]"""
    # No "@" leaves userinfo empty and the whole authority in host_port.
    userinfo, _, host_port = authority.rpartition("@")

    host: str
    raw_port: str
    if host_port.startswith("["):
        host, bracket, after = host_port.partition("]")
        if len(bracket) == 0:
            raise MalformedURL(f"unterminated IP literal in URL: {url!r}")
        host += bracket
        if len(after) > 0 and not after.startswith(":"):
            raise MalformedURL(f"unexpected text after IP literal in URL: {url!r}")
        raw_port = after[len(":") :]
    else:
        host, _, raw_port = host_port.partition(":")
        if "[" in host or "]" in host:
            raise MalformedURL(f"stray bracket in host of URL: {url!r}")

    # "host:" with nothing after the colon is allowed by RFC 3986 and means no port.
    port: int | None = parse_port(raw_port) if len(raw_port) > 0 else None
    return userinfo, host, port


def parse_url(data: str) -> URLRecord:
    """Decomposes data into a URLRecord.
    e.g. parse_url("ftp://rms@example.com/").userinfo == "rms"
    """
    scheme, colon, rest = data.partition(":")
    if len(colon) == 0:
        raise MalformedURL(f"no scheme delimiter in URL: {data!r}")
    if SCHEME_PAT.fullmatch(scheme) is None:
        raise MalformedURL(f"invalid scheme {scheme!r} in URL: {data!r}")

    rest, _, fragment = rest.partition("#")
    rest, _, query = rest.partition("?")

    if not rest.startswith("//"):
        # No authority (mailto:, data:, blob:...): everything left is an opaque path.
        return URLRecord(
            scheme=scheme,
            userinfo="",
            host="",
            port=None,
            path=rest,
            query=query,
            fragment=fragment,
        )

    authority, slash, path = rest[len("//") :].partition("/")
    userinfo, host, port = _parse_authority(authority, data)
    return URLRecord(
        scheme=scheme,
        userinfo=userinfo,
        host=host,
        port=port,
        path=slash + path if len(slash) > 0 else "/",
        query=query,
        fragment=fragment,
        has_authority=True,
    )
