"""fmhurl.errors
Everything fmhurl raises is a ValueError, so callers that already catch
parse failures from urllib-style APIs keep working.
"""


class FMHURLError(ValueError):
    pass


class EncodeError(FMHURLError):
    """Raised while turning a URL into its hierarchical form."""


class DecodeError(FMHURLError):
    """Raised while turning a hierarchical string back into a URL."""


class MalformedURL(EncodeError):
    """No scheme delimiter, a bad scheme, or an unparsable authority."""


class InvalidPort(EncodeError, DecodeError):
    """Port is not a decimal number in 0-65535."""


class InvalidIPv6(EncodeError, DecodeError):
    """Bracketed host is not an RFC 3986 IPv6address."""


class MalformedHierarchicalString(DecodeError):
    """Fewer than five /-delimited fields, or fields that cannot form a URL."""
