__version__ = "0.1"

from .codec import decode, encode, encode_record, parse_hierarchical
from .errors import DecodeError, EncodeError, FMHURLError, InvalidIPv6, InvalidPort, MalformedHierarchicalString, MalformedURL
from .host import canonicalize_host, expand_ipv6, revert_host
from .parse import URLRecord, parse_url
from .ports import AUTHORITY_SCHEMES, DEFAULT_PORTS, default_port, resolve_port
