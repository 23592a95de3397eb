"""
Unit tests: scheme default ports.
"""

import pytest

from fmhurl import AUTHORITY_SCHEMES, DEFAULT_PORTS, default_port, resolve_port
from fmhurl.errors import DecodeError, EncodeError, InvalidPort
from fmhurl.ports import parse_port, uses_authority


class TestDefaultPorts:
    def test_known_schemes(self):
        assert default_port("http") == 80
        assert default_port("https") == 443
        assert default_port("ftp") == 21
        assert default_port("ws") == 80
        assert default_port("wss") == 443

    def test_case_insensitive(self):
        assert default_port("HTTPS") == 443

    @pytest.mark.parametrize("scheme", ["mailto", "sftp", "ssh", "x-unknown"])
    def test_no_default(self, scheme):
        assert default_port(scheme) is None

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_PORTS["gopher"] = 70


class TestResolvePort:
    def test_explicit_port_wins(self):
        assert resolve_port("http", 8080) == "8080"
        assert resolve_port("http", 80) == "80"

    def test_default(self):
        assert resolve_port("https", None) == "443"

    def test_unknown(self):
        assert resolve_port("mailto", None) == ""

    def test_explicit_port_on_unknown_scheme(self):
        assert resolve_port("sftp", 22) == "22"


class TestParsePort:
    def test_leading_zeros(self):
        assert parse_port("08080") == 8080

    def test_bounds(self):
        assert parse_port("0") == 0
        assert parse_port("65535") == 65535
        with pytest.raises(InvalidPort):
            parse_port("65536")

    @pytest.mark.parametrize("raw", ["", "8o", " 80", "+80", "٨٠"])
    def test_not_decimal(self, raw):
        with pytest.raises(InvalidPort):
            parse_port(raw)

    def test_invalid_port_is_both_error_kinds(self):
        assert issubclass(InvalidPort, EncodeError)
        assert issubclass(InvalidPort, DecodeError)


class TestAuthoritySchemes:
    def test_membership(self):
        assert uses_authority("file")
        assert uses_authority("HTTP")
        assert not uses_authority("mailto")
        assert not uses_authority("data")

    def test_every_defaulted_scheme_has_authority(self):
        assert set(DEFAULT_PORTS) <= AUTHORITY_SCHEMES
        assert "" not in AUTHORITY_SCHEMES
