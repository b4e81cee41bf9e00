import pytest

from domainsage.modes.formatter import build_url, format_url


class TestStandardMode:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://example.com", "https://example.com"),
            ("https://example.com/", "https://example.com"),
            ("https://shop.example.com/cart?id=1", "https://shop.example.com"),
            ("https://www.example.com", "https://www.example.com"),
            ("api.staging.example.com", "https://api.staging.example.com"),
            ("http://example.com", "https://example.com"),
        ],
    )
    def test_keeps_full_host(self, url, expected):
        assert format_url(url) == expected


class TestRootDomainMode:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://shop.example.com/path", "https://example.com"),
            ("https://www.example.com", "https://example.com"),
            ("https://api.staging.example.com", "https://example.com"),
            ("https://shop.example.co.uk", "https://example.co.uk"),
        ],
    )
    def test_strips_every_subdomain(self, url, expected):
        assert format_url(url, validation="root_domain") == expected


class TestRootOrCustomSubdomainMode:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://www.example.com", "https://example.com"),
            ("https://shop.example.com", "https://shop.example.com"),
            ("https://example.com", "https://example.com"),
            ("https://api.staging.example.com", "https://api.staging.example.com"),
        ],
    )
    def test_strips_only_www(self, url, expected):
        assert format_url(url, validation="root_or_custom_subdomain") == expected


class TestProtocolAndSlash:
    def test_without_protocol(self):
        assert format_url("https://example.com", use_protocol=False) == "example.com"
        assert format_url("https://shop.example.com", validation="root_domain", use_protocol=False) == "example.com"

    def test_http(self):
        assert format_url("https://example.com", use_https=False) == "http://example.com"

    def test_use_https_is_ignored_without_protocol(self):
        assert format_url("http://example.com", use_protocol=False, use_https=False) == "example.com"

    def test_trailing_slash(self):
        assert format_url("https://example.com", use_trailing_slash=True) == "https://example.com/"
        assert format_url("https://example.com/", use_trailing_slash=True) == "https://example.com/"
        assert format_url("api.example.com", use_protocol=False, use_trailing_slash=True) == "api.example.com/"

    def test_build_url(self):
        assert build_url("example.com/", use_trailing_slash=False) == "https://example.com"
        assert build_url("example.com", use_protocol=False, use_trailing_slash=True) == "example.com/"


class TestInvalidInput:
    @pytest.mark.parametrize("url", ["invalid-url", "", None, "192.168.1.1"])
    def test_returns_none(self, url):
        assert format_url(url) is None

    def test_unknown_mode_raises_before_parsing(self):
        with pytest.raises(ValueError, match="Invalid validation mode"):
            format_url("invalid-url", validation="subdomain_only")
