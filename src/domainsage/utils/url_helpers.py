import re
import ipaddress
from typing import NamedTuple
from urllib.parse import urlsplit, parse_qsl
from domainsage.config.loader import DEFAULT_SCHEME
from domainsage.exceptions import URISplitError


SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+\-.]*://")

IPV4_SEGMENT = r"(?:25[0-5]|2[0-4]\d|1\d{2}|[1-9]?\d)"
IPV4_PATTERN = re.compile(rf"^{IPV4_SEGMENT}(?:\.{IPV4_SEGMENT}){{3}}$")

# RFC 3986 reg-name characters, plus ":" for the inside of an IP literal
HOST_PATTERN = re.compile(r"^[a-z0-9\-._~%!$&'()*+,;=:]+$")

# Characters urlsplit silently deletes instead of rejecting
STRIPPED_CHARS_PATTERN = re.compile(r"[\t\r\n]")

# A "%" that does not start a two digit hex escape
BAD_ESCAPE_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2})")


class SplitURL(NamedTuple):
    host: str | None
    path: str
    query: str | None


def normalize_url(url):
    """Trim the input and make sure it carries a scheme. Returns None for blank input."""
    if url is None:
        return None

    url = (url if isinstance(url, str) else str(url)).strip()
    if not url:
        return None

    # Fast path for the common schemes
    if url.startswith(("https://", "http://")):
        return url

    return url if SCHEME_PATTERN.match(url) else f"{DEFAULT_SCHEME}{url}"


def split_url(url):
    """
    Split a normalized URL into (host, path, query).
    Raises URISplitError when the string is not a well-formed URI.
    """
    if STRIPPED_CHARS_PATTERN.search(url):
        raise URISplitError(f"Control whitespace in URI {url!r}")

    try:
        parsed = urlsplit(url)
        # Touching .port validates it
        parsed.port
    except ValueError as e:
        raise URISplitError(f"Malformed URI {url!r}: {e}") from e

    host = parsed.hostname
    if host and not HOST_PATTERN.match(host):
        raise URISplitError(f"Malformed host in URI {url!r}")

    return SplitURL(
        host=host.lower() if host else None,
        path=parsed.path or "",
        query=parsed.query,
    )


def is_ip_literal(host):
    """True when the host is an IPv4 dotted quad or an IPv6 literal."""
    if not host:
        return False

    if "." in host and IPV4_PATTERN.match(host):
        return True

    if ":" in host or "[" in host:
        try:
            ipaddress.IPv6Address(host.strip("[]"))
            return True
        except ValueError:
            return False

    return False


def decode_query(raw_query):
    """
    Decode a query string into an ordered dict of key -> value.
    Bare flags and empty values map to None, blank keys are dropped.
    A malformed escape anywhere discards the whole query.
    """
    if not raw_query:
        return {}

    if BAD_ESCAPE_PATTERN.search(raw_query):
        return {}

    try:
        pairs = parse_qsl(raw_query, keep_blank_values=True, errors="strict")
    except ValueError:
        return {}

    params = {}
    for key, value in pairs:
        if not key:
            continue
        params[key] = value or None

    return params
