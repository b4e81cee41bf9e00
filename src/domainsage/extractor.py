from collections.abc import Iterable
from domainsage.exceptions import InvalidURLError
from domainsage.parsed_url import ParsedURL
from domainsage.utils.url_helpers import decode_query
from domainsage.utils.url_parser import parse_url


__all__ = [
    "parse",
    "parse_strict",
    "is_valid",
    "parse_batch",
    "decode_query",
    "parse_query",
    "ParsedURL",
    "InvalidURLError",
]


def parse(url, suffix_list=None):
    """Parse a URL or bare domain. Never raises; check ``.is_valid``."""
    return ParsedURL(parse_url(url, suffix_list))


def parse_strict(url, suffix_list=None):
    """Like parse, but raises InvalidURLError when the URL is invalid."""
    parsed = parse(url, suffix_list)
    if not parsed.is_valid:
        raise InvalidURLError()
    return parsed


def is_valid(url, suffix_list=None):
    return parse(url, suffix_list).is_valid


def parse_batch(urls, suffix_list=None):
    """
    Parse each URL independently.
    Invalid entries come back as None rather than an invalid ParsedURL.
    """
    if urls is None or isinstance(urls, (str, bytes)) or not isinstance(urls, Iterable):
        return []

    results = []
    for url in urls:
        parsed = parse(url, suffix_list)
        results.append(parsed if parsed.is_valid else None)
    return results


parse_query = decode_query
