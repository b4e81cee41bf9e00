from domainsage.config.loader import WWW_SUBDOMAIN
from domainsage.extractor import parse
from domainsage.modes.validation import ensure_mode


def build_host(parsed, validation):
    if validation == "root_domain":
        return parsed.root_domain
    if validation == "root_or_custom_subdomain" and parsed.subdomain == WWW_SUBDOMAIN:
        return parsed.root_domain
    return parsed.host


def build_url(host, use_protocol=True, use_https=True, use_trailing_slash=False):
    url = host
    if use_protocol:
        url = ("https://" if use_https else "http://") + host

    if use_trailing_slash:
        return url if url.endswith("/") else url + "/"
    return url.rstrip("/")


def format_url(url, validation="standard", use_protocol=True, use_https=True,
               use_trailing_slash=False, suffix_list=None):
    """
    Re-serialize a URL as scheme + host according to a validation mode.

    >>> format_url("https://www.example.com/", validation="root_or_custom_subdomain")
    'https://example.com'

    Path and query are dropped. Returns None when the URL does not parse.
    """
    ensure_mode(validation)

    parsed = parse(url, suffix_list)
    if not parsed.is_valid:
        return None

    return build_url(
        build_host(parsed, validation),
        use_protocol=use_protocol,
        use_https=use_https,
        use_trailing_slash=use_trailing_slash,
    )
