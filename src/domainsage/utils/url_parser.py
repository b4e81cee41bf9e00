from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping
from domainsage.exceptions import URISplitError
from domainsage.utils.logging_config import get_logger
from domainsage.utils.suffixes import DEFAULT_SUFFIX_LIST
from domainsage.utils.url_helpers import (
    normalize_url,
    split_url,
    is_ip_literal,
    decode_query,
)


logger = get_logger(__name__)


@dataclass(frozen=True)
class URLParts:
    subdomain: str | None
    domain: str
    tld: str
    root_domain: str
    host: str
    path: str = ""
    query_params: Mapping[str, str | None] = field(default_factory=lambda: MappingProxyType({}))

    def to_dict(self):
        return {
            "subdomain": self.subdomain,
            "domain": self.domain,
            "tld": self.tld,
            "root_domain": self.root_domain,
            "host": self.host,
            "path": self.path,
            "query_params": dict(self.query_params),
        }


def build_parts(domain_parts, host, path, query):
    """Assemble the immutable record from the pipeline's intermediate values."""
    return URLParts(
        subdomain=domain_parts.subdomain or None,
        domain=domain_parts.domain,
        tld=domain_parts.tld,
        root_domain=domain_parts.root_domain,
        host=host,
        path=path or "",
        query_params=MappingProxyType(decode_query(query)),
    )


def parse_url(url, suffix_list=None) -> URLParts | None:
    normalized = normalize_url(url)
    if not normalized:
        return None

    try:
        host, path, query = split_url(normalized)
    except URISplitError as e:
        logger.debug("Rejected %r: %s", url, e)
        return None

    if not host:
        logger.debug("Rejected %r: no host", url)
        return None

    if is_ip_literal(host):
        logger.debug("Rejected %r: IP literal host %r", url, host)
        return None

    domain_parts = (suffix_list or DEFAULT_SUFFIX_LIST).split(host)
    if not domain_parts:
        logger.debug("Rejected %r: host %r is not registrable", url, host)
        return None

    return build_parts(domain_parts, host, path, query)
