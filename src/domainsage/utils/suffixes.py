import tldextract
from dataclasses import dataclass
from domainsage.config.loader import (
    SUFFIX_LIST_URLS,
    SUFFIX_CACHE_DIR,
    INCLUDE_PRIVATE_DOMAINS,
    FALLBACK_TO_SNAPSHOT,
    EXTRA_SUFFIXES,
)
from domainsage.utils.logging_config import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class DomainParts:
    subdomain: str | None
    domain: str
    tld: str

    @property
    def root_domain(self):
        return f"{self.domain}.{self.tld}"


class SuffixList:
    """
    Public suffix dataset used to split hostnames.

    Wraps a tldextract extractor. With no suffix_list_urls the snapshot
    bundled with tldextract is used, so nothing is fetched over the network.
    The dataset is loaded when the list is built and is read-only afterwards.
    """

    def __init__(
        self,
        suffix_list_urls=(),
        cache_dir=None,
        include_private_domains=False,
        extra_suffixes=(),
        fallback_to_snapshot=True,
    ):
        self.include_private_domains = include_private_domains
        self._extract = tldextract.TLDExtract(
            cache_dir=cache_dir,
            suffix_list_urls=tuple(suffix_list_urls),
            fallback_to_snapshot=fallback_to_snapshot,
            include_psl_private_domains=include_private_domains,
            extra_suffixes=tuple(extra_suffixes),
        )
        # Build the suffix trie now rather than on the first concurrent lookup
        self._extract("example.com")

    @classmethod
    def from_config(cls):
        return cls(
            suffix_list_urls=SUFFIX_LIST_URLS,
            cache_dir=SUFFIX_CACHE_DIR,
            include_private_domains=INCLUDE_PRIVATE_DOMAINS,
            extra_suffixes=EXTRA_SUFFIXES,
            fallback_to_snapshot=FALLBACK_TO_SNAPSHOT,
        )

    def split(self, host):
        """
        Split a lower-cased hostname into subdomain, domain and public suffix.
        The longest matching suffix wins, so "co.uk" beats "uk".
        Returns None when the host is not registrable under a known suffix.
        """
        if not host or "" in host.split("."):
            return None

        extracted = self._extract(host)
        if not extracted.suffix:
            logger.debug("No public suffix for host %r", host)
            return None
        if not extracted.domain:
            logger.debug("Public suffix %r consumes the whole host %r", extracted.suffix, host)
            return None

        return DomainParts(
            subdomain=extracted.subdomain or None,
            domain=extracted.domain,
            tld=extracted.suffix,
        )


# Built once at import; shared read-only by every parse
DEFAULT_SUFFIX_LIST = SuffixList.from_config()
