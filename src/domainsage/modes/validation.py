import re
from domainsage.config.loader import VALIDATION_MODES, WWW_SUBDOMAIN, DEFAULT_SCHEME
from domainsage.extractor import parse


SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+\-.]*://")


def ensure_mode(validation):
    """Raise ValueError for anything outside VALIDATION_MODES."""
    if validation not in VALIDATION_MODES:
        raise ValueError(
            f"Invalid validation mode: {validation}. Must be one of: {', '.join(VALIDATION_MODES)}"
        )
    return validation


def is_blank(value):
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return hasattr(value, "__len__") and len(value) == 0


class DomainValidator:
    """
    Validate a user-supplied URL or domain against one of three modes:

    - standard: any URL that parses
    - root_domain: no subdomain at all
    - root_or_custom_subdomain: any subdomain except "www"

    use_protocol requires a scheme on the value; use_https narrows that to https.
    validate() returns a list of error messages, empty when the value passes.
    Blank values are left to a separate presence check and never fail here.
    """

    def __init__(self, validation="standard", use_protocol=True, use_https=True, suffix_list=None):
        self.validation = ensure_mode(validation)
        self.use_protocol = use_protocol
        self.use_https = use_https
        self.suffix_list = suffix_list

    def normalize(self, value):
        url = str(value).strip()

        # Without a protocol requirement any scheme present is dropped
        if not self.use_protocol:
            url = SCHEME_PATTERN.sub("", url, count=1)

        if not SCHEME_PATTERN.match(url):
            url = (DEFAULT_SCHEME if self.use_https else "http://") + url

        return url

    def protocol_error(self, url):
        if not self.use_protocol:
            return None

        allowed = ("https://",) if self.use_https else ("http://", "https://")
        if url.startswith(allowed):
            return None

        return "must use https://" if self.use_https else "must use http:// or https://"

    def validate(self, value):
        if is_blank(value):
            return []

        url = self.normalize(value)

        error = self.protocol_error(url)
        if error:
            return [error]

        parsed = parse(url, self.suffix_list)
        if not parsed.is_valid:
            return ["is not a valid URL"]

        if self.validation == "root_domain" and parsed.has_subdomain:
            return ["must be a root domain (no subdomains allowed)"]

        if self.validation == "root_or_custom_subdomain" and parsed.subdomain == WWW_SUBDOMAIN:
            return ["cannot use www subdomain"]

        return []

    def is_valid(self, value):
        return not self.validate(value)


def validate_url(value, **options):
    """Shortcut for DomainValidator(**options).validate(value)."""
    return DomainValidator(**options).validate(value)
