from enum import Enum
from types import MappingProxyType
from domainsage.config.loader import WWW_SUBDOMAIN
from domainsage.exceptions import InvalidURLError


class Field(str, Enum):
    SUBDOMAIN = "subdomain"
    DOMAIN = "domain"
    TLD = "tld"
    ROOT_DOMAIN = "root_domain"
    HOST = "host"
    PATH = "path"
    QUERY_PARAMS = "query_params"


# Values reported for fields of an invalid result
EMPTY_DEFAULTS = {
    Field.PATH: "",
    Field.QUERY_PARAMS: MappingProxyType({}),
}


def value_present(value):
    """Not None, and not empty for strings and mappings."""
    if value is None:
        return False
    if hasattr(value, "__len__"):
        return len(value) > 0
    return True


def make_require(field):
    def require(self):
        return self.require(field)
    return require


def install_accessors(cls):
    """Add <field>, has_<field> and require_<field>() for every Field."""
    for item in Field:
        name = item.value
        setattr(cls, name, property(
            lambda self, f=item: self.get(f),
            doc=f"The {name}, or None when missing.",
        ))
        setattr(cls, f"has_{name}", property(
            lambda self, f=item: self.has(f),
            doc=f"Whether {name} is present and non-empty.",
        ))

        require = make_require(item)
        require.__name__ = f"require_{name}"
        require.__doc__ = f"Return {name} or raise InvalidURLError."
        setattr(cls, require.__name__, require)
    return cls


@install_accessors
class ParsedURL:
    __slots__ = ("_record",)

    def __init__(self, record=None):
        object.__setattr__(self, "_record", record)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def record(self):
        """The underlying URLParts, or None for an invalid parse."""
        return self._record

    @property
    def is_valid(self):
        return self._record is not None

    @property
    def is_www_subdomain(self):
        return self.get(Field.SUBDOMAIN) == WWW_SUBDOMAIN

    @staticmethod
    def resolve(field):
        if isinstance(field, Field):
            return field
        try:
            return Field(field)
        except ValueError:
            raise ValueError(
                f"Unknown field: {field!r}. Must be one of: {', '.join(f.value for f in Field)}"
            ) from None

    def get(self, field):
        field = self.resolve(field)
        if self._record is None:
            return EMPTY_DEFAULTS.get(field)
        return getattr(self._record, field.value)

    def has(self, field):
        return value_present(self.get(field))

    def require(self, field):
        field = self.resolve(field)
        value = self.get(field)
        if not value_present(value):
            raise InvalidURLError(f"{field.value} not found or invalid")
        return value

    def __getitem__(self, key):
        try:
            field = self.resolve(key)
        except ValueError:
            raise KeyError(key) from None
        return self.get(field)

    def to_dict(self):
        """Plain dict of all fields; empty for an invalid parse."""
        if self._record is None:
            return {}
        return self._record.to_dict()

    def __eq__(self, other):
        if not isinstance(other, ParsedURL):
            return NotImplemented
        return self._record == other._record

    def __hash__(self):
        return hash((type(self), self._record and self._record.host))

    def __repr__(self):
        return f"ParsedURL({self.to_dict()!r})"
