"""Exceptions raised by domainsage."""


class DomainSageError(Exception):
    """Base exception for all domainsage errors."""


class InvalidURLError(DomainSageError, ValueError):
    """A URL, or one of its required components, is missing or invalid."""

    DEFAULT_MESSAGE = "Invalid URL Value"

    def __init__(self, message=DEFAULT_MESSAGE):
        super().__init__(message)


class URISplitError(DomainSageError, ValueError):
    """The input could not be split into URI components at all."""
