"""RFC 4151 `tag:` URI value object

This module provides TagUri, an immutable wrapper around TagUriData that
exposes each component of a tag URI and formats it back to its string form.
"""

from typing import Optional

from .data import DnsName, EmailAddress, TagUriData, equals
from .errors import UnreachableError
from .parser import TagUriParser


class TagUri:
    """A tag URI as defined by RFC 4151

    Examples:
    - `tag:timothy@hpl.hp.com,2001:web/externalHome`
    - `tag:my-ids.com,2001-09-15:TimKindberg:presentations:UBath2004-05-19`
    - `tag:blogger.com,1999:blog-555#comments`

    Instances come either from `parse`, which validates the input, or from
    the constructor, which trusts the given data as-is. Callers building
    TagUriData by hand are responsible for keeping it grammatical.
    """

    __slots__ = ("_data",)

    def __init__(self, data: TagUriData):
        self._data = data

    @classmethod
    def parse(cls, input: str) -> 'TagUri':
        """Create a tag URI from its string representation

        Raises TagUriParsingError if the input does not match the grammar.
        Surrounding whitespace is not stripped.
        """
        return cls(TagUriParser.parse(input))

    @property
    def data(self) -> TagUriData:
        """The underlying component values"""
        return self._data

    def to_string(self) -> str:
        """Get the string representation of this tag URI

        A fragment is appended only when present; an empty fragment still
        yields a trailing `#`.
        """
        tag = f"tag:{self.tagging_entity}:{self.specific}"
        if self.fragment is not None:
            tag += f"#{self.fragment}"
        return tag

    @property
    def tagging_entity(self) -> str:
        return f"{self.authority_name},{self.date}"

    @property
    def authority_name(self) -> str:
        authority_name = self._data.authority_name
        if isinstance(authority_name, (DnsName, EmailAddress)):
            return str(authority_name)
        raise UnreachableError(
            '"authority_name" should be either a DnsName or an EmailAddress'
        )

    @property
    def dns_name(self) -> Optional[str]:
        return self._data.authority_name.dns_name

    @property
    def email_address(self) -> Optional[str]:
        return self._data.authority_name.email_address

    @property
    def date(self) -> str:
        """The date joined by hyphens to its precision, e.g. `2001` or `2001-09-15`"""
        return str(self._data.date)

    @property
    def year(self) -> str:
        return self._data.date.year

    @property
    def month(self) -> Optional[str]:
        return self._data.date.month

    @property
    def day(self) -> Optional[str]:
        return self._data.date.day

    @property
    def specific(self) -> str:
        return self._data.specific

    @property
    def fragment(self) -> Optional[str]:
        return self._data.fragment

    def equals(self, other: 'TagUri') -> bool:
        """Check whether both tag URIs hold the same components"""
        return equals(self._data, other._data)

    @staticmethod
    def canonical(tag_uri: str) -> str:
        """Parse a tag URI string and format it again"""
        return TagUri.parse(tag_uri).to_string()

    @staticmethod
    def canonical_option(tag_uri: Optional[str]) -> Optional[str]:
        """Like `canonical`, passing None through"""
        if tag_uri is not None:
            return TagUri.canonical(tag_uri)
        else:
            return None

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"TagUri('{self.to_string()}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagUri):
            return False
        return self.equals(other)

    def __hash__(self) -> int:
        data = self._data
        return hash((
            data.authority_name.dns_name,
            data.authority_name.email_address,
            data.date.year,
            data.date.month,
            data.date.day,
            data.specific,
            data.fragment,
        ))
