"""Error classes for tag URI parsing"""

from enum import Enum


class TagUriError(Exception):
    """Base exception for tag URI errors"""
    pass


class ParseLocation(Enum):
    """Grammar component at which parsing failed"""
    TAG_URI = "tagUri"
    TAGGING_ENTITY = "taggingEntity"
    AUTHORITY_NAME = "authorityName"
    DATE = "date"
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    DNS_NAME = "dnsName"
    DNS_COMP = "dnsComp"
    EMAIL_ADDRESS = "emailAddress"
    SPECIFIC = "specific"
    FRAGMENT = "fragment"


class TagUriParsingError(TagUriError):
    """Input does not match the tag URI grammar

    `where` names the failing grammar component and `input` holds the
    substring that failed to match it.
    """
    def __init__(self, where: ParseLocation, input: str):
        self.where = where
        self.input = input
        super().__init__(f'invalid tag URI, error while parsing "{where.value}" at "{input}"')


class UnreachableError(TagUriError):
    """Internal invariant violated; indicates a bug, not bad input"""
    pass
