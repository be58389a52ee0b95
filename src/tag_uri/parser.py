"""Grammar-driven parser for RFC 4151 tag URIs

Parsing runs top-down and stops at the first component that fails:

    tagUri        = "tag:" taggingEntity ":" specific [ "#" fragment ]
    taggingEntity = authorityName "," date
    authorityName = DNSname / emailAddress
    date          = year [ "-" month [ "-" day ] ]

Each failure raises TagUriParsingError naming the component and the
substring that did not match.
"""

import re
from typing import Optional

from .data import (
    AuthorityName,
    Date,
    DnsName,
    EmailAddress,
    TagUriData,
    Year,
    YearMonth,
    YearMonthDay,
)
from .errors import ParseLocation, TagUriParsingError


TAG_URI_PATTERN = re.compile(
    r"tag:(?P<tagging_entity>[^:\s]*):(?P<specific>[^#\s]*)(?:#(?P<fragment>\S*))?"
)
TAGGING_ENTITY_PATTERN = re.compile(r"(?P<authority_name>\S*),(?P<date>\S*)")
EMAIL_ADDRESS_PATTERN = re.compile(r"[a-zA-Z0-9._-]+@(?P<domain>\S+)")

_DNS_COMP = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?"
DNS_NAME_PATTERN = re.compile(rf"{_DNS_COMP}(?:\.{_DNS_COMP})*")

DATE_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})(?:-(?P<month>[0-9]{2})(?:-(?P<day>[0-9]{2}))?)?"
)

# pchar without percent-decoding: unreserved, sub-delims, ":", "@", plus "/" and "?"
SPECIFIC_PATTERN = re.compile(r"(?:[a-zA-Z0-9\-._~!$&'()*+,;=:@/?]|%[0-9a-fA-F]{2})*")
FRAGMENT_PATTERN = SPECIFIC_PATTERN


class TagUriParser:
    """Splits a tag URI string into TagUriData, validating every component"""

    @classmethod
    def parse(cls, input: str) -> TagUriData:
        """Parse a complete tag URI

        The input must already be stripped of surrounding whitespace.
        """
        tag_uri_match = TAG_URI_PATTERN.fullmatch(input)
        if tag_uri_match is None:
            raise TagUriParsingError(ParseLocation.TAG_URI, input)

        tagging_entity = tag_uri_match.group("tagging_entity")
        specific = tag_uri_match.group("specific")
        fragment = tag_uri_match.group("fragment")

        tagging_entity_match = TAGGING_ENTITY_PATTERN.fullmatch(tagging_entity)
        if tagging_entity_match is None:
            raise TagUriParsingError(ParseLocation.TAGGING_ENTITY, tagging_entity)

        return TagUriData(
            authority_name=cls.parse_authority_name(tagging_entity_match.group("authority_name")),
            date=cls.parse_date(tagging_entity_match.group("date")),
            specific=cls.parse_specific(specific),
            fragment=cls.parse_fragment(fragment),
        )

    @staticmethod
    def parse_authority_name(input: str) -> AuthorityName:
        """Classify an authority name as email address (contains `@`) or DNS name"""
        if "@" in input:
            email_match = EMAIL_ADDRESS_PATTERN.fullmatch(input)
            if email_match is None:
                raise TagUriParsingError(ParseLocation.EMAIL_ADDRESS, input)

            domain = email_match.group("domain")
            if DNS_NAME_PATTERN.fullmatch(domain) is None:
                raise TagUriParsingError(ParseLocation.EMAIL_ADDRESS, domain)

            return EmailAddress(input)

        if DNS_NAME_PATTERN.fullmatch(input) is None:
            raise TagUriParsingError(ParseLocation.DNS_NAME, input)
        return DnsName(input)

    @staticmethod
    def parse_date(input: str) -> Date:
        date_match = DATE_PATTERN.fullmatch(input)
        if date_match is None:
            raise TagUriParsingError(ParseLocation.DATE, input)

        year, month, day = date_match.group("year", "month", "day")
        if day is not None:
            return YearMonthDay(year, month, day)
        if month is not None:
            return YearMonth(year, month)
        return Year(year)

    @staticmethod
    def parse_specific(input: str) -> str:
        """Validate the specific part; the empty string is allowed"""
        if SPECIFIC_PATTERN.fullmatch(input) is None:
            raise TagUriParsingError(ParseLocation.SPECIFIC, input)
        return input

    @staticmethod
    def parse_fragment(input: Optional[str]) -> Optional[str]:
        """Validate the fragment; None means the URI had no `#` at all"""
        if input is None:
            return None
        if FRAGMENT_PATTERN.fullmatch(input) is None:
            raise TagUriParsingError(ParseLocation.FRAGMENT, input)
        return input
