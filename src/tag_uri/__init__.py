"""Tag URI - RFC 4151 `tag:` URI parsing and formatting

This package parses `tag:` URIs into their components (authority name,
date, specific part and fragment), validates each against the RFC grammar,
and formats them back to their string form.
"""

from .data import (
    DnsName,
    EmailAddress,
    Year,
    YearMonth,
    YearMonthDay,
    TagUriData,
)
from .errors import (
    TagUriError,
    ParseLocation,
    TagUriParsingError,
    UnreachableError,
)
from .parser import TagUriParser
from .tag_uri import TagUri

__version__ = "0.1.0"

__all__ = [
    "TagUri",
    "TagUriData",
    "TagUriParser",
    "DnsName",
    "EmailAddress",
    "Year",
    "YearMonth",
    "YearMonthDay",
    "TagUriError",
    "ParseLocation",
    "TagUriParsingError",
    "UnreachableError",
]
