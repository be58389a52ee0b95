"""Value types holding the components of a tag URI

The authority name and the date are modelled as small closed sets of
variants, so a value can never carry both a DNS name and an email address,
or a day without a month.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class DnsName:
    """Authority given as a DNS name, e.g. `example.com`"""
    name: str

    @property
    def dns_name(self) -> Optional[str]:
        return self.name

    @property
    def email_address(self) -> Optional[str]:
        return None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class EmailAddress:
    """Authority given as an email address, e.g. `timothy@hpl.hp.com`"""
    address: str

    @property
    def dns_name(self) -> Optional[str]:
        return None

    @property
    def email_address(self) -> Optional[str]:
        return self.address

    def __str__(self) -> str:
        return self.address


@dataclass(frozen=True)
class Year:
    """Date with year precision (`YYYY`)"""
    year: str

    @property
    def month(self) -> Optional[str]:
        return None

    @property
    def day(self) -> Optional[str]:
        return None

    def __str__(self) -> str:
        return self.year


@dataclass(frozen=True)
class YearMonth:
    """Date with month precision (`YYYY-MM`)"""
    year: str
    month: str

    @property
    def day(self) -> Optional[str]:
        return None

    def __str__(self) -> str:
        return f"{self.year}-{self.month}"


@dataclass(frozen=True)
class YearMonthDay:
    """Date with day precision (`YYYY-MM-DD`)"""
    year: str
    month: str
    day: str

    def __str__(self) -> str:
        return f"{self.year}-{self.month}-{self.day}"


AuthorityName = Union[DnsName, EmailAddress]
Date = Union[Year, YearMonth, YearMonthDay]


@dataclass(frozen=True)
class TagUriData:
    """The parsed components of a tag URI

    Date parts are kept as fixed-width digit strings, so leading zeros
    survive and no calendar check is made. `fragment` is None when the URI
    has no `#` and "" when it ends in a bare `#`.
    """
    authority_name: AuthorityName
    date: Date
    specific: str
    fragment: Optional[str] = None


def equals(a: TagUriData, b: TagUriData) -> bool:
    """Compare two values field by field

    Only leaf values are compared, so an absent field matches only another
    absent field.
    """
    return (
        a.authority_name.dns_name == b.authority_name.dns_name
        and a.authority_name.email_address == b.authority_name.email_address
        and a.date.year == b.date.year
        and a.date.month == b.date.month
        and a.date.day == b.date.day
        and a.specific == b.specific
        and a.fragment == b.fragment
    )
