import pytest
from tag_uri import (
    DnsName,
    EmailAddress,
    ParseLocation,
    TagUriParser,
    TagUriParsingError,
    Year,
    YearMonth,
    YearMonthDay,
)


def assert_parse_error(input, where, failing):
    with pytest.raises(TagUriParsingError) as exc_info:
        TagUriParser.parse(input)
    assert exc_info.value.where is where
    assert exc_info.value.input == failing


def test_parse_components():
    data = TagUriParser.parse("tag:my-ids.com,2001-09-15:TimKindberg:presentations:UBath2004-05-19")
    assert data.authority_name == DnsName("my-ids.com")
    assert data.date == YearMonthDay("2001", "09", "15")
    assert data.specific == "TimKindberg:presentations:UBath2004-05-19"
    assert data.fragment is None


def test_parse_email_authority():
    data = TagUriParser.parse("tag:sandro@w3.org,2004-05:Sandro")
    assert data.authority_name == EmailAddress("sandro@w3.org")
    assert data.date == YearMonth("2004", "05")


def test_parse_date_variants():
    assert TagUriParser.parse_date("2001") == Year("2001")
    assert TagUriParser.parse_date("2001-09") == YearMonth("2001", "09")
    assert TagUriParser.parse_date("2001-09-15") == YearMonthDay("2001", "09", "15")
    # No calendar check
    assert TagUriParser.parse_date("2001-13-99") == YearMonthDay("2001", "13", "99")


def test_parse_single_character_labels():
    assert TagUriParser.parse_authority_name("a.com") == DnsName("a.com")
    assert TagUriParser.parse_authority_name("x") == DnsName("x")


def test_parse_case_preserved():
    data = TagUriParser.parse("tag:Example.COM,2000:Foo")
    assert data.authority_name == DnsName("Example.COM")
    assert data.specific == "Foo"


def test_missing_prefix_error():
    invalid = "timothy@hpl.hp.com,2001:web/externalHome"
    assert_parse_error(invalid, ParseLocation.TAG_URI, invalid)


def test_surrounding_whitespace_error():
    invalid = " tag:yaml.org,2002:int "
    assert_parse_error(invalid, ParseLocation.TAG_URI, invalid)


def test_missing_date_error():
    assert_parse_error("tag:yaml.org::int", ParseLocation.TAGGING_ENTITY, "yaml.org")


def test_missing_tagging_entity_error():
    assert_parse_error("tag::int", ParseLocation.TAGGING_ENTITY, "")


def test_invalid_date_error():
    assert_parse_error("tag:yaml.org,20-2:int", ParseLocation.DATE, "20-2")
    assert_parse_error("tag:yaml.org,2002-1:int", ParseLocation.DATE, "2002-1")
    assert_parse_error("tag:yaml.org,2002--01:int", ParseLocation.DATE, "2002--01")


def test_invalid_email_domain_error():
    assert_parse_error("tag:invalid@@name.com,2002:int", ParseLocation.EMAIL_ADDRESS, "@name.com")
    assert_parse_error("tag:me@-bad.com,2002:int", ParseLocation.EMAIL_ADDRESS, "-bad.com")


def test_invalid_email_local_part_error():
    assert_parse_error("tag:@name.com,2002:int", ParseLocation.EMAIL_ADDRESS, "@name.com")
    assert_parse_error("tag:a+b@name.com,2002:int", ParseLocation.EMAIL_ADDRESS, "a+b@name.com")


def test_invalid_dns_name_error():
    assert_parse_error("tag:-yaml.org,2002:int", ParseLocation.DNS_NAME, "-yaml.org")
    assert_parse_error("tag:yaml..org,2002:int", ParseLocation.DNS_NAME, "yaml..org")
    assert_parse_error("tag:yaml.org-,2002:int", ParseLocation.DNS_NAME, "yaml.org-")
    assert_parse_error("tag:,2002:int", ParseLocation.DNS_NAME, "")


def test_extra_comma_reaches_authority_name():
    assert_parse_error("tag:a,b,2002:int", ParseLocation.DNS_NAME, "a,b")


def test_invalid_specific_error():
    assert_parse_error("tag:yaml.org,2002:in%zzt", ParseLocation.SPECIFIC, "in%zzt")
    assert_parse_error('tag:yaml.org,2002:a"b', ParseLocation.SPECIFIC, 'a"b')


def test_invalid_fragment_error():
    assert_parse_error("tag:yaml.org,2002:int#a#b", ParseLocation.FRAGMENT, "a#b")
    assert_parse_error("tag:yaml.org,2002:int#<x>", ParseLocation.FRAGMENT, "<x>")


def test_empty_specific_is_valid():
    data = TagUriParser.parse("tag:yaml.org,2002:")
    assert data.specific == ""
    assert data.fragment is None


def test_percent_encoded_specific():
    data = TagUriParser.parse("tag:yaml.org,2002:a%2Fb#c%20d")
    assert data.specific == "a%2Fb"
    assert data.fragment == "c%20d"


def test_fragment_absent_vs_empty():
    assert TagUriParser.parse("tag:example.com,2000:").fragment is None
    assert TagUriParser.parse("tag:example.com,2000:#").fragment == ""
    assert TagUriParser.parse("tag:example.com,2000:#abc").fragment == "abc"


def test_parse_fragment_none():
    assert TagUriParser.parse_fragment(None) is None
    assert TagUriParser.parse_fragment("") == ""


def test_error_message():
    with pytest.raises(TagUriParsingError) as exc_info:
        TagUriParser.parse("tag:yaml.org,20-2:int")
    assert str(exc_info.value) == 'invalid tag URI, error while parsing "date" at "20-2"'
