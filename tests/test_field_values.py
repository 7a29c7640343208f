import pytest

from onepux_parser.parsing.document import DocumentNode
from onepux_parser.parsing.field_values import (
    AddressValue,
    ConcealedValue,
    DateValue,
    EmailValue,
    RawValue,
    TotpValue,
    decode_field_value,
    format_timestamp,
    is_protected,
    render_field_value,
)

DATE_FORMAT = "%a %b %-d %H:%M:%S %Y UTC"


def _decode(raw):
    return decode_field_value(DocumentNode(raw))


def test_decode_known_tags():
    assert _decode({"totp": "ABCDEFGH"}) == TotpValue(secret="ABCDEFGH")
    assert _decode({"date": 1610000000}) == DateValue(timestamp=1610000000)
    assert _decode({"email": {"email_address": "a@b.c", "provider": None}}) == EmailValue("a@b.c")
    assert _decode({"concealed": "12345"}) == ConcealedValue("12345")


def test_decode_unknown_tag_is_raw():
    assert _decode({"string": "hello"}) == RawValue(tag="string", text="hello")
    assert _decode({"phone": 5551234}) == RawValue(tag="phone", text="5551234")
    assert _decode({"menu": {"nested": "x"}}) == RawValue(tag="menu", text="")


def test_decode_empty_or_non_object():
    assert _decode({}) == RawValue(tag="", text="")
    assert _decode("loose string") == RawValue(tag="", text="")
    assert _decode(None) == RawValue(tag="", text="")


def test_email_without_object_payload_is_empty():
    assert render_field_value(_decode({"email": "a@b.c"}), DATE_FORMAT) == ""


def test_render_date():
    text = render_field_value(DateValue(1610000000), DATE_FORMAT)
    assert text == "Thu Jan 7 06:13:20 2021 UTC"


def test_format_timestamp_out_of_range():
    assert format_timestamp(10**20, DATE_FORMAT) == ""
    assert format_timestamp(-5, "%Y") == "1970"


def test_format_timestamp_day_is_not_padded():
    assert format_timestamp(1610000000, "%-d|%d") == "7|07"
    assert format_timestamp(1612137600 + 9 * 86400, "%-d") == "10"


def test_render_address():
    value = _decode(
        {
            "address": {
                "street": "1 Infinite Loop",
                "city": "Cupertino",
                "state": "CA",
                "zip": "95014",
                "country": "us",
            }
        }
    )
    assert isinstance(value, AddressValue)
    assert render_field_value(value, DATE_FORMAT) == "1 Infinite Loop\nCupertino, CA 95014\nus"


@pytest.mark.parametrize(
    "raw, protected",
    [
        ({"concealed": "x"}, True),
        ({"string": "x"}, False),
        ({"date": 1}, False),
    ],
)
def test_only_concealed_is_protected(raw, protected):
    assert is_protected(_decode(raw)) is protected
