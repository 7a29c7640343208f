"""Decoding of the single-key tagged values of section fields.

A field value looks like ``{"concealed": "1234"}`` or
``{"address": {"street": ..., "city": ...}}``. The tag selects one case of
the ``FieldValue`` union; unknown tags fall back to ``RawValue``.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Union

from .document import DocumentNode


@dataclass(frozen=True)
class TotpValue:
    secret: str


@dataclass(frozen=True)
class DateValue:
    timestamp: int


@dataclass(frozen=True)
class EmailValue:
    address: str


@dataclass(frozen=True)
class AddressValue:
    street: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = ""


@dataclass(frozen=True)
class ConcealedValue:
    text: str


@dataclass(frozen=True)
class RawValue:
    tag: str
    text: str


FieldValue = Union[TotpValue, DateValue, EmailValue, AddressValue, ConcealedValue, RawValue]


def decode_field_value(value: DocumentNode) -> FieldValue:
    """Select the union case from the tag of a field value.

    The tag is the smallest key of the object; an empty or non-object value
    decodes to an empty ``RawValue``.
    """
    tag = value.first_key()
    payload = value.get(tag)

    match tag:
        case "totp":
            return TotpValue(secret=payload.as_str())
        case "date":
            return DateValue(timestamp=payload.as_int())
        case "email":
            return EmailValue(address=payload.get("email_address").as_str())
        case "address":
            return AddressValue(
                street=payload.get("street").as_str(),
                city=payload.get("city").as_str(),
                state=payload.get("state").as_str(),
                zip=payload.get("zip").as_str(),
                country=payload.get("country").as_str(),
            )
        case "concealed":
            return ConcealedValue(text=payload.as_str())
        case _:
            return RawValue(tag=tag, text=payload.as_str())


def format_timestamp(timestamp: int, date_format: str) -> str:
    """Render epoch seconds in UTC; out of range values render empty."""
    try:
        moment = datetime.fromtimestamp(max(timestamp, 0), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return ""
    return moment.strftime(date_format.replace("%-d", str(moment.day)))


def render_field_value(value: FieldValue, date_format: str) -> str:
    """Text stored for a non-TOTP field value."""
    match value:
        case DateValue(timestamp=timestamp):
            return format_timestamp(timestamp, date_format)
        case EmailValue(address=address):
            return address
        case AddressValue():
            return (
                f"{value.street}\n"
                f"{value.city}, {value.state} {value.zip}\n"
                f"{value.country}"
            )
        case ConcealedValue(text=text) | RawValue(text=text):
            return text
        case TotpValue(secret=secret):
            return secret


def is_protected(value: FieldValue) -> bool:
    return isinstance(value, ConcealedValue)
