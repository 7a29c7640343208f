"""Data model for time-based one-time-password settings."""
from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qs, quote, unquote, urlencode, urlsplit

DEFAULT_PERIOD = 30
DEFAULT_DIGITS = 6
DEFAULT_ALGORITHM = "SHA1"
ALGORITHMS = ("SHA1", "SHA256", "SHA512")


@dataclass
class TotpSettings:
    """Parsed ``otpauth://totp`` configuration.

    Attributes
    ----------
    secret : str
        Base32 shared secret.
    period : int
        Step in seconds.
    digits : int
        Length of the generated code.
    algorithm : str
        HMAC digest name.
    issuer : str
        Issuer from the label or the ``issuer`` query parameter.
    account : str
        Account name from the label.
    url : str
        The encoded URL the settings were parsed from.
    """

    secret: str
    period: int = DEFAULT_PERIOD
    digits: int = DEFAULT_DIGITS
    algorithm: str = DEFAULT_ALGORITHM
    issuer: str = ""
    account: str = ""
    url: str = ""

    @classmethod
    def parse_settings(cls, url: str) -> TotpSettings | None:
        """Parse an otpauth URL, returning None when it carries no secret."""
        parts = urlsplit(url)
        if parts.scheme.lower() != "otpauth" or parts.netloc.lower() != "totp":
            return None

        query = parse_qs(parts.query)
        secret = _first(query, "secret").replace(" ", "")
        if not secret:
            return None

        label = unquote(parts.path.lstrip("/"))
        issuer, _, account = label.rpartition(":")
        issuer = _first(query, "issuer") or issuer

        algorithm = _first(query, "algorithm").upper()
        if algorithm not in ALGORITHMS:
            algorithm = DEFAULT_ALGORITHM

        return cls(
            secret=secret,
            period=_bounded_int(_first(query, "period"), DEFAULT_PERIOD, 1, 86400),
            digits=_bounded_int(_first(query, "digits"), DEFAULT_DIGITS, 1, 10),
            algorithm=algorithm,
            issuer=issuer,
            account=account,
            url=url,
        )

    def to_url(self) -> str:
        """Rebuild a canonical otpauth URL from the settings."""
        label = quote(f"{self.issuer}:{self.account}" if self.issuer else self.account)
        query = {
            "secret": self.secret,
            "period": self.period,
            "digits": self.digits,
            "algorithm": self.algorithm,
        }
        if self.issuer:
            query["issuer"] = self.issuer
        return f"otpauth://totp/{label}?{urlencode(query, quote_via=quote)}"


def build_totp_url(title: str, username: str, secret: str) -> str:
    """Build the encoded otpauth URL for a title, username and secret."""
    label = f"{quote(title, safe='')}:{quote(username, safe='@')}"
    return f"otpauth://totp/{label}?secret={quote(secret, safe='')}"


def _first(query: dict[str, list[str]], key: str) -> str:
    values = query.get(key)
    return values[0].strip() if values else ""


def _bounded_int(value: str, default: int, low: int, high: int) -> int:
    try:
        number = int(value)
    except ValueError:
        return default
    return number if low <= number <= high else default
