"""Mapping of export items to credential entries."""
from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from verboselogs import VerboseLogger

from onepux_parser.config import Settings
from onepux_parser.models import Entry, TotpSettings, build_totp_url

from .document import DocumentNode
from .field_values import (
    TotpValue,
    decode_field_value,
    is_protected,
    render_field_value,
)

EXTRA_URL_ATTRIBUTE = "KP2A_URL_{index}"
OTP_ATTRIBUTE = "otp"


def generate_token(length: int = 5) -> str:
    """Short random hex token.

    Tokens are not checked against each other; two untitled sections of one
    item may get the same prefix.
    """
    return uuid4().hex[:length]


def epoch_to_datetime(seconds: int) -> datetime:
    try:
        return datetime.fromtimestamp(max(seconds, 0), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return datetime.fromtimestamp(0, tz=timezone.utc)


class ItemMapper:
    """Transcribe one item node into an ``Entry``.

    Missing or mistyped fields degrade to empty values; this mapper never
    rejects an item.
    """

    def __init__(self, logger: VerboseLogger, settings: Settings | None = None):
        self.logger = logger
        self.settings = settings or Settings()

    def map_item(self, node: DocumentNode) -> Entry:
        item = node.get("item") if node.get("item").is_map() else node
        overview = item.get("overview")
        details = item.get("details")

        entry = Entry()
        entry.title = overview.get("title").as_str()
        entry.url = overview.get("url").as_str()

        self._read_urls(entry, overview)
        self._read_tags(entry, item, overview)
        self._read_login_fields(entry, details)
        entry.notes = details.get("notesPlain").as_str()
        self._read_sections(entry, details)

        # TODO: import attachments from the files/ directory of the archive.

        entry.remove_history_items()

        created = epoch_to_datetime(item.get("createdAt").as_int())
        modified = epoch_to_datetime(item.get("updatedAt").as_int())
        entry.time_info.creation_time = created
        entry.time_info.last_modification_time = modified
        entry.time_info.last_access_time = modified

        self.logger.spam(
            f"Mapped item '{entry.title}' ({len(entry.attributes)} attributes)."
        )
        return entry

    def _read_urls(self, entry: Entry, overview: DocumentNode) -> None:
        index = 1
        for url_node in overview.get("urls"):
            url = url_node.get("url").as_str()
            if url != entry.url:
                entry.set_attribute(EXTRA_URL_ATTRIBUTE.format(index=index), url)
                index += 1

    def _read_tags(
        self, entry: Entry, item: DocumentNode, overview: DocumentNode
    ) -> None:
        if overview.contains("tags"):
            entry.set_tags(",".join(overview.get("tags").as_string_list()))
        if item.get("favIndex").as_str() == "1":
            entry.add_tag(self.settings.favorite_tag)
        if item.get("state").as_str() == "archived":
            entry.add_tag(self.settings.archived_tag)

    def _read_login_fields(self, entry: Entry, details: DocumentNode) -> None:
        for field in details.get("loginFields"):
            designation = field.get("designation").as_str().lower()
            if designation == "username":
                entry.username = field.get("value").as_str()
            elif designation == "password":
                entry.password = field.get("value").as_str()

    def _read_sections(self, entry: Entry, details: DocumentNode) -> None:
        for section in details.get("sections"):
            prefix = section.get("title").as_str()
            if not prefix:
                prefix = generate_token(self.settings.section_token_length)

            for field in section.get("fields"):
                name = field.get("title").as_str() or field.get("id").as_str()
                name = f"{prefix}_{name}"

                value = decode_field_value(field.get("value"))
                if isinstance(value, TotpValue):
                    self._add_totp(entry, value.secret)
                    continue

                text = render_field_value(value, self.settings.date_format)
                if text:
                    entry.set_attribute(name, text, is_protected(value))

    def _add_totp(self, entry: Entry, secret: str) -> None:
        url = build_totp_url(entry.title, entry.username, secret)

        if entry.has_totp():
            name = OTP_ATTRIBUTE
            index = 0
            while name in entry.attributes:
                index += 1
                name = f"{OTP_ATTRIBUTE}_{index}"
            entry.set_attribute(name, url, protected=True)
            self.logger.debug(f"Stored extra TOTP of '{entry.title}' as '{name}'.")
        else:
            entry.totp = TotpSettings.parse_settings(url)
