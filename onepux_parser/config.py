"""Centralized configuration management using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defines converter settings, loaded from environment variables or .env file.

    Attributes
    ----------
    export_member : str
        Name of the archive member holding the export document.
    read_chunk_size : int
        Number of bytes read per iteration when extracting the member.
    favorite_tag : str
        Tag added to entries marked as favorite.
    archived_tag : str
        Tag added to entries whose item was archived.
    date_format : str
        ``strftime`` format used to render ``date`` section fields; ``%-d``
        is the day of month without padding on every platform.
    section_token_length : int
        Length of the random prefix given to untitled sections.
    """

    export_member: str = "export.data"
    read_chunk_size: int = 8192

    favorite_tag: str = "Favorite"
    archived_tag: str = "Archived"
    date_format: str = "%a %b %-d %H:%M:%S %Y UTC"
    section_token_length: int = 5

    model_config = SettingsConfigDict(
        env_prefix="ONEPUX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

# Create a single instance of settings to be used throughout the application
settings = Settings()
