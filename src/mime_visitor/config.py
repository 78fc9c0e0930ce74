"""
Library configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

import codecs

from pydantic import field_validator
from pydantic_settings import BaseSettings

ALL_BYTES = bytes(range(256))

# Text codecs that do not name a character set and do not round-trip bodies
NON_CHARSET_CODECS = frozenset(
    {"unicode-escape", "raw-unicode-escape", "idna", "punycode"}
)


def lookup_charset(charset: str) -> str:
    """
    Resolve a charset name to the canonical name of its Python codec.

    Args:
        charset: Charset name, as declared in a header or configured

    Returns:
        Canonical codec name

    Raises:
        LookupError: If Python has no codec by that name, or the codec is not
            a character set (bytes-to-bytes codecs such as base64, escape codecs)
    """
    info = codecs.lookup(charset)
    if not getattr(info, "_is_text_encoding", True) or info.name in NON_CHARSET_CODECS:
        raise LookupError(f"{charset!r} is not a character set")
    return info.name


def check_fallback_charset(charset: str) -> str:
    """
    Verify that a charset can stand in for an undeclared one.

    The fallback must decode every possible byte value, so only single-byte
    supersets such as ISO-8859-1 qualify.

    Args:
        charset: Charset name

    Returns:
        Canonical codec name for the charset

    Raises:
        ValueError: If the charset is unknown or cannot decode arbitrary bytes
    """
    try:
        name = lookup_charset(charset)
    except LookupError as e:
        raise ValueError(f"Unknown fallback charset (not a character set): {charset}") from e

    try:
        ALL_BYTES.decode(name)
    except UnicodeDecodeError as e:
        raise ValueError(
            f"Fallback charset {charset} cannot decode arbitrary bytes"
        ) from e

    return name


class Settings(BaseSettings):
    """
    Library configuration from environment variables.

    All settings can be overridden via environment variables with the same name.
    """

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Charset used when a text part declares none (or an unknown one)
    fallback_charset: str = "iso-8859-1"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("fallback_charset")
    @classmethod
    def validate_fallback_charset(cls, value: str) -> str:
        return check_fallback_charset(value)


# Global settings instance
settings = Settings()
