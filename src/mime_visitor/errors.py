"""
Exception types raised while rewriting text parts.

Errors raised by caller-supplied transforms are never wrapped; they reach the
caller unchanged.
"""

from typing import Optional


class MimeVisitorError(Exception):
    """Base class for all mime_visitor errors."""


class ConfigurationError(MimeVisitorError):
    """Raised when a fallback charset given at call time is unusable."""


class _CodecError(MimeVisitorError, ValueError):
    """Shared shape of decode and encode failures."""

    action = "process"

    def __init__(self, charset: str, reason: str, line_number: Optional[int] = None):
        self.charset = charset
        self.reason = reason
        self.line_number = line_number

        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Cannot {self.action} text as {charset}{where}: {reason}")


class DecodeError(_CodecError):
    """Body bytes are not valid text under the resolved charset."""

    action = "decode"


class EncodeError(_CodecError):
    """Transformed text cannot be represented in the resolved charset."""

    action = "encode"
