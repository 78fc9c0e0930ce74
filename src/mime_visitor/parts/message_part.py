"""
Part adapter over the standard library email model.

Wraps ``email.message.Message`` objects (as produced by ``message_from_bytes``)
so that the walker and the munger can traverse and rewrite them. Transfer
encodings are handled here; charsets are not.
"""

import base64
import quopri
from email.message import Message
from typing import List, Optional

from .protocol import split_lines

KNOWN_TRANSFER_ENCODINGS = frozenset(
    {"7bit", "8bit", "binary", "quoted-printable", "base64"}
)

OPAQUE_CONTENT_TYPE = "application/octet-stream"


class MessagePart:
    """
    A ``Part`` backed by an ``email.message.Message``.

    Two wrappers are equal when they wrap the same message object, so parts
    returned by separate ``children()`` calls compare equal.
    """

    def __init__(self, message: Message):
        self.message = message

    def __repr__(self) -> str:
        return f"MessagePart({self.message.get_content_type()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessagePart):
            return NotImplemented
        return self.message is other.message

    def __hash__(self) -> int:
        return id(self.message)

    def is_multipart(self) -> bool:
        return self.message.is_multipart()

    def children(self) -> List["MessagePart"]:
        # message/rfc822 parts carry their enclosed message as a one-item list
        if not self.message.is_multipart():
            return []
        return [MessagePart(sub) for sub in self.message.get_payload()]

    def transfer_encoding(self) -> str:
        """Lowercased Content-Transfer-Encoding, defaulting to 7bit."""
        value = str(self.message.get("Content-Transfer-Encoding", "")).strip().lower()
        return value or "7bit"

    def effective_content_type(self) -> str:
        """
        Content type the body can actually be read as.

        A body in an unknown transfer encoding cannot be decoded into its
        declared type, so it is reported as ``application/octet-stream``.
        """
        if self.transfer_encoding() not in KNOWN_TRANSFER_ENCODINGS:
            return OPAQUE_CONTENT_TYPE
        return self.message.get_content_type()

    def declared_charset(self) -> Optional[str]:
        return self.message.get_content_charset()

    def body_bytes(self) -> bytes:
        """Transfer-decoded body bytes (empty when the part has no body)."""
        if self.message.is_multipart():
            return b""
        return self.message.get_payload(decode=True) or b""

    def body_lines(self) -> List[bytes]:
        return split_lines(self.body_bytes())

    def set_body(self, data: bytes) -> None:
        """
        Replace the body, keeping the part's current transfer encoding.

        Headers are left untouched.

        Args:
            data: New body bytes (before transfer encoding)

        Raises:
            TypeError: If the part is a multipart container
        """
        if self.message.is_multipart():
            raise TypeError("Cannot set the body of a multipart part")

        encoding = self.transfer_encoding()
        if encoding == "base64":
            payload = base64.encodebytes(data).decode("ascii")
        elif encoding == "quoted-printable":
            payload = quopri.encodestring(data).decode("ascii")
        else:
            # surrogateescape keeps 8bit bytes intact through the generator
            payload = data.decode("ascii", "surrogateescape")

        self.message.set_payload(payload)
