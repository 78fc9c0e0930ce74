"""
In-memory part tree for callers that do not hold an ``email`` message.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .protocol import split_lines


@dataclass(eq=False)
class SimplePart:
    """
    A plain ``Part`` holding its content type, charset and body directly.

    A part is multipart when its content type's main type is ``multipart``.
    Parts compare by identity.
    """

    content_type: str = "text/plain"
    charset: Optional[str] = None
    body: bytes = b""
    parts: List["SimplePart"] = field(default_factory=list)

    def is_multipart(self) -> bool:
        return self.content_type.split("/", 1)[0].strip().lower() == "multipart"

    def children(self) -> List["SimplePart"]:
        return list(self.parts)

    def effective_content_type(self) -> str:
        return self.content_type

    def declared_charset(self) -> Optional[str]:
        return self.charset

    def body_bytes(self) -> bytes:
        return self.body

    def body_lines(self) -> List[bytes]:
        return split_lines(self.body)

    def set_body(self, data: bytes) -> None:
        if self.is_multipart():
            raise TypeError("Cannot set the body of a multipart part")
        self.body = bytes(data)
