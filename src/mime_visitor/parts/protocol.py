"""
The part contract consumed by the walker and the munger.

Anything that behaves like a node of a MIME tree can be walked and rewritten,
as long as it offers these methods. Parsing, header storage and serialization
stay with the implementing document model.
"""

import io
from typing import List, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Part(Protocol):
    """One node of a document tree: a multipart container or a leaf."""

    def is_multipart(self) -> bool:
        ...

    def children(self) -> Sequence["Part"]:
        ...

    def effective_content_type(self) -> str:
        ...

    def declared_charset(self) -> Optional[str]:
        ...

    def body_bytes(self) -> bytes:
        ...

    def body_lines(self) -> List[bytes]:
        ...

    def set_body(self, data: bytes) -> None:
        ...


def split_lines(data: bytes) -> List[bytes]:
    """
    Split a body into lines, each keeping its terminator.

    Lines end after every ``\\n`` (so ``\\r\\n`` stays inside its line). A
    trailing fragment without a newline is a line of its own, and an empty
    body has no lines at all.

    Args:
        data: Raw body bytes

    Returns:
        Lines whose concatenation equals ``data``
    """
    return io.BytesIO(data).readlines()
