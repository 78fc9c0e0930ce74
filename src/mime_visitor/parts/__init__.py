# Part abstraction and adapters

from .memory import SimplePart
from .message_part import KNOWN_TRANSFER_ENCODINGS, MessagePart
from .protocol import Part, split_lines

__all__ = [
    "Part",
    "MessagePart",
    "SimplePart",
    "KNOWN_TRANSFER_ENCODINGS",
    "split_lines",
]
