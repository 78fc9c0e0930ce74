"""
Walk the parts of MIME messages and rewrite their text.

Transforms operate on decoded text; charsets and transfer encodings are
handled on the way in and out.
"""

from .errors import ConfigurationError, DecodeError, EncodeError, MimeVisitorError
from .munger import (
    resolve_charset,
    rewrite_all_content,
    rewrite_all_lines,
    rewrite_content,
    rewrite_lines,
)
from .parts import MessagePart, Part, SimplePart
from .version import __version__
from .walker import (
    is_text_content_type,
    iter_leaves,
    iter_parts,
    iter_text_leaves,
    walk_leaves,
    walk_parts,
    walk_text_leaves,
)

__all__ = [
    "__version__",
    "Part",
    "MessagePart",
    "SimplePart",
    "walk_parts",
    "walk_leaves",
    "walk_text_leaves",
    "iter_parts",
    "iter_leaves",
    "iter_text_leaves",
    "is_text_content_type",
    "resolve_charset",
    "rewrite_content",
    "rewrite_lines",
    "rewrite_all_content",
    "rewrite_all_lines",
    "MimeVisitorError",
    "DecodeError",
    "EncodeError",
    "ConfigurationError",
]
