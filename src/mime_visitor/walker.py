"""
Depth-first traversal of part trees.

Every traversal is pre-order: a part comes before its children, and children
come in their stored order. Each mode is offered twice, as a generator
(``iter_*``) and as a callback walker (``walk_*``) built on that generator, so
both forms select the same parts in the same order.
"""

import re
from typing import Callable, Iterator

from .parts import Part

Visitor = Callable[[Part], object]

TEXT_CONTENT_TYPE_PATTERN = re.compile(r"text/(?:plain|html)(?:;|\Z)", re.IGNORECASE)


def is_text_content_type(content_type: str) -> bool:
    """
    Check whether a content type names a rewritable text body.

    Matches ``text/plain`` or ``text/html`` (any case), optionally followed by
    ``;`` and parameters. Other ``text/*`` subtypes do not match.

    Args:
        content_type: Content type, optionally with parameters

    Returns:
        True for text/plain and text/html, False otherwise

    Examples:
        >>> is_text_content_type("TEXT/HTML; charset=utf-8")
        True
        >>> is_text_content_type("text/xml")
        False
    """
    return TEXT_CONTENT_TYPE_PATTERN.match(content_type) is not None


def iter_parts(root: Part) -> Iterator[Part]:
    """
    Yield ``root`` and then every part below it, in pre-order.

    Children are requested only once their parent has been yielded.
    """
    yield root
    for child in root.children():
        yield from iter_parts(child)


def iter_leaves(root: Part) -> Iterator[Part]:
    """Yield the non-multipart parts of the tree, in pre-order."""
    for part in iter_parts(root):
        if not part.is_multipart():
            yield part


def iter_text_leaves(root: Part) -> Iterator[Part]:
    """Yield the text/plain and text/html leaves of the tree, in pre-order."""
    for part in iter_leaves(root):
        if is_text_content_type(part.effective_content_type()):
            yield part


def walk_parts(root: Part, visit: Visitor) -> None:
    """
    Call ``visit`` on every part of the tree, including the root itself.

    Args:
        root: Root of the tree
        visit: Called once per part; anything it raises propagates
    """
    for part in iter_parts(root):
        visit(part)


def walk_leaves(root: Part, visit: Visitor) -> None:
    """
    Call ``visit`` on every leaf part of the tree.

    Multipart parts are descended into but never passed to ``visit``.
    """
    for part in iter_leaves(root):
        visit(part)


def walk_text_leaves(root: Part, visit: Visitor) -> None:
    """
    Call ``visit`` on every text/plain or text/html leaf of the tree.
    """
    for part in iter_text_leaves(root):
        visit(part)
