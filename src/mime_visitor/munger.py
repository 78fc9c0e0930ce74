"""
Charset-aware rewriting of text parts.

Callers supply a transform that works on decoded text; this module decodes the
part body with the part's charset, runs the transform, encodes the result with
the same charset and writes it back through ``Part.set_body``. Nothing is
written unless every piece of the part decoded, transformed and encoded.

Transforms are called as ``transform(text, part)`` and return the new text.
Returning ``None`` leaves the text as it was. The part is passed for reading
only (content type, charset); writing to it directly bypasses re-encoding.
"""

from typing import Callable, Optional

import structlog

from .config import check_fallback_charset, lookup_charset, settings
from .errors import ConfigurationError, DecodeError, EncodeError
from .parts import Part
from .walker import iter_text_leaves

logger = structlog.get_logger(__name__)

Transform = Callable[[str, Part], Optional[str]]


def _fallback_charset(fallback_charset: Optional[str]) -> str:
    if fallback_charset is None:
        return settings.fallback_charset
    try:
        return check_fallback_charset(fallback_charset)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e


def resolve_charset(part: Part, fallback_charset: Optional[str] = None) -> str:
    """
    Pick the charset used to decode and re-encode a part.

    The declared charset wins when it names a character set Python knows. A
    missing, empty or unknown declaration falls back to a single-byte charset
    (ISO-8859-1 unless configured otherwise), which decodes any bytes.

    Args:
        part: Part whose charset is resolved
        fallback_charset: Override for ``settings.fallback_charset``

    Returns:
        Charset name

    Raises:
        ConfigurationError: If ``fallback_charset`` cannot decode arbitrary bytes
    """
    fallback = _fallback_charset(fallback_charset)

    declared = (part.declared_charset() or "").strip()
    if not declared:
        logger.debug("charset_fallback", reason="undeclared", charset=fallback)
        return fallback

    try:
        lookup_charset(declared)
    except LookupError:
        logger.warning(
            "charset_fallback", reason="unknown", declared=declared, charset=fallback
        )
        return fallback

    return declared


def _decode(data: bytes, charset: str, line_number: Optional[int] = None) -> str:
    try:
        return data.decode(charset)
    except UnicodeDecodeError as e:
        raise DecodeError(charset, e.reason, line_number) from e


def _encode(text: str, charset: str, line_number: Optional[int] = None) -> bytes:
    try:
        return text.encode(charset)
    except UnicodeEncodeError as e:
        raise EncodeError(charset, e.reason, line_number) from e


def _apply(transform: Transform, text: str, part: Part) -> str:
    result = transform(text, part)
    if result is None:
        return text
    if not isinstance(result, str):
        raise TypeError(
            f"Transform must return str or None, got {type(result).__name__}"
        )
    return result


def rewrite_content(
    part: Part, transform: Transform, fallback_charset: Optional[str] = None
) -> None:
    """
    Rewrite a text part's whole body through ``transform``.

    Args:
        part: Text leaf to rewrite
        transform: Called once with the decoded body
        fallback_charset: Override for ``settings.fallback_charset``

    Raises:
        DecodeError: If the body is not valid in the resolved charset
        EncodeError: If the new text cannot be encoded in the resolved charset
    """
    charset = resolve_charset(part, fallback_charset)

    original = part.body_bytes()
    text = _apply(transform, _decode(original, charset), part)
    data = _encode(text, charset)

    part.set_body(data)
    logger.debug(
        "text_leaf_rewritten",
        mode="content",
        charset=charset,
        bytes_before=len(original),
        bytes_after=len(data),
    )


def rewrite_lines(
    part: Part, transform: Transform, fallback_charset: Optional[str] = None
) -> None:
    """
    Rewrite a text part line by line through ``transform``.

    Each line keeps its terminator when passed to ``transform``; whatever the
    transform returns (terminator included) replaces the line. The charset is
    resolved once for the part. The body is written once, after all lines
    have been processed.

    Args:
        part: Text leaf to rewrite
        transform: Called once per line, in body order
        fallback_charset: Override for ``settings.fallback_charset``

    Raises:
        DecodeError: If a line is not valid in the resolved charset
        EncodeError: If a transformed line cannot be encoded
    """
    charset = resolve_charset(part, fallback_charset)

    lines = part.body_lines()
    encoded = []
    for number, line in enumerate(lines):
        text = _apply(transform, _decode(line, charset, number), part)
        encoded.append(_encode(text, charset, number))

    data = b"".join(encoded)
    part.set_body(data)
    logger.debug(
        "text_leaf_rewritten",
        mode="lines",
        charset=charset,
        lines=len(lines),
        bytes_after=len(data),
    )


def _rewrite_tree(
    root: Part,
    rewrite: Callable[[Part, Transform, Optional[str]], None],
    transform: Transform,
    fallback_charset: Optional[str],
    mode: str,
) -> int:
    count = 0
    # Each leaf is written back before the walk moves on
    for part in iter_text_leaves(root):
        rewrite(part, transform, fallback_charset)
        count += 1

    logger.debug("tree_rewrite_completed", mode=mode, leaves=count)
    return count


def rewrite_all_content(
    root: Part, transform: Transform, fallback_charset: Optional[str] = None
) -> int:
    """
    Rewrite the whole body of every text/plain and text/html leaf.

    Leaves are processed in pre-order. The first error stops the walk: leaves
    already rewritten stay rewritten, later leaves are not touched.

    Args:
        root: Root of the part tree
        transform: Called once per text leaf with its decoded body
        fallback_charset: Override for ``settings.fallback_charset``

    Returns:
        Number of leaves rewritten
    """
    return _rewrite_tree(root, rewrite_content, transform, fallback_charset, "content")


def rewrite_all_lines(
    root: Part, transform: Transform, fallback_charset: Optional[str] = None
) -> int:
    """
    Like ``rewrite_all_content``, but ``transform`` is called per line.

    Returns:
        Number of leaves rewritten
    """
    return _rewrite_tree(root, rewrite_lines, transform, fallback_charset, "lines")
