"""
Ready-made transforms for common rewrites.

Each entry knows whether it works on a whole body or on single lines, so the
CLI can pick the matching rewrite entry point.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from .parts import Part


class RewriteMode(str, Enum):
    """Unit a transform is applied to."""

    CONTENT = "content"
    LINES = "lines"


@dataclass(frozen=True)
class BuiltinTransform:
    name: str
    mode: RewriteMode
    func: Callable[[str, Part], Optional[str]]
    description: str


def split_terminator(line: str) -> Tuple[str, str]:
    """
    Split a line into its text and its line terminator.

    Args:
        line: One line, possibly ending in ``\\n`` or ``\\r\\n``

    Returns:
        Tuple of (text, terminator); terminator is "" for a final fragment
    """
    text = line.rstrip("\r\n")
    return text, line[len(text):]


def upper(text: str, part: Part) -> str:
    return text.upper()


def lower(text: str, part: Part) -> str:
    return text.lower()


def reverse_line(line: str, part: Part) -> str:
    text, terminator = split_terminator(line)
    return text[::-1] + terminator


def strip_trailing_whitespace(line: str, part: Part) -> str:
    text, terminator = split_terminator(line)
    return text.rstrip() + terminator


BUILTIN_TRANSFORMS: Dict[str, BuiltinTransform] = {
    t.name: t
    for t in (
        BuiltinTransform("upper", RewriteMode.CONTENT, upper, "Uppercase all text"),
        BuiltinTransform("lower", RewriteMode.CONTENT, lower, "Lowercase all text"),
        BuiltinTransform(
            "reverse-lines",
            RewriteMode.LINES,
            reverse_line,
            "Reverse the characters of each line",
        ),
        BuiltinTransform(
            "strip-trailing-whitespace",
            RewriteMode.LINES,
            strip_trailing_whitespace,
            "Remove whitespace at the end of each line",
        ),
    )
}


def get_transform(name: str) -> BuiltinTransform:
    """
    Look up a built-in transform by name.

    Raises:
        KeyError: If no transform has that name (message lists known names)
    """
    try:
        return BUILTIN_TRANSFORMS[name]
    except KeyError:
        known = ", ".join(sorted(BUILTIN_TRANSFORMS))
        raise KeyError(f"Unknown transform {name!r} (known: {known})") from None
