"""
Command-line interface for rewriting the text parts of .eml files.

Usage:
    # Reverse every line of every text part, print the result
    python -m mime_visitor.cli.rewrite input.eml --transform reverse-lines

    # Uppercase text parts, write to a new file
    mime-visitor input.eml --transform upper --output output.eml

    # Treat undeclared charsets as Windows-1252
    mime-visitor input.eml -t lower --fallback-charset cp1252
"""

import argparse
import sys
from email.message import Message
from pathlib import Path
from typing import List, Optional

import structlog

from mime_visitor.errors import MimeVisitorError
from mime_visitor.logging_config import setup_logging
from mime_visitor.munger import rewrite_all_content, rewrite_all_lines
from mime_visitor.parsing import message_to_bytes, parse_eml_file
from mime_visitor.parts import MessagePart
from mime_visitor.transforms import (
    BUILTIN_TRANSFORMS,
    BuiltinTransform,
    RewriteMode,
    get_transform,
)
from mime_visitor.version import __version__


# Setup logging
setup_logging()
logger = structlog.get_logger(__name__)


# ============================================================================
# CLI FUNCTIONS
# ============================================================================

def rewrite_message(
    msg: Message,
    transform: BuiltinTransform,
    fallback_charset: Optional[str] = None,
) -> int:
    """
    Apply a built-in transform to every text leaf of a message, in place.

    Args:
        msg: Parsed message
        transform: Transform to apply
        fallback_charset: Charset for parts that declare none

    Returns:
        Number of text leaves rewritten
    """
    root = MessagePart(msg)
    if transform.mode == RewriteMode.LINES:
        return rewrite_all_lines(root, transform.func, fallback_charset)
    return rewrite_all_content(root, transform.func, fallback_charset)


def process_single_file(
    eml_path: Path,
    transform: BuiltinTransform,
    fallback_charset: Optional[str] = None,
    verbose: bool = False,
) -> bytes:
    """
    Rewrite a single .eml file and return the new message bytes.

    Args:
        eml_path: Path to .eml file
        transform: Transform to apply
        fallback_charset: Charset for parts that declare none
        verbose: Enable verbose output

    Returns:
        Rewritten message as bytes
    """
    msg = parse_eml_file(str(eml_path))
    count = rewrite_message(msg, transform, fallback_charset)

    if verbose:
        logger.info(
            "file_rewritten",
            path=str(eml_path),
            transform=transform.name,
            text_leaves=count,
        )

    return message_to_bytes(msg)


def write_output(data: bytes, output_path: Optional[Path]) -> None:
    """
    Write message bytes to a file, or to stdout when no path is given.
    """
    if not output_path:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)

    logger.info("output_written", path=str(output_path), size_bytes=len(data))


# ============================================================================
# MAIN CLI
# ============================================================================

def _transform_help() -> str:
    return "\n".join(
        f"  {t.name:<28}{t.description} ({t.mode.value})"
        for t in BUILTIN_TRANSFORMS.values()
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="mime-visitor",
        description="Rewrite the text/plain and text/html parts of an .eml file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  %(prog)s input.eml --transform reverse-lines
  %(prog)s input.eml -t upper --output output.eml

Transforms:
{_transform_help()}
        """,
    )

    parser.add_argument("input", type=str, help="Path to .eml file")

    parser.add_argument(
        "--transform",
        "-t",
        type=str,
        required=True,
        help="Name of the built-in transform to apply",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file path (default: stdout)",
    )

    parser.add_argument(
        "--fallback-charset",
        type=str,
        default=None,
        help="Charset for text parts without a usable declared charset "
        "(default: FALLBACK_CHARSET setting, iso-8859-1)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    try:
        transform = get_transform(args.transform)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        sys.exit(1)

    try:
        data = process_single_file(
            eml_path=input_path,
            transform=transform,
            fallback_charset=args.fallback_charset,
            verbose=args.verbose,
        )
        output_path = Path(args.output) if args.output else None
        write_output(data, output_path)

    except (MimeVisitorError, ValueError, OSError) as e:
        logger.error("cli_failed", error=str(e), exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
