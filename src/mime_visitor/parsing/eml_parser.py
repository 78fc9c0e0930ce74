"""
Reading and writing .eml files (RFC5322/MIME format).

Parsing and serialization are delegated to Python's standard library email
module; rewriting only ever touches part bodies, so headers come back out
exactly as the generator renders them.
"""

from email import message_from_bytes
from email.message import Message


def parse_eml_bytes(eml_bytes: bytes) -> Message:
    """
    Parse .eml bytes into email.Message object.

    Args:
        eml_bytes: Raw .eml file bytes

    Returns:
        Parsed email.Message object

    Raises:
        ValueError: If bytes are not valid RFC5322 format
    """
    try:
        msg = message_from_bytes(eml_bytes)
        return msg
    except Exception as e:
        raise ValueError(f"Failed to parse .eml file: {str(e)}") from e


def parse_eml_file(eml_path: str) -> Message:
    """
    Parse .eml file into email.Message object.

    Args:
        eml_path: Path to .eml file

    Returns:
        Parsed email.Message object

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file is not valid RFC5322 format
    """
    with open(eml_path, "rb") as f:
        eml_bytes = f.read()
    return parse_eml_bytes(eml_bytes)


def message_to_bytes(msg: Message) -> bytes:
    """
    Serialize a message back to .eml bytes.

    Args:
        msg: Message to serialize

    Returns:
        Raw .eml bytes
    """
    return msg.as_bytes()
