# Email parsing module

from .eml_parser import message_to_bytes, parse_eml_bytes, parse_eml_file

__all__ = [
    "parse_eml_bytes",
    "parse_eml_file",
    "message_to_bytes",
]
