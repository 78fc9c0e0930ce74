"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Parsed sample messages
- In-memory part trees
- Temporary .eml files
"""

import os
from email.message import Message
from typing import Generator

import pytest

from mime_visitor.parsing import parse_eml_bytes
from mime_visitor.parts import SimplePart
from .fixtures.emails import SAMPLE_EMAILS


@pytest.fixture
def multipart_message() -> Message:
    """
    Parsed multipart/mixed message with a UTF-8 text leaf and a PNG leaf.

    Returns:
        email.Message instance
    """
    return parse_eml_bytes(SAMPLE_EMAILS["multipart_text_and_image"])


@pytest.fixture
def nested_message() -> Message:
    """
    Parsed message with nested multiparts, a text/xml leaf and an attached message.

    Returns:
        email.Message instance
    """
    return parse_eml_bytes(SAMPLE_EMAILS["nested"])


@pytest.fixture
def latin1_html_message() -> Message:
    """
    Parsed single-part text/html message in ISO-8859-1.

    Returns:
        email.Message instance
    """
    return parse_eml_bytes(SAMPLE_EMAILS["latin1_html"])


@pytest.fixture
def simple_tree() -> dict:
    """
    In-memory tree, keyed by name for assertions.

        root (multipart/mixed)
        +-- plain (text/plain)
        +-- alternative (multipart/alternative)
        |   +-- html (text/html)
        |   +-- xml (text/xml)
        +-- image (image/png)

    Returns:
        Dict of name -> SimplePart
    """
    plain = SimplePart("text/plain", "utf-8", b"abc\ndef\n")
    html = SimplePart("text/html; charset=utf-8", "utf-8", b"<p>hi</p>\n")
    xml = SimplePart("text/xml", "utf-8", b"<doc/>\n")
    alternative = SimplePart("multipart/alternative", parts=[html, xml])
    image = SimplePart("image/png", body=b"\x89PNG\r\n\x1a\n")
    root = SimplePart("multipart/mixed", parts=[plain, alternative, image])

    return {
        "root": root,
        "plain": plain,
        "alternative": alternative,
        "html": html,
        "xml": xml,
        "image": image,
    }


@pytest.fixture
def tmp_eml_file(tmp_path) -> Generator[str, None, None]:
    """
    Create temporary .eml file for file-based tests.

    Args:
        tmp_path: pytest's temporary directory fixture

    Yields:
        Path to temporary .eml file
    """
    eml_path = tmp_path / "test_email.eml"
    eml_path.write_bytes(SAMPLE_EMAILS["multipart_text_and_image"])
    yield str(eml_path)


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config):
    """
    Configure pytest with custom markers and settings.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (CLI, end-to-end)"
    )
