"""
CLI module for rewriting .eml files.
"""

from mime_visitor.cli.rewrite import main as rewrite_main

__all__ = ["rewrite_main"]
