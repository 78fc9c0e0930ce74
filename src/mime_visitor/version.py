"""
Version constant for mime_visitor.
"""

__version__ = "0.1.0"
