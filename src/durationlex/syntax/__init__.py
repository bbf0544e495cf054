"""Low-level scanning infrastructure shared by the pattern compiler and codec.

Python 3.13+. Zero external dependencies.
"""

from .cursor import Cursor, ParseResult

__all__ = ["Cursor", "ParseResult"]
