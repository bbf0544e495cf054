"""Pattern-driven text formatting and parsing of durations.

The codec never imports a duration type: it exchanges BridgeRecord values
with any type implementing RecordConvertible.

Python 3.13+.
"""

from .bridge import BridgeRecord, RecordConvertible, require_fields
from .codec import DurationFormat, check_fields, render, scan
from .tokens import FieldToken, LiteralToken, Token, TokenProgram, compile_pattern

__all__ = [
    "BridgeRecord",
    "DurationFormat",
    "FieldToken",
    "LiteralToken",
    "RecordConvertible",
    "Token",
    "TokenProgram",
    "check_fields",
    "compile_pattern",
    "render",
    "require_fields",
    "scan",
]
