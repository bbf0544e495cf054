"""Immutable cursor infrastructure for pattern and input scanning.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (only for errors)

Both the pattern compiler and the input scanner walk their strings with a
Cursor, so a compiled pattern or a half-scanned input never holds mutable
position state.
"""

from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("12-05", 0)
        >>> cursor.current
        '1'
        >>> cursor.advance().current
        '2'
        >>> cursor.current  # Original unchanged (immutability)
        '1'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def startswith(self, text: str, *, ignore_case: bool = False) -> bool:
        """Check whether the remaining source begins with text.

        Args:
            text: Text to look for at the current position
            ignore_case: Compare ASCII text case-insensitively (pattern keywords);
                non-ASCII candidates never match

        Example:
            >>> Cursor("hh24:mi", 0).startswith("HH24", ignore_case=True)
            True
        """
        candidate = self.source[self.pos : self.pos + len(text)]
        if ignore_case:
            return candidate.isascii() and candidate.upper() == text.upper()
        return candidate == text

    def skip_whitespace(self) -> "Cursor":
        """Skip any Unicode whitespace (spaces, tabs, newlines).

        Example:
            >>> Cursor("  \\t 12", 0).skip_whitespace().pos
            4
        """
        c = self
        while not c.is_eof and c.current.isspace():
            c = c.advance()
        return c

    def take_digits(self, limit: int | None = None) -> "ParseResult[str]":
        """Consume up to limit ASCII digits (all leading digits if None).

        Args:
            limit: Maximum number of digits to consume

        Returns:
            ParseResult with the digit string (possibly empty) and the cursor
            past the consumed digits

        Example:
            >>> result = Cursor("12345-1", 0).take_digits(2)
            >>> result.value, result.cursor.pos
            ('12', 2)
            >>> Cursor("12345-1", 0).take_digits().value
            '12345'
        """
        end = self.pos
        stop = len(self.source) if limit is None else min(len(self.source), self.pos + limit)
        while end < stop and self.source[end] in "0123456789":
            end += 1
        return ParseResult(self.slice_to(end), Cursor(self.source, end))

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("DD\\nHH24", 3).compute_line_col()
            (2, 1)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Scanner result containing the scanned value and new cursor position.

    Type Parameters:
        T: The type of the scanned value

    Example:
        >>> cursor = Cursor("07", 0)
        >>> result = ParseResult("0", cursor.advance())
        >>> result.value
        '0'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
