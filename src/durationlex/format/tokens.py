"""Pattern compiler: pattern string -> immutable token program.

Pattern vocabulary (case-insensitive):

    Token    | Field    | Rendered width          | Digits scanned
    ---------|----------|-------------------------|----------------
    Y..YYYY  | year     | letter count, minimum   | all leading digits
    MM       | month    | 2                       | up to 2
    DD       | day      | 2, minimum              | all leading digits
    HH24     | hour     | 2                       | up to 2
    MI       | minute   | 2                       | up to 2
    SS       | second   | 2                       | up to 2
    FF[1-9]  | fraction | precision (default 6)   | precision (default 9)

Double-quoted text is literal and may contain letters. Any other run of
characters that are neither letters nor digits is literal separator text.
Unknown letter runs and stray digits are rejected at compile time, so a
TokenProgram is always well formed.

Compiled programs are immutable and cached; one program can format and
parse any number of values from any number of threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from durationlex.constants import MAX_PATTERN_LENGTH, PATTERN_CACHE_SIZE
from durationlex.diagnostics import Diagnostic, ErrorTemplate, PatternSyntaxError
from durationlex.enums import FieldKind
from durationlex.syntax.cursor import Cursor

__all__ = [
    "FieldToken",
    "LiteralToken",
    "Token",
    "TokenProgram",
    "compile_pattern",
]

logger = logging.getLogger(__name__)

_QUOTE = '"'
_MAX_YEAR_LETTERS = 4


@dataclass(frozen=True, slots=True)
class FieldToken:
    """Numeric field reference inside a pattern.

    Attributes:
        field: Field rendered or scanned by this token
        width: Minimum rendered width (zero-padded)
        max_digits: Most digits consumed when scanning (None = unbounded)
        precision: Sub-second digits for FF tokens (None = default)
        position: Offset of the token in the pattern source
    """

    field: FieldKind
    width: int
    max_digits: int | None
    precision: int | None = None
    position: int = 0


@dataclass(frozen=True, slots=True)
class LiteralToken:
    """Separator text, matched with flexible surrounding whitespace.

    Attributes:
        text: Literal text exactly as written in the pattern
        position: Offset of the literal in the pattern source
    """

    text: str
    position: int = 0

    @property
    def stripped(self) -> str:
        """Text that must appear in the input (whitespace trimmed)."""
        return self.text.strip()


type Token = FieldToken | LiteralToken


@dataclass(frozen=True, slots=True)
class TokenProgram:
    """Compiled pattern.

    Attributes:
        source: Original pattern string
        tokens: Field and literal tokens in pattern order
    """

    source: str
    tokens: tuple[Token, ...]

    @property
    def fields(self) -> frozenset[FieldKind]:
        """Fields referenced by the program."""
        return frozenset(token.field for token in self.tokens if isinstance(token, FieldToken))

    def field_tokens(self) -> tuple[FieldToken, ...]:
        """Field tokens in pattern order."""
        return tuple(token for token in self.tokens if isinstance(token, FieldToken))


def _error(pattern: str, diagnostic: Diagnostic) -> PatternSyntaxError:
    logger.debug("Rejected pattern %r: %s", pattern, diagnostic)
    return PatternSyntaxError(diagnostic, pattern=pattern)


def _match_keyword(cursor: Cursor) -> tuple[FieldToken, Cursor] | None:
    """Match a field keyword at cursor, returning the token and new cursor."""
    pos = cursor.pos
    if cursor.startswith("HH24", ignore_case=True):
        return FieldToken(FieldKind.HOUR, 2, 2, position=pos), cursor.advance(4)
    if cursor.startswith("FF", ignore_case=True):
        digit = cursor.peek(2)
        if digit is not None and digit in "123456789":
            precision = int(digit)
            token = FieldToken(FieldKind.FRACTION, precision, precision, precision, pos)
            return token, cursor.advance(3)
        return FieldToken(FieldKind.FRACTION, 0, None, None, pos), cursor.advance(2)
    if cursor.current in "yY":
        letters = 0
        while letters < _MAX_YEAR_LETTERS and cursor.peek(letters) in ("y", "Y"):
            letters += 1
        return FieldToken(FieldKind.YEAR, letters, None, position=pos), cursor.advance(letters)

    two_letter = {
        "MM": FieldToken(FieldKind.MONTH, 2, 2, position=pos),
        "MI": FieldToken(FieldKind.MINUTE, 2, 2, position=pos),
        "DD": FieldToken(FieldKind.DAY, 2, None, position=pos),
        "SS": FieldToken(FieldKind.SECOND, 2, 2, position=pos),
    }
    candidate = cursor.slice_to(pos + 2)
    token = two_letter.get(candidate.upper()) if candidate.isascii() else None
    if token is None:
        return None
    return token, cursor.advance(2)


def _read_quoted(cursor: Cursor, pattern: str) -> tuple[str, Cursor]:
    """Read a double-quoted literal starting at the opening quote."""
    start = cursor.pos
    end = pattern.find(_QUOTE, start + 1)
    if end == -1:
        raise _error(pattern, ErrorTemplate.pattern_unterminated_quote(pattern, start))
    return pattern[start + 1 : end], Cursor(pattern, end + 1)


def _read_unknown(cursor: Cursor) -> str:
    """Collect the unrecognized run (letters or digits) at cursor."""
    kind = str.isalpha if cursor.current.isalpha() else str.isdigit
    c = cursor
    while not c.is_eof and kind(c.current):
        c = c.advance()
    return cursor.slice_to(c.pos)


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def compile_pattern(pattern: str) -> TokenProgram:
    """Compile a pattern string into a reusable TokenProgram.

    Thread-safe via lru_cache internal locking; failures are not cached.

    Args:
        pattern: Pattern such as "YYYY-MM" or "DD HH24:MI:SS.FF6"

    Returns:
        Immutable compiled program

    Raises:
        PatternSyntaxError: Unknown token, repeated field, unterminated
            quote, no field at all, or pattern longer than MAX_PATTERN_LENGTH

    Example:
        >>> program = compile_pattern("yyyy-mm")
        >>> [type(t).__name__ for t in program.tokens]
        ['FieldToken', 'LiteralToken', 'FieldToken']
        >>> sorted(program.fields)
        [<FieldKind.MONTH: 'month'>, <FieldKind.YEAR: 'year'>]
    """
    if len(pattern) > MAX_PATTERN_LENGTH:
        raise _error(pattern, ErrorTemplate.pattern_too_long(len(pattern), MAX_PATTERN_LENGTH))

    tokens: list[Token] = []
    seen: set[FieldKind] = set()
    literal: list[str] = []
    literal_start = 0

    def flush_literal() -> None:
        if literal:
            tokens.append(LiteralToken("".join(literal), literal_start))
            literal.clear()

    cursor = Cursor(pattern, 0)
    while not cursor.is_eof:
        char = cursor.current

        if char == _QUOTE:
            if not literal:
                literal_start = cursor.pos
            text, cursor = _read_quoted(cursor, pattern)
            literal.append(text)
            continue

        if char.isalpha():
            matched = _match_keyword(cursor)
            if matched is None:
                unknown = _read_unknown(cursor)
                raise _error(
                    pattern, ErrorTemplate.pattern_unknown_token(pattern, unknown, cursor.pos)
                )
            token, cursor = matched
            if token.field in seen:
                raise _error(
                    pattern,
                    ErrorTemplate.pattern_duplicate_field(pattern, token.field, token.position),
                )
            seen.add(token.field)
            flush_literal()
            tokens.append(token)
            continue

        if char.isdigit():
            unknown = _read_unknown(cursor)
            raise _error(pattern, ErrorTemplate.pattern_unknown_token(pattern, unknown, cursor.pos))

        if not literal:
            literal_start = cursor.pos
        literal.append(char)
        cursor = cursor.advance()

    flush_literal()

    if not seen:
        raise _error(pattern, ErrorTemplate.pattern_no_fields(pattern))

    program = TokenProgram(pattern, tuple(tokens))
    logger.debug("Compiled pattern %r into %d tokens", pattern, len(program.tokens))
    return program
