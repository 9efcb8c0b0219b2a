"""Tokenizer for ASON text.

Produces a flat list of :class:`Token` objects.  Comments and
horizontal whitespace are dropped; line breaks are kept as
``NEWLINE`` tokens because they separate container elements.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ason_query.ason.errors import AsonParseError
from ason_query.ason.nodes import (
    DEFAULT_FLOAT_KIND,
    DEFAULT_INTEGER_KIND,
    FLOAT_KINDS,
    INTEGER_KINDS,
)


class TokenKind(enum.Enum):
    LBRACE = "'{'"
    RBRACE = "'}'"
    LBRACKET = "'['"
    RBRACKET = "']'"
    LPAREN = "'('"
    RPAREN = "')'"
    COLON = "':'"
    DOUBLE_COLON = "'::'"
    COMMA = "','"
    NEWLINE = "a line break"
    IDENT = "an identifier"
    INTEGER = "an integer"
    FLOAT = "a floating-point number"
    BOOLEAN = "a boolean"
    CHAR = "a char"
    STRING = "a string"
    DATETIME = "a date-time"
    BYTES = "byte data"
    EOF = "the end of the document"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    offset: int
    value: Any = None

    def describe(self) -> str:
        if self.kind is TokenKind.IDENT:
            return f"identifier '{self.value}'"
        return self.kind.value


_PUNCTUATION: dict[str, TokenKind] = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
}

_SIMPLE_ESCAPES: dict[str, str] = {
    "\\": "\\",
    '"': '"',
    "'": "'",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\0",
}

_NUMBER_RE = re.compile(
    r"""
    (?P<sign>[+-])?
    (?:
        0x(?P<hex>[0-9a-fA-F_]+)
      | 0b(?P<bin>[01_]+)
      | (?P<dec>\d[\d_]*(?P<frac>\.\d[\d_]*)?(?P<exp>[eE][+-]?\d+)?)
    )
    (?:_?(?P<kind>[iu](?:8|16|32|64)|f32|f64))?
    """,
    re.VERBOSE,
)
IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NON_FINITE: dict[str, tuple[float, str]] = {
    f"{word}{suffix}": (float(word.lower()), kind)
    for word in ("NaN", "Inf")
    for suffix, kind in (("", DEFAULT_FLOAT_KIND), ("_f32", "f32"), ("_f64", "f64"))
}
"""Non-finite float literals, keyed by spelling."""

_SIGNED_INF_RE = re.compile(r"[+-]Inf(?:_f32|_f64)?")
_MAX_INTEGER_DIGITS = 20
"""No integer kind holds a decimal magnitude longer than this."""

RESERVED_WORDS: frozenset[str] = frozenset(("true", "false", *_NON_FINITE))
_UNICODE_ESCAPE_RE = re.compile(r"\{([0-9a-fA-F]{1,6})\}")
_WHITESPACE = " \t\r\ufeff"


class Lexer:
    """Single-pass scanner over an ASON source text."""

    def __init__(self, source: str) -> None:
        self._src = source
        self._pos = 0

    def tokenize(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self._next_token()
            tokens.append(token)
            if token.kind is TokenKind.EOF:
                return tokens

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _next_token(self) -> Token:
        self._skip_trivia()
        src, pos = self._src, self._pos
        if pos >= len(src):
            return Token(TokenKind.EOF, pos)

        ch = src[pos]
        if ch == "\n":
            self._pos += 1
            return Token(TokenKind.NEWLINE, pos)
        if ch in _PUNCTUATION:
            self._pos += 1
            return Token(_PUNCTUATION[ch], pos)
        if ch == ":":
            if src.startswith("::", pos):
                self._pos += 2
                return Token(TokenKind.DOUBLE_COLON, pos)
            self._pos += 1
            return Token(TokenKind.COLON, pos)
        if ch == '"':
            text = self._read_escaped('"')
            return Token(TokenKind.STRING, pos, text)
        if ch == "'":
            return self._read_char()
        if ch == "r" and (src.startswith('r"', pos) or src.startswith('r#"', pos)):
            return self._read_raw_string()
        if ch == "d" and src.startswith('d"', pos):
            return self._read_datetime()
        if ch == "h" and src.startswith('h"', pos):
            return self._read_bytes()
        if ch.isdigit() or (ch in "+-" and pos + 1 < len(src)):
            return self._read_number()
        match = IDENT_RE.match(src, pos)
        if match:
            self._pos = match.end()
            word = match.group()
            if word in ("true", "false"):
                return Token(TokenKind.BOOLEAN, pos, word == "true")
            if word in _NON_FINITE:
                return Token(TokenKind.FLOAT, pos, _NON_FINITE[word])
            return Token(TokenKind.IDENT, pos, word)
        raise AsonParseError(f"unexpected character {ch!r}", pos)

    def _skip_trivia(self) -> None:
        src = self._src
        while self._pos < len(src):
            ch = src[self._pos]
            if ch in _WHITESPACE:
                self._pos += 1
            elif src.startswith("//", self._pos):
                end = src.find("\n", self._pos)
                self._pos = len(src) if end == -1 else end
            elif src.startswith("/*", self._pos):
                self._skip_block_comment()
            else:
                return

    def _skip_block_comment(self) -> None:
        start = self._pos
        depth = 0
        src = self._src
        while self._pos < len(src):
            if src.startswith("/*", self._pos):
                depth += 1
                self._pos += 2
            elif src.startswith("*/", self._pos):
                depth -= 1
                self._pos += 2
                if depth == 0:
                    return
            else:
                self._pos += 1
        raise AsonParseError("unterminated block comment", start)

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def _read_number(self) -> Token:
        src, start = self._src, self._pos
        signed_inf = _SIGNED_INF_RE.match(src, start)
        if signed_inf is not None and not self._ident_follows(signed_inf.end()):
            self._pos = signed_inf.end()
            value, kind = _NON_FINITE[signed_inf.group()[1:]]
            return Token(TokenKind.FLOAT, start, (value if src[start] == "+" else -value, kind))

        match = _NUMBER_RE.match(src, start)
        if match is None:
            raise AsonParseError(f"unexpected character {src[start]!r}", start)
        if self._ident_follows(match.end()) or src.startswith(".", match.end()):
            raise AsonParseError("invalid number literal", start)
        self._pos = match.end()

        negative = match.group("sign") == "-"
        kind = match.group("kind")
        decimal = match.group("dec")
        is_float = kind in FLOAT_KINDS or (
            decimal is not None and (match.group("frac") or match.group("exp"))
        )

        if is_float:
            if decimal is None:
                raise AsonParseError("hexadecimal and binary literals cannot be floats", start)
            if kind is not None and kind not in FLOAT_KINDS:
                raise AsonParseError(f"a floating-point number cannot have the type '{kind}'", start)
            value = float(_strip_separators(decimal, start))
            return Token(
                TokenKind.FLOAT,
                start,
                (-value if negative else value, kind or DEFAULT_FLOAT_KIND),
            )

        kind = kind or DEFAULT_INTEGER_KIND
        if decimal is not None:
            digits = _strip_separators(decimal, start)
            if len(digits.lstrip("0")) > _MAX_INTEGER_DIGITS:
                raise AsonParseError(f"integer literal is out of range for type '{kind}'", start)
            magnitude = int(digits, 10)
        elif match.group("hex") is not None:
            magnitude = int(_strip_separators(match.group("hex"), start), 16)
        else:
            magnitude = int(_strip_separators(match.group("bin"), start), 2)
        number = -magnitude if negative else magnitude
        low, high = INTEGER_KINDS[kind]
        if not low <= number <= high:
            # huge hex or binary values cannot be formatted in decimal
            shown = str(number) if magnitude.bit_length() <= 64 else "literal"
            raise AsonParseError(f"integer {shown} is out of range for type '{kind}'", start)
        return Token(TokenKind.INTEGER, start, (number, kind))

    def _ident_follows(self, pos: int) -> bool:
        return pos < len(self._src) and (self._src[pos].isalnum() or self._src[pos] == "_")

    # ------------------------------------------------------------------
    # Quoted literals
    # ------------------------------------------------------------------

    def _read_escaped(self, quote: str) -> str:
        """Read a quoted literal starting at the opening *quote*."""
        src, start = self._src, self._pos
        pos = start + 1
        parts: list[str] = []
        while True:
            if pos >= len(src):
                what = "string" if quote == '"' else "char"
                raise AsonParseError(f"unterminated {what}", start)
            ch = src[pos]
            if ch == quote:
                self._pos = pos + 1
                return "".join(parts)
            if ch != "\\":
                parts.append(ch)
                pos += 1
                continue
            escape = src[pos + 1 : pos + 2]
            if escape in _SIMPLE_ESCAPES:
                parts.append(_SIMPLE_ESCAPES[escape])
                pos += 2
            elif escape == "u":
                match = _UNICODE_ESCAPE_RE.match(src, pos + 2)
                code = int(match.group(1), 16) if match else -1
                if not 0 <= code <= 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                    raise AsonParseError("invalid unicode escape, expected '\\u{HEX}'", pos)
                parts.append(chr(code))
                pos = match.end()
            else:
                raise AsonParseError(f"unsupported escape sequence '\\{escape}'", pos)

    def _read_char(self) -> Token:
        start = self._pos
        text = self._read_escaped("'")
        if len(text) != 1:
            raise AsonParseError("a char literal must contain exactly one character", start)
        return Token(TokenKind.CHAR, start, text)

    def _read_raw_string(self) -> Token:
        src, start = self._src, self._pos
        hashed = src.startswith('r#"', start)
        opening, closing = ('r#"', '"#') if hashed else ('r"', '"')
        end = src.find(closing, start + len(opening))
        if end == -1:
            raise AsonParseError("unterminated raw string", start)
        self._pos = end + len(closing)
        return Token(TokenKind.STRING, start, src[start + len(opening) : end])

    def _read_prefixed(self) -> tuple[int, str]:
        src, start = self._src, self._pos
        end = src.find('"', start + 2)
        if end == -1:
            raise AsonParseError("unterminated literal", start)
        self._pos = end + 1
        return start, src[start + 2 : end]

    def _read_datetime(self) -> Token:
        start, text = self._read_prefixed()
        try:
            value = datetime.fromisoformat(text.strip())
        except ValueError:
            raise AsonParseError(f"invalid date-time {text!r}", start) from None
        return Token(TokenKind.DATETIME, start, value)

    def _read_bytes(self) -> Token:
        start, text = self._read_prefixed()
        octets = text.split()
        if not all(len(o) == 2 and all(c in "0123456789abcdefABCDEF" for c in o) for o in octets):
            raise AsonParseError("byte data must be space-separated two-digit hex values", start)
        return Token(TokenKind.BYTES, start, bytes(int(o, 16) for o in octets))


def _strip_separators(digits: str, offset: int) -> str:
    cleaned = digits.replace("_", "")
    if not cleaned:
        raise AsonParseError("invalid number literal", offset)
    return cleaned


def tokenize(source: str) -> list[Token]:
    """Convenience wrapper around :class:`Lexer`."""
    return Lexer(source).tokenize()
