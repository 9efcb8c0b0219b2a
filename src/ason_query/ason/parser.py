"""Recursive-descent parser turning ASON tokens into a value tree."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from ason_query.ason.errors import AsonParseError
from ason_query.ason.lexer import Token, TokenKind, tokenize
from ason_query.ason.nodes import (
    AsonValue,
    BooleanValue,
    ByteDataValue,
    CharValue,
    DateTimeValue,
    FloatValue,
    IntegerValue,
    ListValue,
    ObjectEntry,
    ObjectValue,
    StringValue,
    TupleValue,
    VariantValue,
)

T = TypeVar("T")

_CLOSERS: dict[TokenKind, str] = {
    TokenKind.RBRACKET: "list",
    TokenKind.RPAREN: "tuple",
    TokenKind.RBRACE: "object",
}

MAX_NESTING_DEPTH = 128
"""Deepest container nesting accepted in one document."""


class Parser:
    """Parser over a fully tokenized document."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._index = 0
        self._depth = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse_document(self) -> AsonValue:
        self._skip_newlines()
        if self._peek().kind is TokenKind.EOF:
            raise AsonParseError("the document is empty", self._peek().offset)
        value = self._parse_value()
        self._skip_newlines()
        trailing = self._peek()
        if trailing.kind is not TokenKind.EOF:
            raise AsonParseError(
                f"expected the end of the document, found {trailing.describe()}",
                trailing.offset,
            )
        return value

    # ------------------------------------------------------------------
    # Token cursor
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.kind is not TokenKind.EOF:
            self._index += 1
        return token

    def _expect(self, kind: TokenKind, context: str) -> Token:
        token = self._peek()
        if token.kind is not kind:
            raise AsonParseError(
                f"expected {kind.value} {context}, found {token.describe()}",
                token.offset,
            )
        return self._advance()

    def _skip_newlines(self) -> None:
        while self._peek().kind is TokenKind.NEWLINE:
            self._advance()

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def _parse_value(self) -> AsonValue:
        token = self._advance()
        kind = token.kind
        if kind is TokenKind.INTEGER:
            return IntegerValue(*token.value)
        if kind is TokenKind.FLOAT:
            return FloatValue(*token.value)
        if kind is TokenKind.BOOLEAN:
            return BooleanValue(token.value)
        if kind is TokenKind.CHAR:
            return CharValue(token.value)
        if kind is TokenKind.STRING:
            return StringValue(token.value)
        if kind is TokenKind.DATETIME:
            return DateTimeValue(token.value)
        if kind is TokenKind.BYTES:
            return ByteDataValue(token.value)
        if kind is TokenKind.LBRACKET:
            return ListValue(tuple(self._parse_elements(TokenKind.RBRACKET, self._parse_value)))
        if kind is TokenKind.LPAREN:
            return TupleValue(tuple(self._parse_elements(TokenKind.RPAREN, self._parse_value)))
        if kind is TokenKind.LBRACE:
            return self._parse_object_body()
        if kind is TokenKind.IDENT and self._peek().kind is TokenKind.DOUBLE_COLON:
            return self._parse_variant(token)
        raise AsonParseError(f"expected a value, found {token.describe()}", token.offset)

    def _parse_object_body(self) -> ObjectValue:
        return ObjectValue(tuple(self._parse_elements(TokenKind.RBRACE, self._parse_entry)))

    def _parse_entry(self) -> ObjectEntry:
        key = self._expect(TokenKind.IDENT, "as the object key")
        self._expect(TokenKind.COLON, f"after the object key '{key.value}'")
        self._skip_newlines()
        return ObjectEntry(key.value, self._parse_value())

    def _parse_variant(self, type_token: Token) -> VariantValue:
        self._advance()  # '::'
        member = self._expect(TokenKind.IDENT, "as the variant member name")
        following = self._peek().kind
        if following is TokenKind.LBRACE:
            self._advance()
            return VariantValue(type_token.value, member.value, self._parse_object_body())
        if following is TokenKind.LPAREN:
            opening = self._advance()
            values = self._parse_elements(TokenKind.RPAREN, self._parse_value)
            if not values:
                raise AsonParseError("a variant payload cannot be empty", opening.offset)
            payload = values[0] if len(values) == 1 else TupleValue(tuple(values))
            return VariantValue(type_token.value, member.value, payload)
        return VariantValue(type_token.value, member.value)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def _parse_elements(self, closer: TokenKind, parse_item: Callable[[], T]) -> list[T]:
        """Parse separated items up to and including *closer*.

        Items are separated by a comma, line breaks, or both.  A single
        trailing separator is accepted.
        """
        opening = self._tokens[self._index - 1]
        if self._depth >= MAX_NESTING_DEPTH:
            raise AsonParseError(
                f"nesting is too deep; at most {MAX_NESTING_DEPTH} levels are allowed",
                opening.offset,
            )
        self._depth += 1
        items: list[T] = []
        self._skip_newlines()
        while self._peek().kind is not closer:
            if self._peek().kind is TokenKind.EOF:
                raise AsonParseError(
                    f"expected {closer.value} to close the {_CLOSERS[closer]}",
                    self._peek().offset,
                )
            items.append(parse_item())
            separated = self._consume_separator()
            token = self._peek()
            if not separated and token.kind not in (closer, TokenKind.EOF):
                raise AsonParseError(
                    f"expected ',' or a line break between elements, found {token.describe()}",
                    token.offset,
                )
        self._advance()
        self._depth -= 1
        return items

    def _consume_separator(self) -> bool:
        seen_separator = False
        seen_comma = False
        while True:
            token = self._peek()
            if token.kind is TokenKind.NEWLINE:
                seen_separator = True
            elif token.kind is TokenKind.COMMA:
                if seen_comma:
                    raise AsonParseError("unexpected ','", token.offset)
                seen_comma = seen_separator = True
            else:
                return seen_separator
            self._advance()


def parse_from_str(source: str) -> AsonValue:
    """Parse *source* as a single ASON document.

    Raises
    ------
    AsonParseError
        When *source* is not well-formed.
    """
    return Parser(tokenize(source)).parse_document()
