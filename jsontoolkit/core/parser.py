"""
Parser for jsontoolkit - converts path tokens into a tuple of segments.
"""

from typing import Optional

from ..security.exceptions import ErrorReporter, ErrorSuggestionEngine
from ..security.limits import LimitValidator
from .filter_parser import FilterParser
from .parser_base import BaseParserMixin
from .segments import (
    FilterSegment,
    IndexSegment,
    PropertySegment,
    RecursiveDescentSegment,
    RootSegment,
    Segment,
    WildcardSegment,
)
from .tokenizer import Token, TokenType


class PathParser(BaseParserMixin):
    """Recursive-descent parser for path expressions."""

    def __init__(
        self,
        tokens: list[Token],
        expression: str,
        error_reporter: Optional[ErrorReporter] = None,
        validator: Optional[LimitValidator] = None,
    ):
        self.tokens = tokens
        self.pos = 0
        self.expression = expression
        self.error_reporter = error_reporter
        self.validator = validator
        self.segments: list[Segment] = []

    def parse(self) -> tuple[Segment, ...]:
        """Parse the full token stream. The result always starts with RootSegment."""
        self.pos = 0
        self.segments = []

        root = self.current_token()
        if root.type != TokenType.ROOT:
            self.raise_syntax_error(
                "path must start with '$'",
                root.position,
                ErrorSuggestionEngine.suggest_for_missing_root(self.expression),
            )
        self.advance()
        self._emit(RootSegment())

        while not self.at(TokenType.EOF):
            token = self.current_token()
            if token.type == TokenType.DOT:
                self._parse_child()
            elif token.type == TokenType.DOUBLE_DOT:
                self._parse_descendant()
            elif token.type == TokenType.LBRACKET:
                self._parse_bracket()
            else:
                self.raise_syntax_error(
                    f"Unexpected '{token.value}'",
                    token.position,
                    ["Separate steps with '.', '..' or '[...]'"],
                )

        return tuple(self.segments)

    def _emit(self, segment: Segment) -> None:
        if self.validator:
            self.validator.count_segment()
        self.segments.append(segment)

    def _parse_child(self) -> None:
        dot = self.advance()
        token = self.current_token()

        if token.type == TokenType.STAR:
            self.advance()
            self._emit(WildcardSegment())
            return

        name = self.parse_name_token(token)
        if name is not None:
            self.advance()
            self._emit(PropertySegment(name))
            return

        if token.type == TokenType.EOF:
            self.raise_syntax_error("path cannot end with '.'", dot.position)
        self.raise_syntax_error(
            f"Expected property name or '*' after '.', found '{token.value}'",
            token.position,
            ErrorSuggestionEngine.suggest_for_unexpected_character(token.value[:1]),
        )

    def _parse_descendant(self) -> None:
        dots = self.advance()
        token = self.current_token()
        self._emit(RecursiveDescentSegment())

        if token.type == TokenType.STAR:
            self.advance()
            self._emit(WildcardSegment())
            return

        if token.type == TokenType.LBRACKET:
            self._parse_bracket()
            return

        name = self.parse_name_token(token)
        if name is not None:
            self.advance()
            self._emit(PropertySegment(name))
            return

        if token.type == TokenType.EOF:
            self.raise_syntax_error("path cannot end with '..'", dots.position)
        self.raise_syntax_error(
            f"Expected property name, '*' or '[' after '..', found '{token.value}'",
            token.position,
        )

    def _parse_bracket(self) -> None:
        bracket = self.current_token()
        if not self.has_ahead(TokenType.RBRACKET):
            self.raise_syntax_error(
                "Unclosed bracket",
                bracket.position,
                ErrorSuggestionEngine.suggest_for_unclosed_structure("bracket"),
            )
        self.advance()

        token = self.current_token()
        if token.type == TokenType.NUMBER:
            self._emit(self._parse_index(token))
        elif token.type == TokenType.STAR:
            self.advance()
            self._emit(WildcardSegment())
        elif token.type == TokenType.STRING:
            self.advance()
            self._emit(PropertySegment(token.value))
        elif token.type == TokenType.QUESTION:
            self._emit(self._parse_filter())
        elif token.type == TokenType.RBRACKET:
            self.raise_syntax_error("Empty brackets", token.position)
        else:
            self.raise_syntax_error(
                f"Invalid bracket selector '{token.value}'",
                token.position,
                ["Use [index], [*], ['name'] or [?(@.name == value)]"],
            )

        self.expect(
            TokenType.RBRACKET,
            "Expected ']' to close the selector",
            ErrorSuggestionEngine.suggest_for_unclosed_structure("bracket"),
        )

    def _parse_index(self, token: Token) -> IndexSegment:
        if token.value.startswith("-"):
            self.raise_syntax_error(
                "Negative array indices are not supported",
                token.position,
                ErrorSuggestionEngine.suggest_for_index(token.value),
            )
        if not token.value.isdigit():
            self.raise_syntax_error(
                f"Array index must be an integer, found '{token.value}'",
                token.position,
                ErrorSuggestionEngine.suggest_for_index(token.value),
            )
        self.advance()
        return IndexSegment(int(token.value))

    def _parse_filter(self) -> FilterSegment:
        self.advance()
        lparen = self.expect(
            TokenType.LPAREN,
            "Expected '(' after '?'",
            ["Write filters as [?(@.name == value)]"],
        )

        inner: list[Token] = []
        while not self.at(TokenType.RPAREN):
            token = self.current_token()
            if token.type in (TokenType.RBRACKET, TokenType.EOF):
                self.raise_syntax_error(
                    "Unclosed parenthesis",
                    lparen.position,
                    ErrorSuggestionEngine.suggest_for_unclosed_structure("parenthesis"),
                )
            inner.append(self.advance())
        rparen = self.advance()

        inner.append(Token(TokenType.EOF, "", rparen.position))
        predicate = FilterParser(
            inner, self.expression, self.error_reporter, self.validator
        ).parse()
        return FilterSegment(predicate)
