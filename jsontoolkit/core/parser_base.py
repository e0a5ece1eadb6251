"""
Base parser functionality shared between the segment and filter parsers.
"""

from typing import NoReturn, Optional, Union

from ..security.exceptions import ErrorReporter, PathSyntaxError
from ..security.limits import LimitValidator
from .constants import BOOLEAN_LITERALS
from .tokenizer import Token, TokenType


class BaseParserMixin:
    """Token cursor and literal helpers shared by the path parsers."""

    tokens: list[Token]
    pos: int
    expression: str
    error_reporter: Optional[ErrorReporter]
    validator: Optional[LimitValidator]

    def current_token(self) -> Token:
        """Get the current token without advancing."""
        if self.pos >= len(self.tokens):
            end = self.tokens[-1].position if self.tokens else len(self.expression)
            return Token(TokenType.EOF, "", end)
        return self.tokens[self.pos]

    def peek_token(self, offset: int = 1) -> Token:
        """Look ahead at a token without advancing position."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            end = self.tokens[-1].position if self.tokens else len(self.expression)
            return Token(TokenType.EOF, "", end)
        return self.tokens[pos]

    def advance(self) -> Token:
        """Move to the next token and return the token just consumed."""
        token = self.current_token()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def at(self, *token_types: TokenType) -> bool:
        """Whether the current token has one of the given types."""
        return self.current_token().type in token_types

    def expect(
        self,
        token_type: TokenType,
        message: str,
        suggestions: Optional[list[str]] = None,
    ) -> Token:
        """Consume a token of the given type or raise a syntax error."""
        token = self.current_token()
        if token.type != token_type:
            self.raise_syntax_error(message, token.position, suggestions)
        return self.advance()

    def has_ahead(self, token_type: TokenType) -> bool:
        """Whether a token of the given type appears later in the stream."""
        return any(token.type == token_type for token in self.tokens[self.pos:])

    def parse_name_token(self, token: Token) -> Optional[str]:
        """Return the property name a bare word stands for, or None."""
        if token.type in (TokenType.IDENTIFIER, TokenType.BOOLEAN):
            return token.value
        if token.type == TokenType.NUMBER and token.value.isdigit():
            return token.value
        return None

    def parse_number_token(self, token: Token) -> Union[int, float]:
        """Parse a number token into int or float."""
        value = token.value
        if "." in value or "e" in value.lower():
            return float(value)
        return int(value)

    def parse_boolean_token(self, token: Token) -> bool:
        """Parse a boolean token."""
        return BOOLEAN_LITERALS[token.value]

    def raise_syntax_error(
        self, message: str, position: int, suggestions: Optional[list[str]] = None
    ) -> NoReturn:
        if self.error_reporter:
            raise self.error_reporter.create_syntax_error(message, position, suggestions)
        raise PathSyntaxError(message, self.expression, position, suggestions=suggestions)
