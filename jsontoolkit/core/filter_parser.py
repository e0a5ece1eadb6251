"""
Parser for filter expressions found between ``[?(`` and ``)]``.

Grammar::

    filter  := "@" ("." name)+ cmp-op literal
    literal := number | quoted-string | "true" | "false"
"""

from typing import Optional

from ..security.exceptions import ErrorReporter, ErrorSuggestionEngine
from ..security.limits import LimitValidator
from .parser_base import BaseParserMixin
from .segments import ComparisonOperator, Literal, Predicate
from .tokenizer import Token, TokenType


class FilterParser(BaseParserMixin):
    """Recursive-descent parser producing a Predicate from filter tokens."""

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

    def parse(self) -> Predicate:
        """Parse the whole token list as a single comparison."""
        start = self.current_token()
        if start.type == TokenType.EOF:
            self.raise_syntax_error("Empty filter expression", start.position)

        self.expect(
            TokenType.CURRENT,
            "Filter expression must start with '@'",
            ["Reference the candidate node's properties as @.name"],
        )
        path = self._parse_relative_path(start.position)
        operator = self._parse_operator()
        literal = self._parse_literal()

        trailing = self.current_token()
        if trailing.type != TokenType.EOF:
            self.raise_syntax_error(
                f"Unexpected '{trailing.value}' after comparison",
                trailing.position,
                ["Filters hold a single comparison; '&&' and '||' are not supported"],
            )

        return Predicate(path=path, operator=operator, literal=literal)

    def _parse_relative_path(self, position: int) -> tuple[str, ...]:
        names: list[str] = []

        while self.at(TokenType.DOT, TokenType.DOUBLE_DOT):
            dot = self.advance()
            if dot.type == TokenType.DOUBLE_DOT:
                self.raise_syntax_error(
                    "Recursive descent is not supported inside filters", dot.position
                )
            token = self.current_token()
            name = self.parse_name_token(token)
            if name is None:
                self.raise_syntax_error(
                    "Expected property name after '.'", token.position
                )
            self.advance()
            names.append(name)

        if not names:
            self.raise_syntax_error(
                "Filter must compare a property of '@'",
                self.current_token().position,
                ["Write the left operand as @.name or @.parent.child"],
            )

        if self.validator:
            self.validator.validate_filter_path(len(names), position)
        return tuple(names)

    def _parse_operator(self) -> ComparisonOperator:
        token = self.current_token()
        if token.type != TokenType.OPERATOR:
            self.raise_syntax_error(
                "Expected comparison operator",
                token.position,
                ErrorSuggestionEngine.suggest_for_operator(token.value),
            )
        self.advance()
        return ComparisonOperator(token.value)

    def _parse_literal(self) -> Literal:
        token = self.current_token()

        if token.type == TokenType.NUMBER:
            self.advance()
            return self.parse_number_token(token)
        if token.type == TokenType.STRING:
            self.advance()
            return token.value
        if token.type == TokenType.BOOLEAN:
            self.advance()
            return self.parse_boolean_token(token)

        found = token.value or "end of filter"
        self.raise_syntax_error(
            f"Expected a number, string, true or false literal, found '{found}'",
            token.position,
            ["Quote string literals: @.name == 'value'"],
        )
