"""
Lexer for jsontoolkit - tokenizes path expressions for parsing.
"""

from collections.abc import Iterator
from enum import Enum
from typing import NamedTuple, NoReturn, Optional

import regex

from ..security.exceptions import ErrorReporter, ErrorSuggestionEngine, PathSyntaxError
from .constants import (
    COMPARISON_OPERATORS,
    PATH_ESCAPE_MAP,
    ROOT_ANCHOR,
    get_punctuation_token_map,
)

NUMBER_PATTERN = regex.compile(r"-?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
DIGITS_PATTERN = regex.compile(r"[0-9]+")
IDENTIFIER_PATTERN = regex.compile(r"[\p{L}_][\p{L}\p{N}\p{M}_\-]*")


class TokenType(Enum):
    """Token types for path expressions."""

    ROOT = "ROOT"
    CURRENT = "CURRENT"
    DOT = "DOT"
    DOUBLE_DOT = "DOUBLE_DOT"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    STAR = "STAR"
    QUESTION = "QUESTION"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    OPERATOR = "OPERATOR"

    NUMBER = "NUMBER"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"
    IDENTIFIER = "IDENTIFIER"

    EOF = "EOF"


class Token(NamedTuple):
    """Token with type, value and character index in the expression."""

    type: TokenType
    value: str
    position: int


class Lexer:
    """Lexical analyzer for path expressions."""

    def __init__(self, text: str, error_reporter: Optional[ErrorReporter] = None) -> None:
        self.text = text
        self.pos = 0
        self.error_reporter = error_reporter
        # Positions of "[" not yet matched by "]"
        self.open_brackets: list[int] = []

    def peek(self, offset: int = 0) -> str:
        """Peek at character at given offset without consuming it."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def advance(self) -> str:
        """Advance position and return the current character."""
        if self.pos >= len(self.text):
            return ""
        char = self.text[self.pos]
        self.pos += 1
        return char

    def skip_whitespace(self) -> None:
        """Skip blanks between tokens."""
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def read_string(self, quote_char: str) -> str:
        """Read a quoted string with escape sequence handling."""
        start = self.pos
        result = ""
        self.advance()

        while self.pos < len(self.text):
            char = self.advance()
            if char == quote_char:
                return result
            if char == "\\":
                result += self._read_escape()
            else:
                result += char

        self._raise_error(
            "Unterminated string literal",
            start,
            ErrorSuggestionEngine.suggest_for_unexpected_character(quote_char),
        )

    def _read_escape(self) -> str:
        escape_pos = self.pos - 1
        next_char = self.advance()
        if next_char == "u":
            hex_digits = self.text[self.pos:self.pos + 4]
            if len(hex_digits) == 4 and all(c in "0123456789abcdefABCDEF" for c in hex_digits):
                self.pos += 4
                return chr(int(hex_digits, 16))
            self._raise_error("Invalid unicode escape sequence", escape_pos)
        if next_char in PATH_ESCAPE_MAP:
            return PATH_ESCAPE_MAP[next_char]
        self._raise_error(f"Invalid escape sequence '\\{next_char}'", escape_pos)

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the expression into a sequence of tokens."""
        punctuation = get_punctuation_token_map()
        first = True
        after_dot = False
        self.open_brackets = []

        while True:
            self.skip_whitespace()
            if self.pos >= len(self.text):
                break

            char = self.peek()
            pos = self.pos

            if char == ROOT_ANCHOR:
                if not first:
                    self._raise_error(
                        "Unexpected '$'",
                        pos,
                        ErrorSuggestionEngine.suggest_for_unexpected_character(char),
                    )
                self.advance()
                yield Token(TokenType.ROOT, char, pos)
            elif char == ".":
                yield self._read_dots(pos)
            elif char in punctuation:
                self.advance()
                if char == "[":
                    self.open_brackets.append(pos)
                elif char == "]" and self.open_brackets:
                    self.open_brackets.pop()
                yield Token(punctuation[char], char, pos)
            elif char in "=!<>":
                yield self._read_operator(pos)
            elif char in "\"'":
                yield Token(TokenType.STRING, self.read_string(char), pos)
            else:
                yield self._read_word(char, pos, after_dot)

            first = False
            after_dot = char == "."

        if self.open_brackets:
            self._raise_error(
                "Unclosed bracket",
                self.open_brackets[-1],
                ErrorSuggestionEngine.suggest_for_unclosed_structure("bracket"),
            )

        yield Token(TokenType.EOF, "", self.pos)

    def _read_dots(self, pos: int) -> Token:
        self.advance()
        if self.peek() == ".":
            self.advance()
            return Token(TokenType.DOUBLE_DOT, "..", pos)
        return Token(TokenType.DOT, ".", pos)

    def _read_operator(self, pos: int) -> Token:
        for operator in COMPARISON_OPERATORS:
            if self.text.startswith(operator, pos):
                self.pos += len(operator)
                return Token(TokenType.OPERATOR, operator, pos)

        char = self.peek()
        self._raise_error(
            f"Unknown operator '{char}'",
            pos,
            ErrorSuggestionEngine.suggest_for_operator(char),
        )

    def _read_word(self, char: str, pos: int, after_dot: bool = False) -> Token:
        # "$.a.0.1" names keys "0" and "1", not the number 0.1
        pattern = DIGITS_PATTERN if after_dot else NUMBER_PATTERN
        match = pattern.match(self.text, pos)
        if match:
            self.pos = match.end()
            return Token(TokenType.NUMBER, match.group(), pos)

        match = IDENTIFIER_PATTERN.match(self.text, pos)
        if match:
            self.pos = match.end()
            word = match.group()
            if word in ("true", "false"):
                return Token(TokenType.BOOLEAN, word, pos)
            return Token(TokenType.IDENTIFIER, word, pos)

        self._raise_error(
            f"Unexpected character '{char}'",
            pos,
            ErrorSuggestionEngine.suggest_for_unexpected_character(char),
        )

    def _raise_error(
        self, message: str, position: int, suggestions: Optional[list[str]] = None
    ) -> NoReturn:
        # An open "[" with no "]" left in the text outranks any error inside it
        if self.open_brackets and "]" not in self.text[position:]:
            message = "Unclosed bracket"
            position = self.open_brackets[-1]
            suggestions = ErrorSuggestionEngine.suggest_for_unclosed_structure("bracket")
        if self.error_reporter:
            raise self.error_reporter.create_syntax_error(message, position, suggestions)
        raise PathSyntaxError(message, self.text, position, suggestions=suggestions)

    def get_all_tokens(self) -> list[Token]:
        """Get all tokens as a list."""
        return list(self.tokenize())
