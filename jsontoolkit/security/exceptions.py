"""
Exception hierarchy and error reporting for jsontoolkit.

Every error raised while turning a path expression into a query carries the
offending expression, the character index where the problem was detected and,
where it helps, a list of human readable suggestions.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorContext:
    """Snippet of the expression surrounding an error position."""

    text: str
    position: int
    context_before: str
    context_after: str
    error_char: str
    column_indicator: str


class JsonToolkitError(Exception):
    """Base exception for all jsontoolkit errors."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message

        if self.position is not None:
            msg += f" at position {self.position}"

        if self.context:
            msg += f"\n\nContext:\n  {self.context.text}\n  {self.context.column_indicator}"

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                msg += f"\n  - {suggestion}"

        return msg


class PathSyntaxError(JsonToolkitError, ValueError):
    """Raised when a path expression does not conform to the query grammar."""

    def __init__(
        self,
        message: str,
        expression: Optional[str] = None,
        position: Optional[int] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.expression = expression
        super().__init__(message, position, context, suggestions)


class SecurityError(JsonToolkitError):
    """Raised when an expression exceeds the configured resource limits."""


class ErrorReporter:
    """Builds errors with context for a single path expression."""

    def __init__(self, expression: str, include_context: bool = True, max_context: int = 50):
        self.expression = expression
        self.include_context = include_context
        self.max_context = max_context

    def get_context(self, position: int) -> ErrorContext:
        position = max(0, min(position, len(self.expression)))
        half = self.max_context // 2

        start = max(0, position - half)
        end = min(len(self.expression), position + half)
        prefix = "..." if start > 0 else ""
        suffix = "..." if end < len(self.expression) else ""

        error_char = (
            self.expression[position] if position < len(self.expression) else "EOF"
        )
        snippet = prefix + self.expression[start:end] + suffix
        indicator = " " * (len(prefix) + position - start) + "^"

        return ErrorContext(
            text=snippet,
            position=position,
            context_before=self.expression[start:position],
            context_after=self.expression[position:end],
            error_char=error_char,
            column_indicator=indicator,
        )

    def create_syntax_error(
        self,
        message: str,
        position: Optional[int],
        suggestions: Optional[list[str]] = None,
    ) -> PathSyntaxError:
        context = None
        if self.include_context and position is not None and self.expression:
            context = self.get_context(position)
        return PathSyntaxError(
            message,
            expression=self.expression,
            position=position,
            context=context,
            suggestions=suggestions,
        )

    def create_security_error(self, message: str) -> SecurityError:
        return SecurityError(message)


class ErrorSuggestionEngine:
    """Suggests fixes for common path expression mistakes."""

    @staticmethod
    def suggest_for_missing_root(expression: str) -> list[str]:
        stripped = expression.strip()
        suggestions = ["Path expressions are absolute and begin with the root anchor '$'"]
        if stripped.startswith((".", "[")):
            suggestions.append(f"Did you mean '${stripped}'?")
        elif stripped:
            suggestions.append(f"Did you mean '$.{stripped}'?")
        return suggestions

    @staticmethod
    def suggest_for_unexpected_character(char: str) -> list[str]:
        if not char:
            return []
        if char == ":":
            return [
                "Array slices such as [1:3] are not supported",
                "Select single elements with [index] or all elements with [*]",
            ]
        if char in "&|":
            return [
                "Filters hold a single comparison; '&&' and '||' are not supported",
                "Chain two filter segments to require both conditions",
            ]
        if char == "$":
            return ["The root anchor '$' may only appear at the start of the path"]
        if char in "'\"":
            return ["Check that the quoted name is closed with a matching quote"]
        if char == ",":
            return ["Union selectors such as [0,1] are not supported"]
        return ["Quote property names containing special characters: ['name']"]

    @staticmethod
    def suggest_for_unclosed_structure(structure_type: str) -> list[str]:
        if structure_type == "bracket":
            return ["Add a closing ']' after the selector"]
        if structure_type == "parenthesis":
            return ["Add a closing ')' after the filter expression, before ']'"]
        return [f"Close the {structure_type}"]

    @staticmethod
    def suggest_for_operator(text: str) -> list[str]:
        if text == "=":
            return ["Use '==' for equality comparisons"]
        if text == "!":
            return ["Use '!=' for inequality comparisons"]
        return ["Supported operators are ==, !=, >, <, >= and <="]

    @staticmethod
    def suggest_for_index(text: str) -> list[str]:
        if text.startswith("-"):
            return ["Negative array indices are not supported; use a non-negative index"]
        return ["Array indices must be non-negative integers"]
