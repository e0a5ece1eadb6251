"""
Test cases for exceptions and error reporting.

Tests focus on error context creation, message formatting, and suggestions.
"""

import unittest
from jsontoolkit.security.exceptions import (
    ErrorContext, ErrorReporter, ErrorSuggestionEngine, JsonToolkitError,
    PathSyntaxError, SecurityError
)


class TestJsonToolkitError(unittest.TestCase):
    """Test base JsonToolkitError exception class."""

    def test_basic_error_creation(self):
        error = JsonToolkitError("Test error message")

        self.assertEqual(error.message, "Test error message")
        self.assertIsNone(error.position)
        self.assertIsNone(error.context)
        self.assertEqual(error.suggestions, [])
        self.assertEqual(str(error), "Test error message")

    def test_error_with_position(self):
        error = JsonToolkitError("Parse error", position=7)
        self.assertIn("at position 7", str(error))

    def test_error_with_suggestions(self):
        suggestions = ["Check the brackets", "Quote the name"]
        error = JsonToolkitError("Syntax error", suggestions=suggestions)

        error_str = str(error)
        self.assertIn("Suggestions:", error_str)
        self.assertIn("  - Check the brackets", error_str)
        self.assertIn("  - Quote the name", error_str)

    def test_error_with_context(self):
        context = ErrorContext(
            text="$.a[-1]",
            position=4,
            context_before="$.a[",
            context_after="-1]",
            error_char="-",
            column_indicator="    ^",
        )
        error = JsonToolkitError("Negative index", position=4, context=context)

        error_str = str(error)
        self.assertIn("Context:", error_str)
        self.assertIn("$.a[-1]", error_str)
        self.assertIn("    ^", error_str)


class TestPathSyntaxError(unittest.TestCase):
    """Test PathSyntaxError specific functionality."""

    def test_inheritance(self):
        error = PathSyntaxError("bad path", expression="$[", position=1)
        self.assertIsInstance(error, JsonToolkitError)
        self.assertIsInstance(error, ValueError)
        self.assertEqual(error.expression, "$[")
        self.assertEqual(error.position, 1)

    def test_security_error_inheritance(self):
        error = SecurityError("Expression length 5000 exceeds limit 4096")
        self.assertIsInstance(error, JsonToolkitError)
        self.assertNotIsInstance(error, PathSyntaxError)
        self.assertIn("5000", str(error))


class TestErrorReporter(unittest.TestCase):
    """Test ErrorReporter functionality."""

    def test_create_syntax_error(self):
        reporter = ErrorReporter("$.store[")
        error = reporter.create_syntax_error("Unclosed bracket", 7, ["Add ']'"])

        self.assertIsInstance(error, PathSyntaxError)
        self.assertEqual(error.expression, "$.store[")
        self.assertEqual(error.position, 7)
        self.assertEqual(error.suggestions, ["Add ']'"])
        self.assertEqual(error.context.error_char, "[")
        self.assertEqual(error.context.column_indicator, "       ^")

    def test_context_at_end_of_input(self):
        reporter = ErrorReporter("$.a.")
        context = reporter.get_context(4)
        self.assertEqual(context.error_char, "EOF")
        self.assertEqual(context.column_indicator, "    ^")

    def test_context_position_beyond_text(self):
        context = ErrorReporter("$.a").get_context(1000)
        self.assertEqual(context.position, 3)

    def test_long_expression_is_truncated(self):
        expression = "$" + ".abcdefghij" * 20
        reporter = ErrorReporter(expression, max_context=20)
        context = reporter.get_context(100)

        self.assertTrue(context.text.startswith("..."))
        self.assertTrue(context.text.endswith("..."))
        self.assertEqual(context.text[len(context.column_indicator) - 1], expression[100])

    def test_context_disabled(self):
        reporter = ErrorReporter("$[", include_context=False)
        error = reporter.create_syntax_error("Unclosed bracket", 1)
        self.assertIsNone(error.context)

    def test_create_security_error(self):
        error = ErrorReporter("$").create_security_error("too long")
        self.assertIsInstance(error, SecurityError)
        self.assertEqual(error.message, "too long")


class TestErrorSuggestionEngine(unittest.TestCase):
    """Test ErrorSuggestionEngine functionality."""

    def test_missing_root(self):
        self.assertIn("Did you mean '$.a.b'?", ErrorSuggestionEngine.suggest_for_missing_root("a.b"))
        self.assertIn("Did you mean '$[0]'?", ErrorSuggestionEngine.suggest_for_missing_root("[0]"))
        self.assertEqual(len(ErrorSuggestionEngine.suggest_for_missing_root("")), 1)

    def test_unexpected_character(self):
        for char, fragment in [
            (":", "slices"),
            ("&", "'&&'"),
            ("|", "'||'"),
            ("$", "root anchor"),
            (",", "Union"),
            ("#", "['name']"),
        ]:
            with self.subTest(char=char):
                suggestions = ErrorSuggestionEngine.suggest_for_unexpected_character(char)
                self.assertTrue(any(fragment in s for s in suggestions))
        self.assertEqual(ErrorSuggestionEngine.suggest_for_unexpected_character(""), [])

    def test_unclosed_structure(self):
        self.assertTrue(
            any("]" in s for s in ErrorSuggestionEngine.suggest_for_unclosed_structure("bracket"))
        )
        self.assertTrue(
            any(")" in s for s in ErrorSuggestionEngine.suggest_for_unclosed_structure("parenthesis"))
        )

    def test_operator_and_index(self):
        self.assertIn("==", ErrorSuggestionEngine.suggest_for_operator("=")[0])
        self.assertIn("!=", ErrorSuggestionEngine.suggest_for_operator("!")[0])
        self.assertIn("Negative", ErrorSuggestionEngine.suggest_for_index("-1")[0])
        self.assertIn("integers", ErrorSuggestionEngine.suggest_for_index("1.5")[0])


if __name__ == '__main__':
    unittest.main()
