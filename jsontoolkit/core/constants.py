"""
Common constants and mappings used by the path lexer and parsers.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tokenizer import TokenType

# Escape sequences accepted inside quoted names and string literals
PATH_ESCAPE_MAP = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    '"': '"',
    "'": "'",
    "\\": "\\",
    "/": "/",
}

ROOT_ANCHOR = "$"
CURRENT_NODE = "@"

# Longest operators first so ">=" wins over ">"
COMPARISON_OPERATORS = ("==", "!=", ">=", "<=", ">", "<")

BOOLEAN_LITERALS = {"true": True, "false": False}


def get_punctuation_token_map() -> dict[str, "TokenType"]:
    """Get the mapping of single punctuation characters to TokenType enums."""
    from .tokenizer import TokenType  # pylint: disable=import-outside-toplevel

    return {
        "[": TokenType.LBRACKET,
        "]": TokenType.RBRACKET,
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
        "*": TokenType.STAR,
        "?": TokenType.QUESTION,
        "@": TokenType.CURRENT,
    }
