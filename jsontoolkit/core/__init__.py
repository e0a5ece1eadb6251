"""
jsontoolkit Core Query Engine.

This module provides lexing, parsing and evaluation of path expressions.
"""

from .engine import CompiledPath, JsonPath, QueryResult, compile_path, query, query_first
from .evaluator import Evaluator, Match
from .nodes import NodeKind, kind_of
from .parser import PathParser
from .tokenizer import Lexer, Token, TokenType

__all__ = [
    'query', 'query_first', 'compile_path', 'CompiledPath', 'JsonPath', 'QueryResult',
    'Evaluator', 'Match', 'NodeKind', 'kind_of',
    'PathParser', 'Lexer', 'Token', 'TokenType'
]
