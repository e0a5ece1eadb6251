"""
jsontoolkit - JSONPath-style queries over already-parsed JSON trees.

jsontoolkit selects nodes from the value graphs produced by ``json.loads`` (or
any loader that yields dicts, lists and scalars) using a compact path
language. Queries never copy or modify the tree.

Key Features:
- Child access with dot or bracket notation: $.store.book, $['first name']
- Wildcards and array indexing: $.items[*], $.items[0]
- Recursive descent: $..price
- Single-comparison filters: $.items[?(@.price >= 10)]
- Lazy, restartable results; query_first stops at the first match
- Syntax errors with position, context and suggestions

Quick Start:
    import json
    import jsontoolkit

    doc = json.loads('{"items": [{"id": 1, "price": 5}, {"id": 2, "price": 15}]}')
    for match in jsontoolkit.query(doc, "$.items[?(@.price > 10)].id"):
        print(match.path, match.value)     # $['items'][1]['id'] 2

    first = jsontoolkit.query_first(doc, "$..price")
    print(first.value if first else None)  # 5

    # Reuse compiled expressions
    engine = jsontoolkit.JsonPath()
    engine.query(doc, "$.items[*].id").values()
"""

from .core.engine import CompiledPath, JsonPath, QueryResult, compile_path, query, query_first
from .core.evaluator import Match
from .core.nodes import NodeKind, kind_of
from .security.exceptions import JsonToolkitError, PathSyntaxError, SecurityError
from .utils.config import CacheSettings, ErrorReporting, QueryConfig, QueryLimits

__version__ = "0.1.0"
__author__ = "jsontoolkit contributors"

__all__ = [
    # Query functions and classes
    "query", "query_first", "compile_path", "CompiledPath", "QueryResult", "Match", "JsonPath",
    # Tree inspection
    "NodeKind", "kind_of",
    # Configuration classes
    "QueryConfig", "QueryLimits", "CacheSettings", "ErrorReporting",
    # Exception classes
    "JsonToolkitError", "PathSyntaxError", "SecurityError",
]
