"""
Query facade for jsontoolkit - ties lexing, parsing and evaluation together.
"""

import threading
from collections import OrderedDict
from collections.abc import Iterator
from typing import Any, NamedTuple, Optional

from ..security.exceptions import ErrorReporter, ErrorSuggestionEngine
from ..security.limits import LimitValidator
from ..utils.config import QueryConfig
from .evaluator import Evaluator, Match
from .parser import PathParser
from .segments import Segment, format_segments
from .tokenizer import Lexer


class QueryResult:
    """Lazy, restartable sequence of matches.

    Every iteration walks the tree again from the root, so the result can be
    enumerated any number of times and always yields the same matches in the
    same order as long as the tree is unchanged.
    """

    def __init__(self, evaluator: Evaluator, tree: Any):
        self._evaluator = evaluator
        self._tree = tree

    def __iter__(self) -> Iterator[Match]:
        return self._evaluator.evaluate(self._tree)

    def first(self) -> Optional[Match]:
        """Return the first match without evaluating the rest."""
        return next(iter(self), None)

    def values(self) -> list[Any]:
        return [match.value for match in self]

    def paths(self) -> list[str]:
        return [match.path for match in self]

    def to_list(self) -> list[Match]:
        return list(self)

    def __repr__(self) -> str:
        return f"QueryResult({format_segments(self._evaluator.segments)!r})"


class CompiledPath:
    """A parsed path expression that can be run against any number of trees."""

    def __init__(self, expression: str, segments: tuple[Segment, ...]):
        self.expression = expression
        self.segments = segments
        self._evaluator = Evaluator(segments)

    def query(self, tree: Any) -> QueryResult:
        return QueryResult(self._evaluator, tree)

    def query_first(self, tree: Any) -> Optional[Match]:
        return self.query(tree).first()

    def __str__(self) -> str:
        return format_segments(self.segments)

    def __repr__(self) -> str:
        return f"CompiledPath({self.expression!r})"


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    max_size: int
    current_size: int


class PathCache:
    """Bounded LRU cache of compiled paths keyed by expression text."""

    def __init__(self, max_size: int = 128):
        self.max_size = max_size
        self._entries: "OrderedDict[str, CompiledPath]" = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, expression: str) -> Optional[CompiledPath]:
        with self._lock:
            compiled = self._entries.get(expression)
            if compiled is None:
                self.misses += 1
                return None
            self._entries.move_to_end(expression)
            self.hits += 1
            return compiled

    def put(self, compiled: CompiledPath) -> Optional[str]:
        """Store a compiled path. Returns the evicted expression, if any."""
        with self._lock:
            self._entries[compiled.expression] = compiled
            self._entries.move_to_end(compiled.expression)
            if len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                return evicted
            return None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(self.hits, self.misses, self.max_size, len(self._entries))


def compile_path(expression: str, config: Optional[QueryConfig] = None) -> CompiledPath:
    """
    Parse a path expression once so it can be evaluated against many trees.

    Args:
        expression: Path expression such as ``$.items[?(@.price > 10)].name``.
        config: Optional limits and error reporting options.

    Returns:
        CompiledPath exposing ``query`` and ``query_first``.

    Raises:
        PathSyntaxError: If the expression is outside the path grammar.
        SecurityError: If the expression exceeds the configured limits.
    """
    config = config or QueryConfig()
    logger = config.get_logger(__name__)

    if not isinstance(expression, str):
        raise TypeError(
            f"path expression must be str, not {type(expression).__name__}"
        )

    assert config.limits is not None
    reporter = ErrorReporter(expression, config.include_context, config.max_error_context)
    validator = LimitValidator(config.limits)
    validator.validate_expression_length(expression)

    stripped = expression.lstrip()
    if not stripped:
        raise reporter.create_syntax_error("path expression cannot be empty", 0)
    if not stripped.startswith("$"):
        raise reporter.create_syntax_error(
            "path must start with '$'",
            len(expression) - len(stripped),
            ErrorSuggestionEngine.suggest_for_missing_root(expression),
        )

    tokens = Lexer(expression, reporter).get_all_tokens()
    segments = PathParser(tokens, expression, reporter, validator).parse()

    logger.debug(f"Compiled path {expression!r} into {len(segments)} segments")
    return CompiledPath(expression, segments)


def query(tree: Any, expression: str, config: Optional[QueryConfig] = None) -> QueryResult:
    """
    Select nodes of an already-parsed JSON tree.

    The expression is parsed eagerly, so syntax errors are raised here, before
    any traversal. The tree is walked lazily each time the result is iterated.

    Args:
        tree: Parsed JSON value (dicts, lists, str, numbers, bool, None).
        expression: Path expression starting with ``$``.
        config: Optional limits and error reporting options.

    Returns:
        QueryResult yielding Match objects in document order.

    Example:
        >>> doc = {"users": [{"name": "Ann"}, {"name": "Bo"}]}
        >>> [m.value for m in query(doc, "$.users[*].name")]
        ['Ann', 'Bo']
    """
    return compile_path(expression, config).query(tree)


def query_first(
    tree: Any, expression: str, config: Optional[QueryConfig] = None
) -> Optional[Match]:
    """Return the first match of ``expression`` in ``tree``, or None."""
    return compile_path(expression, config).query_first(tree)


class JsonPath:
    """Query engine that memoizes compiled expressions in a bounded cache.

    The module-level functions compile on every call and keep no state. Create
    a JsonPath when the same expressions are evaluated repeatedly; one instance
    can be shared between threads.
    """

    def __init__(self, config: Optional[QueryConfig] = None):
        self.config = config or QueryConfig()
        self.logger = self.config.get_logger(__name__)
        self._cache: Optional[PathCache] = (
            PathCache(self.config.cache_size) if self.config.cache_enabled else None
        )

    def compile(self, expression: str) -> CompiledPath:
        if self._cache is None:
            return compile_path(expression, self.config)

        compiled = self._cache.get(expression)
        if compiled is not None:
            self.logger.debug(f"Path cache hit for {expression!r}")
            return compiled

        compiled = compile_path(expression, self.config)
        evicted = self._cache.put(compiled)
        if evicted is not None:
            self.logger.debug(f"Evicted {evicted!r} from path cache")
        return compiled

    def query(self, tree: Any, expression: str) -> QueryResult:
        return self.compile(expression).query(tree)

    def query_first(self, tree: Any, expression: str) -> Optional[Match]:
        return self.compile(expression).query_first(tree)

    def clear_cache(self) -> None:
        if self._cache is not None:
            self._cache.clear()

    def cache_info(self) -> Optional[CacheInfo]:
        """Cache statistics, or None when caching is disabled."""
        if self._cache is None:
            return None
        return self._cache.info()
