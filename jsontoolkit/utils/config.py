"""
Configuration and limits for jsontoolkit path queries.

This module defines resource limits, compiled-path caching and error
reporting options used by the query engine.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class QueryLimits:
    """Path expression complexity limits."""
    max_expression_length: int = 4096
    max_segments: int = 256
    max_filter_path_depth: int = 32

    def __post_init__(self) -> None:
        if self.max_expression_length <= 0:
            raise ValueError("max_expression_length must be positive")
        if self.max_segments <= 0:
            raise ValueError("max_segments must be positive")
        if self.max_filter_path_depth <= 0:
            raise ValueError("max_filter_path_depth must be positive")


@dataclass
class CacheSettings:
    """Compiled path cache owned by a JsonPath engine."""
    enabled: bool = True
    max_size: int = 128

    def __post_init__(self) -> None:
        if self.max_size <= 0:
            raise ValueError("max_size must be positive")


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""
    include_context: bool = True
    max_error_context: int = 50


@dataclass
class QueryConfig:
    """Configuration options for jsontoolkit path queries."""

    limits: Optional[QueryLimits] = None
    cache: Optional[CacheSettings] = None
    error_reporting: Optional[ErrorReporting] = None
    logger: Optional[logging.Logger] = None

    def __init__(
        self,
        *,
        limits: Optional[QueryLimits] = None,
        cache: Optional[CacheSettings] = None,
        error_reporting: Optional[ErrorReporting] = None,
        logger: Optional[logging.Logger] = None,
        **config_options: Any,  # flat shortcuts for the nested groups
    ):
        if limits is not None:
            self.limits = limits
        else:
            self.limits = QueryLimits(
                max_expression_length=config_options.get('max_expression_length', 4096),
                max_segments=config_options.get('max_segments', 256),
                max_filter_path_depth=config_options.get('max_filter_path_depth', 32),
            )

        if cache is not None:
            self.cache = cache
        else:
            self.cache = CacheSettings(
                enabled=config_options.get('cache_enabled', True),
                max_size=config_options.get('cache_size', 128),
            )

        if error_reporting is not None:
            self.error_reporting = error_reporting
        else:
            self.error_reporting = ErrorReporting(
                include_context=config_options.get('include_context', True),
                max_error_context=config_options.get('max_error_context', 50),
            )

        self.logger = logger

        unknown = set(config_options) - {
            'max_expression_length', 'max_segments', 'max_filter_path_depth',
            'cache_enabled', 'cache_size', 'include_context', 'max_error_context',
        }
        if unknown:
            raise TypeError(f"Unknown configuration options: {', '.join(sorted(unknown))}")

    @property
    def max_expression_length(self) -> int:
        """Maximum number of characters in a path expression."""
        assert self.limits is not None
        return self.limits.max_expression_length

    @property
    def max_segments(self) -> int:
        """Maximum number of segments a path may compile to."""
        assert self.limits is not None
        return self.limits.max_segments

    @property
    def max_filter_path_depth(self) -> int:
        """Maximum number of property steps in a filter's '@' reference."""
        assert self.limits is not None
        return self.limits.max_filter_path_depth

    @property
    def cache_enabled(self) -> bool:
        """Whether a JsonPath engine memoizes compiled paths."""
        assert self.cache is not None
        return self.cache.enabled

    @property
    def cache_size(self) -> int:
        """Maximum number of compiled paths kept by a JsonPath engine."""
        assert self.cache is not None
        return self.cache.max_size

    @property
    def include_context(self) -> bool:
        """Whether syntax errors include an expression snippet with a caret."""
        assert self.error_reporting is not None
        return self.error_reporting.include_context

    @include_context.setter
    def include_context(self, value: bool) -> None:
        assert self.error_reporting is not None
        self.error_reporting.include_context = value

    @property
    def max_error_context(self) -> int:
        """Maximum characters of context to include in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.max_error_context

    def get_logger(self, name: str) -> logging.Logger:
        """Return the configured logger, falling back to the module logger."""
        return self.logger or logging.getLogger(name)
