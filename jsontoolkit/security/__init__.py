"""
jsontoolkit error and resource-limit system.

This module provides the exception hierarchy and expression limits.
"""

from .exceptions import (
    ErrorReporter, ErrorSuggestionEngine, JsonToolkitError, PathSyntaxError, SecurityError
)
from .limits import LimitValidator

__all__ = [
    'JsonToolkitError', 'PathSyntaxError', 'SecurityError',
    'ErrorReporter', 'ErrorSuggestionEngine', 'LimitValidator'
]
