"""
Resource limits for jsontoolkit path expressions.
This module rejects expressions that would compile to unreasonably large queries.
"""

from typing import Optional

from ..utils.config import QueryLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates path expression limits to prevent resource exhaustion."""

    def __init__(self, limits: QueryLimits):
        self.limits = limits
        self.segment_count = 0

    def validate_expression_length(self, expression: str) -> None:
        """Validate that the expression size is within limits."""
        if len(expression) > self.limits.max_expression_length:
            raise SecurityError(
                f"Expression length {len(expression)} exceeds limit "
                f"{self.limits.max_expression_length}"
            )

    def count_segment(self) -> None:
        """Track one more compiled segment and validate the total."""
        self.segment_count += 1
        if self.segment_count > self.limits.max_segments:
            raise SecurityError(
                f"Segment count {self.segment_count} exceeds limit "
                f"{self.limits.max_segments}"
            )

    def validate_filter_path(self, depth: int, position: Optional[int] = None) -> None:
        """Validate the number of steps in a filter's relative reference."""
        if depth > self.limits.max_filter_path_depth:
            pos_info = f" at position {position}" if position is not None else ""
            raise SecurityError(
                f"Filter path depth {depth} exceeds limit "
                f"{self.limits.max_filter_path_depth}{pos_info}"
            )

    def reset(self) -> None:
        """Reset validator state for reuse."""
        self.segment_count = 0
