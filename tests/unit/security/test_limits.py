"""
Test cases for expression limits and validation.

Tests focus on rejecting oversized path expressions.
"""

import unittest
from jsontoolkit.security.exceptions import SecurityError
from jsontoolkit.security.limits import LimitValidator
from jsontoolkit.utils.config import QueryLimits


class TestLimitValidator(unittest.TestCase):
    """Test LimitValidator functionality for security constraints."""

    def setUp(self):
        """Set up test validator with custom limits."""
        self.limits = QueryLimits(
            max_expression_length=20,
            max_segments=3,
            max_filter_path_depth=2,
        )
        self.validator = LimitValidator(self.limits)

    def test_expression_length_pass(self):
        self.validator.validate_expression_length("$" + "a" * 19)  # Should not raise

    def test_expression_length_fail(self):
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_expression_length("$" + "a" * 20)
        self.assertIn("Expression length 21 exceeds limit 20", str(cm.exception))

    def test_segment_count(self):
        for _ in range(3):
            self.validator.count_segment()
        with self.assertRaises(SecurityError) as cm:
            self.validator.count_segment()
        self.assertIn("Segment count 4 exceeds limit 3", str(cm.exception))

    def test_filter_path_depth(self):
        self.validator.validate_filter_path(2)
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_filter_path(3, position=5)
        self.assertIn("Filter path depth 3 exceeds limit 2 at position 5", str(cm.exception))

    def test_filter_path_depth_no_position(self):
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_filter_path(3)
        self.assertNotIn(" at ", str(cm.exception))

    def test_reset(self):
        for _ in range(3):
            self.validator.count_segment()
        self.validator.reset()
        self.validator.count_segment()  # Should not raise
        self.assertEqual(self.validator.segment_count, 1)


if __name__ == '__main__':
    unittest.main()
