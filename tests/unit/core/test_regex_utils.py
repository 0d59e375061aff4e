"""
Unit tests for regex utilities with timeout protection.
"""

import unittest
from unittest.mock import MagicMock

from jsonsalvage.core.regex_utils import compile_pattern, safe_regex_sub


class TestRegexUtils(unittest.TestCase):
    """Test safe regex utility functions."""

    def test_safe_regex_sub_normal_operation(self) -> None:
        pattern = compile_pattern(r"\d+")
        self.assertEqual(safe_regex_sub(pattern, "X", "abc123def456"), "abcXdefX")

    def test_safe_regex_sub_with_groups(self) -> None:
        pattern = compile_pattern(r",(\s*[}\]])")
        self.assertEqual(safe_regex_sub(pattern, r"\1", "[1, 2, ]"), "[1, 2 ]")

    def test_safe_regex_sub_with_function_replacement(self) -> None:
        pattern = compile_pattern(r"[a-z]+")
        result = safe_regex_sub(pattern, lambda m: m.group().upper(), "hello world")
        self.assertEqual(result, "HELLO WORLD")

    def test_safe_regex_sub_timeout_returns_original(self) -> None:
        """A timed-out substitution leaves the text unchanged and logs it."""
        pattern = MagicMock()
        pattern.pattern = r"(a+)+b"
        pattern.sub.side_effect = TimeoutError("regex timed out")

        with self.assertLogs("jsonsalvage.core.regex_utils", level="WARNING") as logs:
            result = safe_regex_sub(pattern, "X", "aaaa", timeout=0.1)

        self.assertEqual(result, "aaaa")
        self.assertIn("timed out", logs.output[0])
        pattern.sub.assert_called_once_with("X", "aaaa", timeout=0.1)


if __name__ == "__main__":
    unittest.main()
