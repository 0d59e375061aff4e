"""
Unit tests for comment removal.
"""

import json
import unittest

from jsonsalvage.preprocessing.handlers import CommentHandler
from jsonsalvage.utils.config import ParseOptions


class TestCommentHandler(unittest.TestCase):
    """Test removal of line and block comments."""

    def remove(self, text: str) -> str:
        return CommentHandler.remove_comments(text)

    def test_line_comment_keeps_newline(self) -> None:
        self.assertEqual(self.remove('{"a": 1} // note\n'), '{"a": 1} \n')

    def test_line_comment_at_end_of_text(self) -> None:
        self.assertEqual(self.remove("[1, 2] // done"), "[1, 2] ")

    def test_line_comment_keeps_carriage_return(self) -> None:
        self.assertEqual(self.remove("1 // c\r\n"), "1 \r\n")

    def test_block_comment(self) -> None:
        self.assertEqual(self.remove('{"a": /* x */ 1}'), '{"a":  1}')

    def test_multiline_block_comment(self) -> None:
        text = '{\n  /* This is a\n     multi-line\n     comment */\n  "name": "Charlie"\n}'
        self.assertEqual(json.loads(self.remove(text)), {"name": "Charlie"})

    def test_block_comments_are_non_greedy(self) -> None:
        self.assertEqual(self.remove("/* a */ 1 /* b */"), " 1 ")

    def test_mixed_comments(self) -> None:
        text = """{
            // Single line comment
            "name": "Dave", // inline
            /* Multi-line
               comment */
            "active": true
        }"""
        self.assertEqual(json.loads(self.remove(text)), {"name": "Dave", "active": True})

    def test_not_string_aware(self) -> None:
        """A ``//`` inside a string literal is treated as a comment."""
        self.assertEqual(
            self.remove('{"url": "http://example.com"}'), '{"url": "http:'
        )

    def test_should_apply_follows_option(self) -> None:
        step = CommentHandler()
        self.assertTrue(step.should_apply(ParseOptions()))
        self.assertFalse(step.should_apply(ParseOptions(allow_comments=False)))


if __name__ == "__main__":
    unittest.main()
