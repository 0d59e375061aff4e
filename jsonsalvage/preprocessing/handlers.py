"""
Special content handlers for preprocessing.

This module contains the preprocessing step that strips JavaScript-style
comments from JSON text.
"""

from ..core.regex_utils import compile_pattern, safe_regex_sub
from ..utils.config import ParseOptions
from .base import PreprocessingStepBase

# ``//`` up to, but not including, the line terminator
LINE_COMMENT_PATTERN = compile_pattern(r"//[^\r\n\u2028\u2029]*")
# Shortest ``/* ... */`` span, across lines
BLOCK_COMMENT_PATTERN = compile_pattern(r"/\*[\s\S]*?\*/")


class CommentHandler(PreprocessingStepBase):
    """Removes comments from JSON text.

    Comment removal is pattern-based and does not track string boundaries,
    so a ``//`` or ``/*`` inside a string literal is treated as a comment.
    """

    def should_apply(self, options: ParseOptions) -> bool:
        """Apply if comments are allowed."""
        return options.allow_comments

    def process(self, text: str, options: ParseOptions) -> str:
        """Remove comments from JSON text."""
        return self.remove_comments(text)

    @staticmethod
    def remove_comments(text: str) -> str:
        """Remove single-line comments, then multi-line comments."""
        text = safe_regex_sub(LINE_COMMENT_PATTERN, "", text)
        return safe_regex_sub(BLOCK_COMMENT_PATTERN, "", text)
