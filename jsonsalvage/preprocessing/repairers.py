"""
Repair preprocessing steps.

This module contains preprocessing steps that repair content the standard
decoder rejects: raw control characters inside strings and trailing commas.
"""

from ..core.regex_utils import compile_pattern, safe_regex_sub
from ..utils.config import ParseOptions
from .base import PreprocessingStepBase
from .string_utils import ScanState, escape_control_character

# A comma followed only by whitespace before a closing brace or bracket
TRAILING_COMMA_PATTERN = compile_pattern(r",(\s*[}\]])")


class ControlCharacterEscaper(PreprocessingStepBase):
    """Escapes raw control characters found inside double-quoted strings.

    This step must run before comment removal: the comment pattern treats a
    raw newline as the end of a line comment, even inside a string.
    """

    def process(self, text: str, options: ParseOptions) -> str:
        """Escape control characters in string literals."""
        return self.escape_control_characters(text)

    @staticmethod
    def escape_control_characters(text: str) -> str:
        """Replace code points below 0x20 inside strings with escapes."""
        result = []
        state = ScanState()

        for char in text:
            if state.consume_escape():
                result.append(char)
                continue

            if char == "\\":
                state.escape_next = True
                result.append(char)
                continue

            if char == '"':
                state.in_string = not state.in_string
                result.append(char)
                continue

            if state.in_string and ord(char) < 0x20:
                result.append(escape_control_character(char))
            else:
                result.append(char)

        return "".join(result)


class TrailingCommaRemover(PreprocessingStepBase):
    """Removes commas directly preceding a closing brace or bracket.

    Not string-aware: a ``,}`` or ``,]`` sequence inside a string literal is
    rewritten as well.
    """

    def should_apply(self, options: ParseOptions) -> bool:
        """Apply if trailing commas are allowed."""
        return options.allow_trailing_commas

    def process(self, text: str, options: ParseOptions) -> str:
        """Remove trailing commas, keeping the whitespace after them."""
        return self.remove_trailing_commas(text)

    @staticmethod
    def remove_trailing_commas(text: str) -> str:
        """Remove trailing commas before ``}`` and ``]``."""
        return safe_regex_sub(TRAILING_COMMA_PATTERN, r"\1", text)
