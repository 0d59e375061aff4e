"""
Text normalization preprocessing steps.

This module contains preprocessing steps that normalize JSON text formatting:
byte order marks, surrounding whitespace, quote style and bare object keys.
"""

from ..core.regex_utils import compile_pattern, safe_regex_sub
from ..utils.config import ParseOptions
from .base import PreprocessingStepBase
from .string_utils import QuoteScanState

BYTE_ORDER_MARK = "\ufeff"

# ECMAScript WhiteSpace and LineTerminator code points, U+FEFF included.
# Narrower than str.strip(), which also drops \x1c-\x1f and \x85.
TRIM_CHARACTERS = (
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# A bare identifier key following ``{`` or ``,`` and followed by a colon
UNQUOTED_KEY_PATTERN = compile_pattern(r"([{,]\s*)([a-zA-Z_$][a-zA-Z0-9_$]*)\s*:")


class BOMStripper(PreprocessingStepBase):
    """Removes a leading byte order mark."""

    def should_apply(self, options: ParseOptions) -> bool:
        """Apply if BOM stripping is enabled."""
        return options.strip_bom

    def process(self, text: str, options: ParseOptions) -> str:
        """Strip a single leading BOM."""
        if text.startswith(BYTE_ORDER_MARK):
            return text[1:]
        return text


class WhitespaceNormalizer(PreprocessingStepBase):
    """Trims whitespace surrounding the document."""

    def process(self, text: str, options: ParseOptions) -> str:
        return text.strip(TRIM_CHARACTERS)


class QuoteNormalizer(PreprocessingStepBase):
    """Converts single-quoted strings to double-quoted strings."""

    def should_apply(self, options: ParseOptions) -> bool:
        """Apply if single quotes are allowed."""
        return options.allow_single_quotes

    def process(self, text: str, options: ParseOptions) -> str:
        """Normalize quotes in JSON text."""
        return self.convert_single_quotes(text)

    @staticmethod
    def convert_single_quotes(text: str) -> str:
        """
        Rewrite single-quote delimiters as double quotes.

        Whichever quote style opened the current string suppresses the other
        one: an apostrophe inside a double-quoted string is left alone, and a
        double quote inside a single-quoted string is copied as-is, which
        ends the converted string early. String content is never rewritten.
        """
        result = []
        state = QuoteScanState()

        for char in text:
            if state.consume_escape():
                result.append(char)
                continue

            if char == "\\":
                state.escape_next = True
                result.append(char)
                continue

            if char == '"' and not state.in_single:
                state.in_string = not state.in_string
                result.append(char)
            elif char == "'" and not state.in_string:
                state.in_single = not state.in_single
                result.append('"')
            else:
                result.append(char)

        return "".join(result)


class UnquotedKeyQuoter(PreprocessingStepBase):
    """Adds double quotes around bare identifier keys."""

    def should_apply(self, options: ParseOptions) -> bool:
        """Apply if unquoted keys are allowed."""
        return options.allow_unquoted_keys

    def process(self, text: str, options: ParseOptions) -> str:
        return self.quote_unquoted_keys(text)

    @staticmethod
    def quote_unquoted_keys(text: str) -> str:
        """Quote ``{key:`` and ``, key:`` style identifiers."""
        return safe_regex_sub(UNQUOTED_KEY_PATTERN, r'\1"\2":', text)
