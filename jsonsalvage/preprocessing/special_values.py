"""
Encoding and restoration of non-finite numbers.

``NaN``, ``Infinity`` and ``-Infinity`` are not valid JSON. Before decoding,
bare occurrences in object-value position are replaced by quoted sentinel
strings; after decoding, string values equal to a sentinel are turned back
into the corresponding float.
"""

from typing import Any

from ..core.regex_utils import compile_pattern, safe_regex_sub
from ..utils.config import ParseOptions
from .base import PreprocessingStepBase

NAN_SENTINEL = "NaN"
INFINITY_SENTINEL = "Infinity"
NEGATIVE_INFINITY_SENTINEL = "-Infinity"

NAN_PATTERN = compile_pattern(r":\s*NaN")
INFINITY_PATTERN = compile_pattern(r":\s*Infinity")
NEGATIVE_INFINITY_PATTERN = compile_pattern(r":\s*-Infinity")


class SpecialValueEncoder(PreprocessingStepBase):
    """Quotes bare NaN and Infinity literals that follow a colon."""

    def should_apply(self, options: ParseOptions) -> bool:
        """Apply if either special value is allowed."""
        return options.handles_special_values

    def process(self, text: str, options: ParseOptions) -> str:
        """Replace special literals with their sentinel strings."""
        return encode_special_values(
            text, allow_nan=options.allow_nan, allow_infinity=options.allow_infinity
        )


def encode_special_values(text: str, allow_nan: bool, allow_infinity: bool) -> str:
    """Replace bare special literals in value position with sentinels."""
    if allow_nan:
        text = safe_regex_sub(NAN_PATTERN, f': "{NAN_SENTINEL}"', text)
    if allow_infinity:
        text = safe_regex_sub(INFINITY_PATTERN, f': "{INFINITY_SENTINEL}"', text)
        text = safe_regex_sub(
            NEGATIVE_INFINITY_PATTERN, f': "{NEGATIVE_INFINITY_SENTINEL}"', text
        )
    return text


def restore_special_values(obj: Any, allow_nan: bool, allow_infinity: bool) -> Any:
    """
    Rebuild a decoded value, turning sentinel strings back into floats.

    Only values are restored; object keys are left as they are. The input
    tree is not modified.
    """
    if isinstance(obj, str):
        if allow_nan and obj == NAN_SENTINEL:
            return float("nan")
        if allow_infinity and obj == INFINITY_SENTINEL:
            return float("inf")
        if allow_infinity and obj == NEGATIVE_INFINITY_SENTINEL:
            return float("-inf")
        return obj

    if isinstance(obj, list):
        return [restore_special_values(item, allow_nan, allow_infinity) for item in obj]

    if isinstance(obj, dict):
        return {
            key: restore_special_values(value, allow_nan, allow_infinity)
            for key, value in obj.items()
        }

    return obj
