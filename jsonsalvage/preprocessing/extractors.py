"""
Content extraction.

This module finds the first balanced JSON object or array embedded in text
such as LLM responses or markdown code blocks.
"""

from typing import Optional

from .string_utils import ScanState

BRACKET_PAIRS = (("{", "}"), ("[", "]"))


def extract_json(text: str) -> Optional[str]:
    """
    Extract the first balanced JSON object, or failing that array, from text.

    Objects are always searched for before arrays, whichever bracket appears
    first in the text.

    Returns:
        The balanced substring, or None if no balanced region exists
    """
    for open_char, close_char in BRACKET_PAIRS:
        start = text.find(open_char)
        if start == -1:
            continue
        extracted = extract_balanced(text, start, open_char, close_char)
        if extracted is not None:
            return extracted
    return None


def extract_balanced(
    text: str, start: int, open_char: str, close_char: str
) -> Optional[str]:
    """
    Find the region from ``start`` to its matching closing bracket.

    Double quotes delimit strings and a backslash escapes the character after
    it. Brackets inside strings are not counted.

    Returns:
        The inclusive substring, or None if depth never returns to zero
    """
    depth = 0
    state = ScanState()

    for i in range(start, len(text)):
        char = text[i]

        if state.consume_escape():
            continue

        if char == "\\":
            state.escape_next = True
            continue

        if char == '"':
            state.in_string = not state.in_string
            continue

        if state.in_string:
            continue

        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return text[start : i + 1]

    return None
