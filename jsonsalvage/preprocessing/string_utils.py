"""
String state tracking shared by the character-level preprocessing passes.

Every pass creates its own state at the start of a call. State is never
carried from one pass to the next: each pass re-derives where string
literals begin and end from the text it is given.
"""

from dataclasses import dataclass


@dataclass
class ScanState:
    """Tracks double-quoted string boundaries and pending escapes."""

    in_string: bool = False
    escape_next: bool = False

    def consume_escape(self) -> bool:
        """Clear a pending escape. Returns True if one was pending."""
        if self.escape_next:
            self.escape_next = False
            return True
        return False


@dataclass
class QuoteScanState(ScanState):
    """Scan state that also tracks single-quoted regions.

    ``in_string`` refers to the double-quoted region.
    """

    in_single: bool = False


def escape_control_character(char: str) -> str:
    """Return the JSON escape sequence for a control character."""
    short = _SHORT_ESCAPES.get(char)
    if short is not None:
        return short
    return f"\\u{ord(char):04x}"


_SHORT_ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}
