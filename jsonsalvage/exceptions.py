"""
Exception classes for jsonsalvage.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .core.error_handling import StrategyAttempt


class JSONParseError(ValueError):
    """Raised when every parsing strategy has failed.

    The message embeds the failure of the cleaned decode and the failure of
    the initial direct decode, so both are available for diagnostics.
    """

    def __init__(
        self,
        cleaned_error: str,
        original_error: str,
        extraction_error: Optional[str] = None,
        attempts: Optional[list["StrategyAttempt"]] = None,
    ):
        self.cleaned_error = cleaned_error
        self.original_error = original_error
        self.extraction_error = extraction_error
        self.attempts = attempts or []
        super().__init__(
            f"Failed to parse JSON: {cleaned_error}\nOriginal error: {original_error}"
        )
