"""
Error collection for the parsing strategies.

Each strategy that fails leaves a record here, so the final error can report
the direct-decode failure alongside the failure of the cleanup strategy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..exceptions import JSONParseError


class FailureStage(Enum):
    """The strategy that produced a failure."""

    DIRECT_DECODE = "direct_decode"
    CLEANED_DECODE = "cleaned_decode"
    EXTRACTION = "extraction"


@dataclass
class StrategyAttempt:
    """A failed attempt at one stage of the fallback chain."""

    stage: FailureStage
    message: str


class ErrorCollector:
    """Collects strategy failures during a single parse call."""

    def __init__(self) -> None:
        self.attempts: list[StrategyAttempt] = []

    def add_failure(self, stage: FailureStage, error: BaseException) -> None:
        """Record the failure of a stage."""
        self.attempts.append(StrategyAttempt(stage, describe_error(error)))

    def message_for(self, stage: FailureStage) -> Optional[str]:
        """Get the first recorded message for a stage."""
        for attempt in self.attempts:
            if attempt.stage is stage:
                return attempt.message
        return None

    def build_error(self) -> JSONParseError:
        """Create the terminal error from the collected failures."""
        return JSONParseError(
            cleaned_error=self.message_for(FailureStage.CLEANED_DECODE) or "",
            original_error=self.message_for(FailureStage.DIRECT_DECODE) or "",
            extraction_error=self.message_for(FailureStage.EXTRACTION),
            attempts=list(self.attempts),
        )


def describe_error(error: BaseException) -> str:
    """Render an exception as the text embedded in error messages."""
    if isinstance(error, RecursionError):
        return "Maximum nesting depth exceeded"
    return str(error) or type(error).__name__
