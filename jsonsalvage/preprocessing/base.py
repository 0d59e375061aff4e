"""
Contract shared by the cleanup steps.

The cleanup pipeline runs its steps in a fixed order. Each step reads the
options to decide whether it runs at all, then maps text to text. Steps keep
no state between calls, so one instance serves every parse.
"""

from abc import ABC, abstractmethod

from ..utils.config import ParseOptions


class PreprocessingStepBase(ABC):
    """A single text-to-text rewrite in the cleanup pipeline."""

    def should_apply(self, _options: ParseOptions) -> bool:
        """Steps without a toggle always run."""
        return True

    @abstractmethod
    def process(self, text: str, options: ParseOptions) -> str:
        """Rewrite ``text``; must not raise on malformed input."""
