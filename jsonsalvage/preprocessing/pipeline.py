"""
Preprocessing pipeline for the cleanup strategy.

The steps run in a fixed order. Each one is skipped when its option is
disabled, but the order itself is not configurable: control characters must
be escaped before the comment pattern sees the text, and quotes must be
normalized before special values and bare keys are rewritten.
"""

import logging

from ..utils.config import ParseOptions
from .base import PreprocessingStepBase
from .handlers import CommentHandler
from .normalizers import (
    BOMStripper,
    QuoteNormalizer,
    UnquotedKeyQuoter,
    WhitespaceNormalizer,
)
from .repairers import ControlCharacterEscaper, TrailingCommaRemover
from .special_values import SpecialValueEncoder

logger = logging.getLogger(__name__)


class PreprocessingPipeline:
    """Applies the cleanup steps to JSON text."""

    def __init__(self) -> None:
        self._steps: tuple[PreprocessingStepBase, ...] = (
            BOMStripper(),
            WhitespaceNormalizer(),
            ControlCharacterEscaper(),
            CommentHandler(),
            TrailingCommaRemover(),
            QuoteNormalizer(),
            SpecialValueEncoder(),
            UnquotedKeyQuoter(),
        )

    @property
    def steps(self) -> tuple[PreprocessingStepBase, ...]:
        """The steps, in the order they are applied."""
        return self._steps

    def process(self, text: str, options: ParseOptions) -> str:
        """Apply all applicable preprocessing steps to the text."""
        result = text
        for step in self._steps:
            if step.should_apply(options):
                result = step.process(result, options)
            else:
                logger.debug("Skipping disabled step %s", type(step).__name__)
        return result


DEFAULT_PIPELINE = PreprocessingPipeline()
