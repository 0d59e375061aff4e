"""
JSON preprocessing module.

This module provides the cleanup pipeline applied to malformed JSON text
before it is handed to the standard decoder. Each step is a focused,
single-responsibility component.
"""

from .base import PreprocessingStepBase
from .extractors import extract_balanced, extract_json
from .handlers import CommentHandler
from .normalizers import (
    BOMStripper,
    QuoteNormalizer,
    UnquotedKeyQuoter,
    WhitespaceNormalizer,
)
from .pipeline import PreprocessingPipeline
from .repairers import ControlCharacterEscaper, TrailingCommaRemover
from .special_values import SpecialValueEncoder, restore_special_values

__all__ = [
    "PreprocessingPipeline",
    "PreprocessingStepBase",
    "BOMStripper",
    "WhitespaceNormalizer",
    "ControlCharacterEscaper",
    "CommentHandler",
    "TrailingCommaRemover",
    "QuoteNormalizer",
    "SpecialValueEncoder",
    "UnquotedKeyQuoter",
    "extract_json",
    "extract_balanced",
    "restore_special_values",
]
