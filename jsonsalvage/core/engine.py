"""
Parsing strategies for jsonsalvage.

Parsing is an ordered chain of attempts, stopping at the first success:

1. Decode the input as-is with the standard decoder.
2. Run the cleanup pipeline over the input and decode the result.
3. Extract the first balanced object or array from the original input and
   decode it without further cleanup.

If all three fail, a JSONParseError is raised carrying both the cleanup
failure and the original direct-decode failure.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, NoReturn, Optional, TextIO, Union

from ..exceptions import JSONParseError
from ..preprocessing.extractors import extract_json
from ..preprocessing.pipeline import DEFAULT_PIPELINE
from ..preprocessing.special_values import restore_special_values
from ..utils.config import ParseOptions
from .error_handling import ErrorCollector, FailureStage, describe_error

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = ParseOptions()


@dataclass
class ParseResult:
    """Outcome of try_parse_json()."""

    success: bool
    data: Any = None
    error: Optional[str] = None


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Invalid JSON literal: {name}")


def _decode(text: str) -> Any:
    """Decode strictly standard JSON."""
    # json.loads accepts NaN and Infinity unless told otherwise
    return json.loads(text, parse_constant=_reject_constant)


def parse_json(
    content: Union[str, bytes, bytearray], options: Optional[ParseOptions] = None
) -> Any:
    """
    Parse JSON text, repairing common non-standard constructs if needed.

    Args:
        content: The JSON-like text to parse
        options: Which leniencies the cleanup strategy may apply

    Returns:
        Parsed Python data structure

    Raises:
        JSONParseError: If every strategy fails
        TypeError: If content is not text
    """
    if isinstance(content, (bytes, bytearray)):
        content = content.decode("utf-8")
    if not isinstance(content, str):
        raise TypeError(
            f"JSON content must be str, bytes or bytearray, not {type(content).__name__}"
        )
    if options is None:
        options = DEFAULT_OPTIONS

    errors = ErrorCollector()

    try:
        return _decode(content)
    except (ValueError, RecursionError) as e:
        errors.add_failure(FailureStage.DIRECT_DECODE, e)
        logger.debug("Direct decode failed: %s", describe_error(e))

    try:
        return _parse_cleaned(content, options)
    except (ValueError, RecursionError) as e:
        errors.add_failure(FailureStage.CLEANED_DECODE, e)
        logger.debug("Cleaned decode failed: %s", describe_error(e))

    try:
        return _parse_extracted(content)
    except (ValueError, RecursionError) as e:
        errors.add_failure(FailureStage.EXTRACTION, e)
        logger.debug("Extraction failed: %s", describe_error(e))

    raise errors.build_error()


def _parse_cleaned(content: str, options: ParseOptions) -> Any:
    """Run the cleanup pipeline and decode the result."""
    cleaned = DEFAULT_PIPELINE.process(content, options)
    result = _decode(cleaned)
    if options.handles_special_values:
        result = restore_special_values(
            result, allow_nan=options.allow_nan, allow_infinity=options.allow_infinity
        )
    return result


def _parse_extracted(content: str) -> Any:
    """Decode the first balanced region of the original text."""
    extracted = extract_json(content)
    if extracted is None:
        raise ValueError("No balanced JSON object or array found")
    return _decode(extracted)


def try_parse_json(
    content: Union[str, bytes, bytearray], options: Optional[ParseOptions] = None
) -> ParseResult:
    """Parse JSON text without raising, reporting failure in the result."""
    try:
        return ParseResult(success=True, data=parse_json(content, options))
    except (JSONParseError, TypeError, UnicodeDecodeError) as e:
        return ParseResult(success=False, error=str(e))


def loads(
    s: Union[str, bytes, bytearray],
    *,
    options: Optional[ParseOptions] = None,
    **toggles: Any,
) -> Any:
    """
    Deserialize JSON-like text to a Python object.

    Keyword toggles (``allow_comments=False`` and so on) override the
    corresponding fields of ``options``.

    Raises:
        JSONParseError: If parsing fails
    """
    if toggles:
        options = (options or DEFAULT_OPTIONS).with_changes(**toggles)
    return parse_json(s, options)


def load(fp: TextIO, *, options: Optional[ParseOptions] = None, **toggles: Any) -> Any:
    """
    Deserialize a JSON-like document from a text stream.

    Same as loads() but reads from a file-like object supplied by the caller.
    """
    return loads(fp.read(), options=options, **toggles)
