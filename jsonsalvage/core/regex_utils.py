"""
Safe regex utilities with timeout protection.

Substitutions run through the ``regex`` module, whose native timeout support
works from any thread and on every platform. A substitution that exceeds its
timeout leaves the text unchanged.
"""

import logging
from typing import Callable, Union

import regex  # type: ignore[import-untyped]

DEFAULT_TIMEOUT = 2.0

logger = logging.getLogger(__name__)


def compile_pattern(pattern: str, flags: int = 0) -> "regex.Pattern[str]":
    """Compile a pattern with the ``regex`` backend."""
    return regex.compile(pattern, flags)


def safe_regex_sub(
    pattern: "regex.Pattern[str]",
    repl: Union[str, Callable[["regex.Match[str]"], str]],
    string: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """
    Perform regex substitution with timeout protection.

    Args:
        pattern: Compiled regular expression
        repl: Replacement string or function
        string: Input string to process
        timeout: Timeout in seconds

    Returns:
        String with substitutions applied, or the original string on timeout
    """
    try:
        return pattern.sub(repl, string, timeout=timeout)
    except TimeoutError:
        logger.warning(
            "Regex substitution timed out after %ss on pattern: %s",
            timeout,
            pattern.pattern[:50],
        )
        return string
