"""
jsonsalvage - Forgiving JSON parsing for text that is almost JSON.

jsonsalvage recovers JSON from LLM output, markdown-wrapped responses and
JavaScript-style literals before handing it to Python's standard decoder.

Key Features:
- Standard JSON is decoded directly, with no preprocessing
- Comments, trailing commas and single-quoted strings are repaired
- NaN, Infinity and -Infinity are decoded as floats
- Raw control characters inside strings are escaped
- Optional quoting of bare object keys
- The first balanced object or array is extracted from surrounding text

Quick Start:
    import jsonsalvage
    data = jsonsalvage.parse_json("{'name': 'Alice', 'tags': ['a', 'b',],}")

    # Never raises on malformed input
    result = jsonsalvage.try_parse_json(llm_response)
    if result.success:
        print(result.data)

    # Toggle individual leniencies
    data = jsonsalvage.loads("{key: 1}", allow_unquoted_keys=True)
"""

from .core.engine import ParseResult, load, loads, parse_json, try_parse_json
from .core.error_handling import FailureStage, StrategyAttempt
from .exceptions import JSONParseError
from .preprocessing.extractors import extract_json
from .utils.config import ParseOptions

__version__ = "0.1.0"
__author__ = "jsonsalvage contributors"

__all__ = [
    # Parsing functions
    "parse_json", "try_parse_json", "loads", "load", "extract_json",
    # Configuration and results
    "ParseOptions", "ParseResult",
    # Errors
    "JSONParseError", "FailureStage", "StrategyAttempt",
]
