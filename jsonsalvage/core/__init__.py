"""
jsonsalvage Core Parsing Engine.

This module provides the fallback chain that turns JSON-like text into
Python data structures.
"""

from .engine import ParseResult, load, loads, parse_json, try_parse_json
from .error_handling import ErrorCollector, FailureStage, StrategyAttempt

__all__ = [
    'parse_json', 'try_parse_json', 'loads', 'load', 'ParseResult',
    'ErrorCollector', 'FailureStage', 'StrategyAttempt'
]
