"""
jsonsalvage configuration utilities.
"""

from .config import ParseOptions

__all__ = ["ParseOptions"]
