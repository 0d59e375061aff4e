"""
Configuration for jsonsalvage parsing.

This module defines the option toggles that control which leniencies the
cleanup pipeline applies before handing text to the standard decoder.
"""

from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass(frozen=True)
class ParseOptions:
    """Toggles for the non-standard JSON constructs that may be repaired."""

    allow_trailing_commas: bool = True
    allow_comments: bool = True
    allow_single_quotes: bool = True
    allow_unquoted_keys: bool = False
    allow_nan: bool = True
    allow_infinity: bool = True
    strip_bom: bool = True

    @property
    def handles_special_values(self) -> bool:
        """Whether any non-finite number literal is accepted."""
        return self.allow_nan or self.allow_infinity

    @classmethod
    def strict(cls) -> "ParseOptions":
        """Create options with every leniency disabled."""
        return cls.from_features(set())

    @classmethod
    def permissive(cls) -> "ParseOptions":
        """Create options with every leniency enabled."""
        return cls.from_features({f.name for f in fields(cls)})

    @classmethod
    def from_features(cls, enabled_features: set[str]) -> "ParseOptions":
        """Create options from a set of enabled toggle names."""
        # Start with all toggles disabled
        disabled = {f.name: False for f in fields(cls)}
        enabled = {name: True for name in enabled_features if name in disabled}
        return cls(**{**disabled, **enabled})

    def with_changes(self, **toggles: Any) -> "ParseOptions":
        """Return a copy with the given toggles replaced.

        Raises:
            TypeError: If a toggle name is unknown
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(toggles) - known)
        if unknown:
            raise TypeError(f"Unknown parse option(s): {', '.join(unknown)}")
        return replace(self, **{name: bool(value) for name, value in toggles.items()})
