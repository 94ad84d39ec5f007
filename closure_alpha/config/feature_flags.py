"""
Feature flags for closure rejection policies.

Each rejectable transaction has an off|observe|enforce mode:
  off      reject silently
  observe  reject and report a message to the sink
  enforce  reject, report, and raise InvalidAmountError
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Mapping, Optional

FeatureMode = Literal["off", "observe", "enforce"]

MODES = ("off", "observe", "enforce")

# Defaults reproduce the reference console behavior
DEFAULT_FLAGS: Dict[str, FeatureMode] = {
    "deposit_rejections": "off",       # Invalid deposits are silent no-ops
    "withdraw_rejections": "observe",  # Invalid withdrawals print a message
}

FEATURE_DOCS: Dict[str, str] = {
    "deposit_rejections": "Policy for deposits with a non-positive amount",
    "withdraw_rejections": "Policy for withdrawals that are non-positive or exceed the balance",
}


def merge_feature_flags(overrides: Optional[Mapping[str, Any]]) -> Dict[str, FeatureMode]:
    """Merge configured flags with defaults, ignoring unknown names and bad values."""
    flags = DEFAULT_FLAGS.copy()
    if not isinstance(overrides, Mapping):
        return flags

    for key, value in overrides.items():
        if key in flags and isinstance(value, str):
            normalized = value.lower().strip()
            if normalized in MODES:
                flags[key] = normalized  # type: ignore[assignment]

    return flags


class FeatureRegistry:
    """Registry for feature flags with convenience methods."""

    def __init__(self, flags: Optional[Mapping[str, FeatureMode]] = None):
        self._flags = merge_feature_flags(flags)

    def mode(self, name: str) -> FeatureMode:
        """Get the mode for a feature."""
        return self._flags.get(name, "off")

    def is_off(self, name: str) -> bool:
        return self.mode(name) == "off"

    def is_observe(self, name: str) -> bool:
        return self.mode(name) == "observe"

    def is_enforce(self, name: str) -> bool:
        return self.mode(name) == "enforce"

    def reports(self, name: str) -> bool:
        """True when a rejection should be reported to the sink."""
        return self.mode(name) in ("observe", "enforce")

    def __repr__(self) -> str:
        return f"FeatureRegistry({self._flags!r})"


def describe_flags() -> str:
    """One line per flag: name, default mode, description."""
    return "\n".join(
        f"  {name:<22} default={DEFAULT_FLAGS[name]:<8} {doc}"
        for name, doc in FEATURE_DOCS.items()
    )
