"""
Config Loader - demo settings from a YAML file.

Missing or unreadable files fall back to defaults; nothing here is required
to run the closures themselves.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from closure_alpha.config.feature_flags import FeatureMode, merge_feature_flags
from closure_alpha.core.paths import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


@dataclass
class AccountConfig:
    initial_balance: float = 1000
    currency_symbol: str = "₹"


@dataclass
class CarConfig:
    model: str = "Model 1"
    name: str = "Toyota"
    color: str = "Black"
    manufactured_at: str = "24/2025"


@dataclass
class DemoConfig:
    account: AccountConfig = field(default_factory=AccountConfig)
    car: CarConfig = field(default_factory=CarConfig)
    display_name: str = "Mozilla"
    feature_flags: Dict[str, FeatureMode] = field(default_factory=lambda: merge_feature_flags(None))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = raw.get(key)
    return value if isinstance(value, dict) else {}


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.warning(f"[CONFIG] Config not found at {path}, using defaults")
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"[CONFIG] Failed to load {path}: {e}, using defaults")
        return {}

    if not isinstance(data, dict):
        logger.error(f"[CONFIG] {path} must contain a mapping, using defaults")
        return {}
    return data


def _text(section: Dict[str, Any], key: str, default: str) -> str:
    # YAML `key:` or `key: null` means "not set"
    value = section.get(key)
    return default if value is None else str(value)


def _initial_balance(acct: Dict[str, Any]) -> float:
    value = acct.get("initial_balance", AccountConfig.initial_balance)
    try:
        balance = float(value)
    except (TypeError, ValueError):
        balance = None
    if balance is None or not math.isfinite(balance) or balance < 0:
        logger.error(f"[CONFIG] Bad initial_balance {value!r}, using default")
        return AccountConfig.initial_balance
    return balance


def load_demo_config(path: Optional[str | Path] = None) -> DemoConfig:
    """
    Load demo configuration, merged with defaults.

    Args:
        path: YAML file; defaults to config/closures.yaml under the project root

    Returns:
        DemoConfig with every field populated
    """
    raw = _read_yaml(Path(path) if path is not None else DEFAULT_CONFIG_PATH)

    acct = _section(raw, "account")
    car = _section(raw, "car")
    display = _section(raw, "display")
    defaults = CarConfig()

    return DemoConfig(
        account=AccountConfig(
            initial_balance=_initial_balance(acct),
            currency_symbol=_text(acct, "currency_symbol", AccountConfig.currency_symbol),
        ),
        car=CarConfig(
            model=_text(car, "model", defaults.model),
            name=_text(car, "name", defaults.name),
            color=_text(car, "color", defaults.color),
            manufactured_at=_text(car, "manufactured_at", defaults.manufactured_at),
        ),
        display_name=_text(display, "name", "Mozilla"),
        feature_flags=merge_feature_flags(raw.get("feature_flags")),
    )
