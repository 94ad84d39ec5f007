# closure_alpha/core/paths.py
from pathlib import Path

# Project root two levels up from here
ROOT = Path(__file__).resolve().parents[2]

REPORTS = ROOT / "reports"
LOGS    = ROOT / "logs"
CONFIG  = ROOT / "config"

DEFAULT_CONFIG_PATH = CONFIG / "closures.yaml"
DEFAULT_REPORT_PATH = REPORTS / "closure_demo.json"


def ensure_dirs() -> None:
    """Create the report and log directories if missing."""
    for p in (REPORTS, LOGS):
        p.mkdir(parents=True, exist_ok=True)
