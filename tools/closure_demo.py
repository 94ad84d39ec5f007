# tools/closure_demo.py

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from closure_alpha.config.config_loader import load_demo_config
from closure_alpha.config.feature_flags import describe_flags
from closure_alpha.core.atomic_io import atomic_write_json
from closure_alpha.core.sinks import console_sink, logger_sink, null_sink, tee_sink
from closure_alpha.demos.registry import SCENARIOS, run_scenarios
from closure_alpha.logging_utils import get_transcript_logger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the closure walkthrough scenarios.",
        epilog="feature flags (set under feature_flags: in the config; off | observe | enforce):\n" + describe_flags(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scenario",
        action="append",
        choices=sorted(SCENARIOS) + ["all"],
        help="Scenario to run; repeatable. Defaults to all.",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML config (default config/closures.yaml).")
    parser.add_argument("--report", type=Path, default=None, help="Write a JSON report to this path.")
    parser.add_argument("--quiet", action="store_true", help="Do not print the transcript.")
    parser.add_argument("--transcript", action="store_true", help="Also append the transcript to logs/closure_transcript.log.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.config is not None and not args.config.exists():
        parser.error(f"config file not found: {args.config}")

    config = load_demo_config(args.config)
    sink = null_sink if args.quiet else console_sink
    if args.transcript:
        sink = tee_sink(sink, logger_sink(get_transcript_logger()))

    summaries = run_scenarios(args.scenario or ["all"], config, sink)

    if args.report is not None:
        atomic_write_json(args.report, {
            "config": config.to_dict(),
            "scenarios": summaries,
        })
        logger.info(f"[DEMO] Wrote report to {args.report}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
