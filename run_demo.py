from closure_alpha.config.config_loader import load_demo_config
from closure_alpha.core.atomic_io import atomic_write_json
from closure_alpha.core.paths import DEFAULT_REPORT_PATH, ensure_dirs
from closure_alpha.core.sinks import console_sink
from closure_alpha.demos.registry import run_scenarios
import time

if __name__ == "__main__":
    ensure_dirs()
    config = load_demo_config()
    summaries = run_scenarios(["all"], config, console_sink)
    atomic_write_json(DEFAULT_REPORT_PATH, {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "config": config.to_dict(),
        "scenarios": summaries,
    })
    print("✅ wrote report to:", DEFAULT_REPORT_PATH)
