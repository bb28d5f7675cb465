import argparse
import json
import logging
import sys

from .logger import get_logger, setup_logger
from .render import messages_to_dicts, render_lines
from .snapshot_loader import load_snapshots
from .status_engine import derive_status_messages

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show table status messages for JSON snapshot files.")
    parser.add_argument("snapshots", nargs="+", help="Snapshot JSON file(s); each may hold one object or a list")
    parser.add_argument("--json", action="store_true", help="Print messages as JSON instead of text")
    parser.add_argument("--log-file", default="logs/show_status.log", help="Where to write the run log")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(
        log_file=args.log_file,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    failures = 0
    for path in args.snapshots:
        try:
            snapshots = load_snapshots(path)
        except (OSError, ValueError) as e:
            failures += 1
            log.error(f"Could not load {path}: {e}")
            print(f"{path}: error: {e}", file=sys.stderr)
            continue

        for i, snapshot in enumerate(snapshots):
            messages = derive_status_messages(snapshot)
            log.info(f"{path}[{i}]: {len(messages)} message(s)")
            if args.json:
                print(json.dumps({"source": path, "index": i, "messages": messages_to_dicts(messages)}))
            else:
                print(f"== {path} [{i}]")
                for line in render_lines(messages) or ["(no status)"]:
                    print(f"  {line}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
