from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from collections.abc import Callable, Iterable

from specprune import __version__
from specprune.batch import Deleter, Reader, process_all
from specprune.discovery import find_spec_file_paths
from specprune.errors import DiscoveryError, UsageError, format_os_error
from specprune.models import BatchOutcome, Delays
from specprune.reader import read_spec_file

logger = logging.getLogger(__name__)

MISSING_PATH_MESSAGE = "~ Unexpected missing full path\n\nTry: 'node index.js <path>'"
DRY_RUN_BANNER = (
    "~ DRY RUN: Include --real-remove to actually delete unused specs: "
    "'node index.js <path> --real-remove'"
)
REAL_RUN_BANNER = "~ NOT A DRY RUN - THIS IS FOR REAL FOR REAL"


def main(
    argv: Iterable[str] | None = None,
    *,
    delays: Delays | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    parser = argparse.ArgumentParser(
        prog="specprune",
        description=(
            "Find *.spec.ts files that declare a single describe block and delete them. "
            "Runs as a dry-run unless --real-remove is given."
        ),
    )
    parser.add_argument("path", nargs="?", help="Directory to search for spec files")
    parser.add_argument(
        "--real-remove",
        action="store_true",
        help="Actually delete matching files (default is a dry-run)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(message)s",
            handlers=[logging.StreamHandler(sys.stderr)],
        )

    try:
        run(args.path, dry_run=not args.real_remove, delays=delays, sleep=sleep)
    except UsageError:
        print(MISSING_PATH_MESSAGE, file=sys.stderr)
        return 0
    except DiscoveryError as exc:
        raise SystemExit(format_os_error("DISCOVERY ERROR", exc.cause)) from exc
    return 0


def run(
    path: str | None,
    dry_run: bool,
    *,
    delays: Delays | None = None,
    sleep: Callable[[float], None] = time.sleep,
    discover: Callable[[str], list[str]] = find_spec_file_paths,
    reader: Reader = read_spec_file,
    deleter: Deleter = os.remove,
) -> BatchOutcome:
    if not path:
        raise UsageError("missing root path")
    delays = delays or Delays()

    print(DRY_RUN_BANNER if dry_run else REAL_RUN_BANNER)
    print(f"~ Will search '{path}' for specs...")

    wait(delays.initial_ms, sleep=sleep)

    paths = discover(path)
    log_paths(paths)

    milliseconds = compute_delay(len(paths), delays)
    print(f"\n~ Files count: {len(paths)}")
    print(f"\n~ will delete 'empty' specs in {milliseconds}ms")

    wait(milliseconds, sleep=sleep)

    outcome = process_all(paths, dry_run, reader=reader, deleter=deleter)
    logger.debug(
        "processed %d paths: %d deleted, %d skipped, %d errored",
        outcome.total,
        outcome.deleted_count,
        outcome.skipped_count,
        outcome.error_count,
    )

    if dry_run:
        print(DRY_RUN_BANNER)
    return outcome


def log_paths(paths: Iterable[str]) -> None:
    print("\n~ Files found:")
    for path in paths:
        print(f"~   {path}")


def compute_delay(file_count: int, delays: Delays | None = None) -> int:
    delays = delays or Delays()
    return max(delays.min_ms, min(delays.max_ms, delays.per_file_ms * file_count))


def wait(milliseconds: int, sleep: Callable[[float], None] = time.sleep) -> None:
    sleep(milliseconds / 1000)


if __name__ == "__main__":
    raise SystemExit(main())
