from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable, Iterable

from specprune.classifier import is_eligible_for_deletion
from specprune.errors import format_os_error
from specprune.models import BatchOutcome, FileContent, ItemResult
from specprune.reader import read_spec_file

logger = logging.getLogger(__name__)

Reader = Callable[[str], FileContent]
Deleter = Callable[[str], None]


def process_one(
    path: str,
    dry_run: bool,
    *,
    reader: Reader = read_spec_file,
    deleter: Deleter = os.remove,
) -> ItemResult:
    content = reader(path)
    if is_eligible_for_deletion(path, content):
        if not dry_run:
            deleter(path)
        print(f"~ REMOVED {path}")
        return ItemResult(deleted=True)

    print(f"~ SKIPPED {path}")
    return ItemResult(deleted=False)


def process_all(
    paths: Iterable[str],
    dry_run: bool,
    *,
    reader: Reader = read_spec_file,
    deleter: Deleter = os.remove,
) -> BatchOutcome:
    outcome = BatchOutcome()

    for path in paths:
        try:
            result = process_one(path, dry_run, reader=reader, deleter=deleter)
        except Exception as exc:
            message = format_os_error("REMOVE ERROR", exc)
            print(message, file=sys.stderr)
            logger.debug("remove failed for %s: %r", path, exc)
            outcome.errored.append(path)
            outcome.reasons[path] = message
            continue

        if result.deleted:
            outcome.deleted.append(path)
        else:
            outcome.skipped.append(path)

    print(render_summary(outcome))
    return outcome


def render_summary(outcome: BatchOutcome) -> str:
    lines = [
        f"\n~ DELETED: {outcome.deleted_count}"
        f"\n~ ERROR: {outcome.error_count}"
        f"\n~ SKIPPED: {outcome.skipped_count}"
    ]
    if outcome.skipped:
        lines.append("\n")
        lines.extend(f"~ SKIPPED: {path}" for path in outcome.skipped)
    if outcome.errored:
        lines.append("\n")
        lines.extend(f"~ ERROR: {path}" for path in outcome.errored)
    return "\n".join(lines)
