from __future__ import annotations

import fnmatch
import logging
import os
import sys

from specprune.errors import DiscoveryError, format_os_error

logger = logging.getLogger(__name__)

SPEC_SUFFIX_PATTERN = "*.spec.ts"


def find_spec_file_paths(root: str | os.PathLike[str]) -> list[str]:
    root = os.fspath(root)

    def _on_error(error: OSError) -> None:
        if error.filename == root:
            raise DiscoveryError(root, error) from error
        # Unreadable subdirectories are reported and left out of the search.
        print(format_os_error("SEARCH ERROR", error), file=sys.stderr)
        logger.debug("skipping %s: %r", error.filename, error)

    results: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames[:] = [name for name in dirnames if not name.startswith(".")]
        for name in filenames:
            if name.startswith("."):
                continue
            if fnmatch.fnmatchcase(name, SPEC_SUFFIX_PATTERN):
                results.append(os.path.join(dirpath, name))
    logger.debug("found %d spec files under %s", len(results), root)
    return sorted(results)
