from __future__ import annotations

import logging
import sys
from pathlib import Path

from specprune.errors import format_os_error
from specprune.models import FileContent

logger = logging.getLogger(__name__)


def read_spec_file(path: str) -> FileContent:
    """Read ``path`` as UTF-8.

    Failures are reported on stderr and returned as an unreadable
    ``FileContent`` so that one bad file does not stop the batch.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(format_os_error("READ ERROR", exc), file=sys.stderr)
        logger.debug("read failed for %s: %r", path, exc)
        return FileContent(text=None)
    return FileContent(text=text)
