from __future__ import annotations

from specprune.models import FileContent

PROTECTED_FILENAME = "app.component.spec.ts"
DESCRIBE_MARKER = "describe"


def count_describes(text: str) -> int:
    # Plain substring count: occurrences in comments and strings count too.
    return text.count(DESCRIBE_MARKER)


def is_eligible_for_deletion(path: str, content: str | FileContent | None) -> bool:
    if isinstance(content, FileContent):
        if not content.readable:
            return False
        content = content.text
    if content is None:
        return False
    if PROTECTED_FILENAME in path:
        return False
    return count_describes(content) == 1
