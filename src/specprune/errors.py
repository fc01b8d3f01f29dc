from __future__ import annotations


class SpecPruneError(Exception):
    """Base class for errors raised by specprune."""


class UsageError(SpecPruneError):
    pass


class DiscoveryError(SpecPruneError):
    def __init__(self, root: str, cause: OSError) -> None:
        super().__init__(f"Could not search {root!r}: {cause}")
        self.root = root
        self.cause = cause


def format_os_error(label: str, error: BaseException) -> str:
    """Render ``! <label> <errno>: - <filename>`` with placeholders for missing fields."""
    errno = getattr(error, "errno", None)
    filename = getattr(error, "filename", None)
    code = "na" if errno is None else str(errno)
    where = "unknown path" if filename is None else str(filename)
    return f"! {label} {code}: - {where}"
