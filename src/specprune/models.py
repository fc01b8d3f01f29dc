from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileContent:
    text: str | None

    @property
    def readable(self) -> bool:
        return self.text is not None


@dataclass(frozen=True)
class ItemResult:
    deleted: bool


@dataclass
class BatchOutcome:
    deleted: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    errored: list[str] = field(default_factory=list)
    reasons: dict[str, str] = field(default_factory=dict)

    @property
    def deleted_count(self) -> int:
        return len(self.deleted)

    @property
    def error_count(self) -> int:
        return len(self.errored)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def total(self) -> int:
        return self.deleted_count + self.error_count + self.skipped_count


@dataclass(frozen=True)
class Delays:
    initial_ms: int = 5000
    per_file_ms: int = 300
    min_ms: int = 5000
    max_ms: int = 10000
