from __future__ import annotations

import errno
from pathlib import Path

import pytest

from specprune.errors import format_os_error
from specprune.reader import read_spec_file


def test_reads_utf8_text(tmp_path: Path) -> None:
    target = tmp_path / "a.spec.ts"
    target.write_text("describe('a', () => {});\n", encoding="utf-8")

    content = read_spec_file(str(target))

    assert content.readable
    assert content.text == "describe('a', () => {});\n"


def test_empty_file_is_not_unreadable(tmp_path: Path) -> None:
    target = tmp_path / "empty.spec.ts"
    target.write_text("")

    content = read_spec_file(str(target))

    assert content.readable
    assert content.text == ""


def test_missing_file_returns_unreadable(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = str(tmp_path / "gone.spec.ts")

    content = read_spec_file(missing)

    assert content.text is None
    assert not content.readable
    assert capsys.readouterr().err == f"! READ ERROR {errno.ENOENT}: - {missing}\n"


def test_undecodable_file_uses_placeholders(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    target = tmp_path / "binary.spec.ts"
    target.write_bytes(b"\xff\xfe\xfa describe")

    content = read_spec_file(str(target))

    assert content.text is None
    assert capsys.readouterr().err == "! READ ERROR na: - unknown path\n"


def test_format_os_error_placeholders() -> None:
    assert format_os_error("READ ERROR", Exception()) == "! READ ERROR na: - unknown path"
    assert format_os_error("REMOVE ERROR", OSError()) == "! REMOVE ERROR na: - unknown path"


def test_format_os_error_fields() -> None:
    error = PermissionError(errno.EACCES, "Permission denied", "/x/a.spec.ts")
    assert format_os_error("REMOVE ERROR", error) == f"! REMOVE ERROR {errno.EACCES}: - /x/a.spec.ts"
