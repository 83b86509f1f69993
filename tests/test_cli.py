from __future__ import annotations

import io
import logging
import sys
from pathlib import Path

import pytest

from crudgen.cli import main


@pytest.fixture(autouse=True)
def detach_console_handler():
    yield
    logger = logging.getLogger("crudgen")
    for handler in list(logger.handlers):
        if handler.get_name() == "crudgen-console":
            logger.removeHandler(handler)


@pytest.fixture()
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_cli_crud_generates_files_in_cwd(project_dir: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["crud", "SbsFee"])

    assert exit_code == 0
    assert (project_dir / "internal" / "service" / "sbsFee.go").exists()
    assert (project_dir / "internal/transport/http/rest/controller/v1/sbsFee/request.go").exists()

    out = capsys.readouterr().out
    assert "--- Generating CRUD for entity: SbsFee ---" in out
    assert "--- CRUD for SbsFee generated successfully! ---" in out
    assert "1. Define the 'dto.SbsFee' struct" in out
    assert "internal/transport/http/rest/controller/v1/sbsfee/request.go" in out


def test_cli_crud_respects_directory_option(tmp_path: Path):
    target = tmp_path / "service-root"
    exit_code = main(["crud", "Order", "--directory", str(target)])

    assert exit_code == 0
    assert (target / "internal" / "transport" / "repository" / "postgres" / "order.go").exists()


def test_cli_reports_skipped_files(
    project_dir: Path,
    caplog: pytest.LogCaptureFixture,
    capsys: pytest.CaptureFixture[str],
):
    caplog.set_level(logging.INFO, logger="crudgen")
    assert main(["crud", "Order"]) == 0
    caplog.clear()

    assert main(["crud", "Order"]) == 0

    assert caplog.text.count("Skipping existing file:") == 4
    assert "Generating file:" not in caplog.text
    assert "All files already existed" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["crud"], ["crud", "Order", "Invoice"], ["crud", ""], []])
def test_cli_usage_errors_touch_nothing(project_dir: Path, argv: list[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == 2
    assert list(project_dir.iterdir()) == []


def test_cli_fatal_error_exits_non_zero(project_dir: Path, capsys: pytest.CaptureFixture[str]):
    (project_dir / "internal").write_text("", encoding="utf-8")

    exit_code = main(["crud", "Order"])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "An error occurred" in err
    assert "internal/transport/repository/postgres/order.go" in err


def test_cli_progress_follows_current_stdout(project_dir: Path, monkeypatch: pytest.MonkeyPatch):
    first, second = io.StringIO(), io.StringIO()

    monkeypatch.setattr(sys, "stdout", first)
    assert main(["crud", "Order"]) == 0
    monkeypatch.setattr(sys, "stdout", second)
    assert main(["crud", "Order"]) == 0

    assert "Generating file: internal/service/order.go" in first.getvalue()
    assert second.getvalue().count("Skipping existing file:") == 4
    assert "Skipping existing file:" not in first.getvalue()

    console_handlers = [
        handler for handler in logging.getLogger("crudgen").handlers if handler.get_name() == "crudgen-console"
    ]
    assert len(console_handlers) == 1
