from __future__ import annotations

from pathlib import Path

import pytest

from crudgen.config import DEFAULT_DIRECTORY_MODE, GeneratorConfig


def test_for_directory_resolves_path(tmp_path: Path):
    config = GeneratorConfig.for_directory(tmp_path / "project" / ".." / "project")
    assert config.root == (tmp_path / "project").resolve()
    assert config.directory_mode == DEFAULT_DIRECTORY_MODE == 0o755
    assert config.encoding == "utf-8"


def test_for_directory_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    assert GeneratorConfig.for_directory().root == tmp_path.resolve()
