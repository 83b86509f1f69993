from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from crudgen.config import GeneratorConfig  # noqa: E402
from crudgen.scaffold import ScaffoldWriter  # noqa: E402
from crudgen.template import TemplateRenderer  # noqa: E402


@pytest.fixture()
def writer(tmp_path: Path) -> ScaffoldWriter:
    """Scaffold writer rooted at an empty temporary project directory."""

    return ScaffoldWriter(GeneratorConfig.for_directory(tmp_path), TemplateRenderer())
