"""Exception types raised while generating scaffold files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .scaffold import GenerationReport


class ScaffoldError(RuntimeError):
    """Raised when a generation run has to stop.

    Files written before the failure are left in place. :attr:`report` lists
    the outcomes of the tasks that completed, so callers can tell how far the
    run got.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        report: "GenerationReport | None" = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.report = report
