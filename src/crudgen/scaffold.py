"""Write scaffold files for an entity without touching existing ones."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .config import GeneratorConfig
from .errors import ScaffoldError
from .naming import NameForms
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "GenerationReport",
    "ScaffoldTask",
    "ScaffoldTaskSpec",
    "ScaffoldWriter",
    "TaskOutcome",
    "TaskStatus",
]


LOGGER = logging.getLogger(__name__)


class TaskStatus(str, Enum):
    """Result of a single scaffold task."""

    CREATED = "created"
    SKIPPED = "skipped"


class ScaffoldTaskSpec(BaseModel):
    """Blueprint for one generated file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Short label for the artifact, used in logs.")
    path_template: str = Field(..., description="Output path pattern with name form placeholders.")
    body_template: str = Field(..., description="File contents with name form placeholders.")


class ScaffoldTask(BaseModel):
    """A blueprint resolved against concrete name forms."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    output_path: Path
    body_template: str


class TaskOutcome(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    path: Path
    status: TaskStatus


class GenerationReport(BaseModel):
    """Outcome of every task processed during a run, in registry order."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    entity: str = Field(..., description="Entity name the run generated files for.")
    outcomes: List[TaskOutcome] = Field(default_factory=list)

    @property
    def created(self) -> list[Path]:
        return [outcome.path for outcome in self.outcomes if outcome.status is TaskStatus.CREATED]

    @property
    def skipped(self) -> list[Path]:
        return [outcome.path for outcome in self.outcomes if outcome.status is TaskStatus.SKIPPED]

    @property
    def all_skipped(self) -> bool:
        return bool(self.outcomes) and not self.created


@dataclass(slots=True)
class ScaffoldWriter:
    """Render a registry of blueprints into files below a root directory.

    Tasks are processed one at a time in the order given. A target that already
    exists is skipped and never rewritten. Any other filesystem or template
    failure raises :class:`ScaffoldError` and stops the run; files written by
    earlier tasks stay in place, so running again resumes where it stopped.
    """

    config: GeneratorConfig
    renderer: TemplateRenderer

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or GeneratorConfig.for_directory()
        self.renderer = renderer or TemplateRenderer()

    def resolve(self, spec: ScaffoldTaskSpec, context: Mapping[str, str]) -> ScaffoldTask:
        """Substitute ``context`` into the path pattern of ``spec``."""

        relative = self.renderer.render_string(spec.path_template, context)
        return ScaffoldTask(
            name=spec.name,
            output_path=self.config.root / relative,
            body_template=spec.body_template,
        )

    def generate(self, forms: NameForms, tasks: Iterable[ScaffoldTaskSpec]) -> GenerationReport:
        """Create the files described by ``tasks`` for ``forms``."""

        context = forms.context()
        outcomes: list[TaskOutcome] = []

        def fail(message: str, path: Path | None) -> ScaffoldError:
            report = GenerationReport(entity=forms.pascal, outcomes=list(outcomes))
            return ScaffoldError(message, path=path, report=report)

        for spec in tasks:
            try:
                task = self.resolve(spec, context)
            except TemplateRenderingError as exc:
                raise fail(f"Error resolving output path for {spec.name}: {exc}", None) from exc

            path = task.output_path
            shown = self._display(path)

            try:
                path.lstat()
            except FileNotFoundError:
                pass
            except OSError as exc:
                raise fail(f"Error checking file status for {shown}: {exc}", path) from exc
            else:
                LOGGER.info("Skipping existing file: %s", shown)
                outcomes.append(TaskOutcome(name=task.name, path=path, status=TaskStatus.SKIPPED))
                continue

            LOGGER.info("Generating file: %s", shown)

            directory = path.parent
            try:
                self._ensure_directory(directory)
            except OSError as exc:
                raise fail(f"Error creating directory {self._display(directory)}: {exc}", directory) from exc

            try:
                rendered = self.renderer.render_string(task.body_template, context)
            except TemplateRenderingError as exc:
                raise fail(f"Error rendering template for {shown}: {exc}", path) from exc

            try:
                with path.open("x", encoding=self.config.encoding) as handle:
                    handle.write(rendered)
            except OSError as exc:
                raise fail(f"Error writing file {shown}: {exc}", path) from exc

            outcomes.append(TaskOutcome(name=task.name, path=path, status=TaskStatus.CREATED))

        report = GenerationReport(entity=forms.pascal, outcomes=outcomes)
        LOGGER.debug(
            "Finished %s: %d created, %d skipped",
            forms.pascal,
            len(report.created),
            len(report.skipped),
        )
        return report

    def _ensure_directory(self, directory: Path) -> None:
        missing: list[Path] = []
        for candidate in (directory, *directory.parents):
            if candidate.is_dir():
                break
            missing.append(candidate)

        for candidate in reversed(missing):
            LOGGER.debug("Creating directory %s", self._display(candidate))
            candidate.mkdir(mode=self.config.directory_mode, exist_ok=True)

    def _display(self, path: Path) -> str:
        try:
            return str(path.relative_to(self.config.root))
        except ValueError:
            return str(path)
