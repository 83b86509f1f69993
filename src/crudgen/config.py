"""Configuration shared by the scaffold writer and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_DIRECTORY_MODE = 0o755
DEFAULT_ENCODING = "utf-8"


@dataclass(slots=True)
class GeneratorConfig:
    """Settings controlling where and how scaffold files are written.

    Attributes
    ----------
    root:
        Directory the registry's relative output paths are resolved against.
        The CLI uses the current working directory unless ``--directory`` is
        given.
    directory_mode:
        Permission bits for directories created on the way to an output file.
        The process umask still applies.
    encoding:
        Text encoding used for generated files.
    """

    root: Path
    directory_mode: int = DEFAULT_DIRECTORY_MODE
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def for_directory(cls, directory: str | Path | None = None) -> "GeneratorConfig":
        """Build a :class:`GeneratorConfig` rooted at ``directory``.

        ``None`` selects the current working directory at call time.
        """

        root = Path.cwd() if directory is None else Path(directory).expanduser()
        return cls(root=root.resolve())
