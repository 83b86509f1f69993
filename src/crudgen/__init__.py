"""Generate CRUD boilerplate for layered Go backends.

The package derives the case variants of an entity name, renders a small set of
repository, service and controller blueprints with them, and writes the
results without ever overwriting a file that already exists. It can be used
programmatically or via the ``crudgen`` command line interface.
"""

from __future__ import annotations

from .config import GeneratorConfig
from .errors import ScaffoldError
from .naming import NameForms, derive_name_forms, to_camel_case, to_kebab_case, to_lower_case
from .scaffold import GenerationReport, ScaffoldTaskSpec, ScaffoldWriter, TaskOutcome, TaskStatus
from .template import TemplateRenderer, TemplateRenderingError
from .templates import default_registry

__all__ = [
    "GenerationReport",
    "GeneratorConfig",
    "NameForms",
    "ScaffoldError",
    "ScaffoldTaskSpec",
    "ScaffoldWriter",
    "TaskOutcome",
    "TaskStatus",
    "TemplateRenderer",
    "TemplateRenderingError",
    "default_registry",
    "derive_name_forms",
    "to_camel_case",
    "to_kebab_case",
    "to_lower_case",
]

__version__ = "0.1.0"
