"""Strict placeholder substitution for path patterns and file blueprints."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<field>[^{}]*?)\s*}}")
_DELIMITERS = ("{{", "}}")


class TemplateRenderingError(RuntimeError):
    """Raised when a template references an unknown field or is malformed."""


def _check_literal(text: str, offset: int) -> None:
    for delimiter in _DELIMITERS:
        position = text.find(delimiter)
        if position != -1:
            raise TemplateRenderingError(f"unclosed action '{delimiter}' at offset {offset + position}")


@dataclass(slots=True)
class TemplateRenderer:
    """Substitute ``{{ field }}`` placeholders with values from a context.

    Every placeholder must name a key of the context. Empty actions such as
    ``{{ }}`` and stray ``{{`` or ``}}`` delimiters in the surrounding text are
    rejected. Single braces are copied verbatim.
    """

    def render_string(self, template: str, context: Mapping[str, str]) -> str:
        """Render ``template`` using ``context``.

        Raises
        ------
        TemplateRenderingError
            If a placeholder is empty, names a field missing from ``context``,
            or a delimiter is left unbalanced.
        """

        pieces: list[str] = []
        cursor = 0
        for match in _PLACEHOLDER_PATTERN.finditer(template):
            literal = template[cursor : match.start()]
            _check_literal(literal, cursor)
            pieces.append(literal)

            field = match.group("field")
            if not field:
                raise TemplateRenderingError(f"empty action at offset {match.start()}")
            if field not in context:
                raise TemplateRenderingError(f"missing value for '{field}'")
            pieces.append(str(context[field]))
            cursor = match.end()

        tail = template[cursor:]
        _check_literal(tail, cursor)
        pieces.append(tail)
        return "".join(pieces)
