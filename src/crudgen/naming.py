"""Case conversion utilities for entity names."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

__all__ = [
    "NameForms",
    "derive_name_forms",
    "to_camel_case",
    "to_kebab_case",
    "to_lower_case",
]


# Applied in this order. Abbreviation runs such as ``HTTP`` are only split where
# one of the two boundaries matches.
_FIRST_CAP = re.compile(r"(.)([A-Z][a-z]+)")
_ALL_CAP = re.compile(r"([a-z0-9])([A-Z])")


def to_camel_case(value: str) -> str:
    """Lower-case the first character of ``value`` and keep the rest verbatim."""

    return value[:1].lower() + value[1:]


def to_kebab_case(value: str) -> str:
    """Return a hyphen separated, lower-cased form of ``value``.

    Examples
    --------
    ``SbsFee`` -> ``sbs-fee``, ``HTTPServer`` -> ``http-server``,
    ``UserID`` -> ``user-id``.
    """

    hyphenated = _FIRST_CAP.sub(r"\1-\2", value)
    hyphenated = _ALL_CAP.sub(r"\1-\2", hyphenated)
    return hyphenated.lower()


def to_lower_case(value: str) -> str:
    return value.lower()


@dataclass(frozen=True, slots=True)
class NameForms:
    """Lexical variants of an entity name.

    Attributes
    ----------
    pascal:
        The entity name exactly as supplied, expected in upper camel case.
    camel:
        :attr:`pascal` with only its first character lower-cased. Used for
        file names, variables and receiver types.
    lower:
        :attr:`pascal` fully lower-cased, suitable for Go package names.
    kebab:
        Hyphen separated lower-case form used in URL segments.
    """

    pascal: str
    camel: str
    lower: str
    kebab: str

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "pascal": self.pascal,
            "camel": self.camel,
            "lower": self.lower,
            "kebab": self.kebab,
        }


def derive_name_forms(name: str) -> NameForms:
    """Build the :class:`NameForms` for ``name``.

    ``name`` is not validated beyond being non-empty; the caller is trusted to
    pass an upper camel case identifier.
    """

    if not name:
        raise ValueError("entity name must not be empty")

    return NameForms(
        pascal=name,
        camel=to_camel_case(name),
        lower=to_lower_case(name),
        kebab=to_kebab_case(name),
    )
