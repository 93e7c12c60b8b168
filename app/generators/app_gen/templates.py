"""Typed source templates.

A ``CodeTemplate`` declares the parameters its skeleton uses. Placeholders are
written ``@@name`` so they never collide with JSX braces or ``${...}`` in
TypeScript template literals; a literal ``@@`` is written ``@@@@``.
"""
import string
from dataclasses import dataclass
from typing import Tuple

from app.core.errors import TemplateParameterError


class _SourceTemplate(string.Template):
    delimiter = "@@"


@dataclass(frozen=True)
class CodeTemplate:
    name: str
    params: Tuple[str, ...]
    skeleton: str

    def render(self, **values: str) -> str:
        expected = set(self.params)
        given = set(values)
        if given != expected:
            missing = sorted(expected - given)
            unexpected = sorted(given - expected)
            raise TemplateParameterError(
                f"Template {self.name}: missing={missing} unexpected={unexpected}"
            )
        try:
            return _SourceTemplate(self.skeleton).substitute(values)
        except (KeyError, ValueError) as e:
            raise TemplateParameterError(f"Template {self.name}: {e}") from e
