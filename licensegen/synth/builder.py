"""Renders the source-form license module from a jinja2 template."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Dict, Iterator, Tuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..constants import WAIVER_URL

TEMPLATE_NAME = "index.mjs.j2"

# Matches both `export const x = ...` and the compiled `var x = ...` /
# `var x = exports.x = ...` declarations.
_DECLARATION = re.compile(
    r"(?:export\s+const|var|let|const)\s+(?P<binding>[A-Za-z_$][\w$]*)\s*=\s*"
    r"(?:exports\.(?P=binding)\s*=\s*)?"
)
_DECODER = json.JSONDecoder()


def js_string(value: str) -> str:
    """Quote ``value`` as a JSON string literal, which is also a valid JS literal."""
    return json.dumps(value, ensure_ascii=False)


class ModuleSynthesizer:
    """Builds the ES module exposing a license's ``name`` and ``text``."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = self._create_env(self.templates_dir)

    def render(self, name: str, text: str) -> str:
        template = self._env.get_template(TEMPLATE_NAME)
        return template.render(name=name, text=text, waiver_url=WAIVER_URL)

    @staticmethod
    def _create_env(templates_dir: Path) -> Environment:
        env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        env.filters["js_string"] = js_string
        return env


def iter_bindings(module: str) -> Iterator[Tuple[str, str, int, int]]:
    """Yield ``(binding, value, start, end)`` for each string-valued declaration.

    ``start`` is the offset of the declaration keyword and ``end`` the offset
    just past the string literal.
    """
    position = 0
    while True:
        match = _DECLARATION.search(module, position)
        if match is None:
            return
        try:
            value, end = _DECODER.raw_decode(module, match.end())
        except json.JSONDecodeError:
            position = match.end()
            continue
        # Resume after the literal so declarations quoted inside it are skipped.
        position = end
        if isinstance(value, str):
            yield match.group("binding"), value, match.start(), end


def extract_binding(module: str, binding: str) -> str:
    """Return the decoded string value of ``binding`` declared in ``module``."""
    for name, value, _, _ in iter_bindings(module):
        if name == binding:
            return value
    raise KeyError(binding)


def extract_bindings(module: str) -> Dict[str, str]:
    return {name: value for name, value, _, _ in iter_bindings(module)}


__all__ = ["ModuleSynthesizer", "extract_binding", "extract_bindings", "iter_bindings", "js_string"]
