"""Compilation of the source-form module into the CommonJS compatibility form."""

from __future__ import annotations

import re
import subprocess
from typing import Callable, List, Protocol, Sequence

from ..logging import get_logger
from .builder import iter_bindings, js_string

DEFAULT_BABEL_COMMAND: tuple[str, ...] = (
    "npx",
    "babel",
    "--presets",
    "@babel/preset-env",
    "--filename",
    "index.js",
)

_EXPORT_CONST = re.compile(r"export\s+const\s+")
_LINE_SEPARATORS = {"\u2028": "\\u2028", "\u2029": "\\u2029"}


class CompileError(RuntimeError):
    """Raised when the source module cannot be compiled."""


class ModuleCompiler(Protocol):
    def compile(self, source: str) -> str:
        ...


class CommonJSCompiler:
    """Rewrites the generated ES module into the CommonJS shape emitted by Babel.

    Only the shape produced by :class:`~licensegen.synth.builder.ModuleSynthesizer`
    is supported: a leading comment block followed by ``export const`` string
    declarations.
    """

    def compile(self, source: str) -> str:
        exports = [
            (name, value, start, end)
            for name, value, start, end in iter_bindings(source)
            if _EXPORT_CONST.match(source, start)
        ]
        if not exports:
            raise CompileError("source module declares no exported string constants")

        expected_count = len(_EXPORT_CONST.findall(_strip_literals(source, exports)))
        if expected_count != len(exports):
            raise CompileError("source module contains exports that are not string constants")

        preamble = source[: exports[0][2]].strip()
        lines: List[str] = [
            '"use strict";',
            "",
            'Object.defineProperty(exports, "__esModule", {',
            "  value: true",
            "});",
            " = ".join(f"exports.{name}" for name, _, _, _ in reversed(exports)) + " = void 0;",
        ]
        if preamble:
            lines.append(preamble)

        cursor = exports[0][2]
        for name, value, start, end in exports:
            between = source[cursor:start].strip()
            if between and between != ";":
                raise CompileError(f"unexpected content before export {name!r}")
            terminator = source[end : end + 1]
            if terminator != ";":
                raise CompileError(f"export {name!r} is not terminated with ';'")
            lines.append(f"var {name} = {_legacy_js_string(value)};")
            lines.append(f"exports.{name} = {name};")
            cursor = end + 1

        if source[cursor:].strip():
            raise CompileError("unexpected content after the last export")
        return "\n".join(lines) + "\n"


class BabelCompiler:
    """Delegates compilation to an external Babel command reading stdin."""

    def __init__(
        self,
        command: Sequence[str] | None = None,
        *,
        runner: Callable[[Sequence[str], str], str] | None = None,
    ) -> None:
        self.command = tuple(command or DEFAULT_BABEL_COMMAND)
        self._runner = runner or self._default_runner
        self.logger = get_logger("compiler")

    def compile(self, source: str) -> str:
        self.logger.debug("Running %s", " ".join(self.command))
        output = self._runner(self.command, source)
        if not output.strip():
            raise CompileError(f"{self.command[0]} produced no output")
        return output

    @staticmethod
    def _default_runner(command: Sequence[str], source: str) -> str:
        try:
            completed = subprocess.run(
                list(command),
                input=source,
                check=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
            )
        except FileNotFoundError as exc:
            raise CompileError(
                f"Unable to locate '{command[0]}'. Install Node.js and @babel/cli or use the commonjs compiler."
            ) from exc
        except subprocess.CalledProcessError as exc:
            raise CompileError(
                f"Babel failed with exit code {exc.returncode}: {exc.stderr.strip()}"
            ) from exc
        return completed.stdout


def create_compiler(mode: str = "commonjs", command: Sequence[str] | None = None) -> ModuleCompiler:
    """Return the compiler configured by ``mode``."""
    if mode == "commonjs":
        return CommonJSCompiler()
    if mode == "babel":
        return BabelCompiler(command)
    raise ValueError(f"Unknown compiler mode: {mode}")


def _legacy_js_string(value: str) -> str:
    # Engines before ES2019 reject raw U+2028/U+2029 inside string literals.
    literal = js_string(value)
    for raw, escaped in _LINE_SEPARATORS.items():
        literal = literal.replace(raw, escaped)
    return literal


def _strip_literals(source: str, exports: Sequence[tuple[str, str, int, int]]) -> str:
    pieces: List[str] = []
    cursor = 0
    for _, _, start, end in exports:
        pieces.append(source[cursor:start])
        pieces.append("export const _ = 0")
        cursor = end
    pieces.append(source[cursor:])
    return "".join(pieces)


__all__ = [
    "BabelCompiler",
    "CommonJSCompiler",
    "CompileError",
    "DEFAULT_BABEL_COMMAND",
    "ModuleCompiler",
    "create_compiler",
]
