"""Rendering and compilation of the generated license module."""

from .builder import ModuleSynthesizer, extract_binding, js_string
from .compiler import BabelCompiler, CommonJSCompiler, CompileError, ModuleCompiler, create_compiler

__all__ = [
    "BabelCompiler",
    "CommonJSCompiler",
    "CompileError",
    "ModuleCompiler",
    "ModuleSynthesizer",
    "create_compiler",
    "extract_binding",
    "js_string",
]
