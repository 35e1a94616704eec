"""Tests for the source-form module synthesizer."""

from __future__ import annotations

import json

import pytest

from licensegen.synth.builder import ModuleSynthesizer, extract_binding, extract_bindings, js_string

TRICKY_TEXTS = [
    "MIT License\n...",
    'He said "hello" and left.',
    "C:\\path\\to\\file and \\n is not a newline",
    "line one\nline two\r\nline three\ttabbed",
    "Ünïcödé — « guillemets » 著作権 😀",
    "ends with a backslash \\",
    "</script><!-- --> */ export const text = \"fake\";",
    "\u2028 line and paragraph \u2029 separators",
    "",
]


@pytest.fixture(scope="module")
def synthesizer() -> ModuleSynthesizer:
    return ModuleSynthesizer()


def test_module_exports_name_and_text(synthesizer: ModuleSynthesizer) -> None:
    module = synthesizer.render("MIT", "MIT License\n...")

    assert 'export const name = "MIT";' in module
    assert 'export const text = "MIT License\\n...";' in module


def test_module_carries_waiver_header(synthesizer: ModuleSynthesizer) -> None:
    module = synthesizer.render("BlueOak-1.0.0", "text")

    assert module.startswith("/*\n * The BlueOak-1.0.0 package from The License Project\n")
    assert "has waived all copyright and" in module
    assert "<http://creativecommons.org/publicdomain/zero/1.0/>" in module
    assert module.index("*/") < module.index("export const name")


@pytest.mark.parametrize("text", TRICKY_TEXTS)
def test_text_binding_round_trips(synthesizer: ModuleSynthesizer, text: str) -> None:
    module = synthesizer.render("MIT", text)

    assert extract_binding(module, "text") == text
    assert extract_binding(module, "name") == "MIT"


def test_quoted_declarations_inside_text_are_ignored(synthesizer: ModuleSynthesizer) -> None:
    module = synthesizer.render("MIT", 'export const name = "spoofed";')

    assert extract_bindings(module) == {"name": "MIT", "text": 'export const name = "spoofed";'}


def test_js_string_is_json_without_ascii_escaping() -> None:
    quoted = js_string("é \"q\" \\")

    assert quoted == '"é \\"q\\" \\\\"'
    assert json.loads(quoted) == "é \"q\" \\"


def test_extract_binding_raises_for_missing_name(synthesizer: ModuleSynthesizer) -> None:
    module = synthesizer.render("MIT", "text")

    with pytest.raises(KeyError):
        extract_binding(module, "missing")


def test_custom_templates_dir(tmp_path) -> None:
    (tmp_path / "index.mjs.j2").write_text(
        "export const name = {{ name | js_string }};\nexport const text = {{ text | js_string }};\n",
        encoding="utf-8",
    )
    synthesizer = ModuleSynthesizer(templates_dir=tmp_path)

    module = synthesizer.render("MIT", "body")

    assert module == 'export const name = "MIT";\nexport const text = "body";\n'
