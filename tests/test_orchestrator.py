"""Tests for licensegen.orchestrator."""

from __future__ import annotations

import dataclasses
import json
import subprocess
from pathlib import Path

import pytest

from licensegen.config import CompilerConfig, GitConfig, LicenseGenConfig
from licensegen.git.committer import RepositoryCommitter
from licensegen.models import AnswerRecord
from licensegen.orchestrator import Orchestrator, PipelineError, PipelineState
from licensegen.synth.builder import extract_binding
from licensegen.synth.compiler import BabelCompiler, CompileError
from tests._fixtures.git_recorder import COMMIT_ID, RecordingGitRunner
from tests._fixtures.markers import requires_git

LICENSE_TEXT = 'MIT License\n\nCopyright (c) <year> "holders" \\ ünïcödé\r\n...'
WAIVER = "CC0 waiver text\n"


class FailingCompiler:
    def compile(self, source: str) -> str:
        raise CompileError("malformed module")


def _license_file(tmp_path: Path, text: str = LICENSE_TEXT) -> Path:
    path = tmp_path / "license.txt"
    path.write_bytes(text.encode("utf-8"))
    return path


def _orchestrator(
    root: Path,
    answers: AnswerRecord,
    runner: RecordingGitRunner | None = None,
    **overrides: object,
) -> Orchestrator:
    params: dict[str, object] = {
        "collect_answers": lambda: answers,
        "committer": RepositoryCommitter(runner=runner or RecordingGitRunner()),
        "waiver_text": lambda: WAIVER,
        "root": root,
    }
    params.update(overrides)
    return Orchestrator(**params)  # type: ignore[arg-type]


def test_run_generates_mit_package(tmp_path: Path, mit_answers: AnswerRecord) -> None:
    out = tmp_path / "out"
    out.mkdir()
    runner = RecordingGitRunner()
    orchestrator = _orchestrator(out, mit_answers, runner)

    result = orchestrator.run(_license_file(tmp_path))

    package = out / "MIT"
    assert result.artifacts.root == package
    assert sorted(p.name for p in package.iterdir()) == ["LICENSE", "index.js", "index.mjs", "package.json"]
    manifest = json.loads((package / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "@license-project/MIT"
    source = (package / "index.mjs").read_text(encoding="utf-8")
    assert 'export const name = "MIT"' in source
    assert extract_binding(source, "text") == LICENSE_TEXT
    compiled = (package / "index.js").read_text(encoding="utf-8")
    assert extract_binding(compiled, "text") == LICENSE_TEXT
    assert (package / "LICENSE").read_text(encoding="utf-8") == WAIVER
    assert orchestrator.state is PipelineState.DONE
    assert result.repository.commit == COMMIT_ID
    assert result.repository.remote_url == "git@github.com:license-project/MIT.git"
    assert runner.calls[-1] == [
        "git",
        "remote",
        "add",
        "origin",
        "git@github.com:license-project/MIT.git",
    ]


def test_run_generates_unlisted_package(tmp_path: Path, blueoak_answers: AnswerRecord) -> None:
    result = _orchestrator(tmp_path, blueoak_answers).run(_license_file(tmp_path))

    assert result.identity.name == "BlueOak-1.0.0"
    assert "spdx" not in result.identity.keywords
    assert (tmp_path / "BlueOak-1.0.0" / "package.json").exists()
    assert result.manifest.repository.url == "https://github.com/license-project/BlueOak-1.0.0"
    assert result.repository.remote_url == "git@github.com:license-project/BlueOak-1.0.0.git"


def test_unreadable_license_fails_before_interview(tmp_path: Path, mit_answers: AnswerRecord) -> None:
    asked: list[bool] = []

    def collect() -> AnswerRecord:
        asked.append(True)
        return mit_answers

    runner = RecordingGitRunner()
    orchestrator = _orchestrator(tmp_path, mit_answers, runner, collect_answers=collect)

    with pytest.raises(PipelineError) as excinfo:
        orchestrator.run(tmp_path / "missing.txt")

    assert excinfo.value.state is PipelineState.READ_INPUTS
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert orchestrator.state is PipelineState.FAILED
    assert not asked
    assert not runner.calls


def test_invalid_answers_fail_collection(tmp_path: Path, mit_answers: AnswerRecord) -> None:
    declined = dataclasses.replace(mit_answers, license_accepted=False)

    with pytest.raises(PipelineError) as excinfo:
        _orchestrator(tmp_path, declined).run(_license_file(tmp_path))

    assert excinfo.value.state is PipelineState.COLLECT_ANSWERS
    assert not (tmp_path / "MIT").exists()


def test_path_like_short_name_never_leaves_the_root(tmp_path: Path, blueoak_answers: AnswerRecord) -> None:
    out = tmp_path / "out"
    out.mkdir()
    escaping = dataclasses.replace(blueoak_answers, short_name="../escaped", version="1")
    runner = RecordingGitRunner()

    with pytest.raises(PipelineError) as excinfo:
        _orchestrator(out, escaping, runner).run(_license_file(tmp_path))

    assert excinfo.value.state is PipelineState.COLLECT_ANSWERS
    assert not (tmp_path / "escaped-1").exists()
    assert not list(out.iterdir())
    assert not runner.calls


def test_manifest_failure_is_reported_as_identity_stage(
    tmp_path: Path, mit_answers: AnswerRecord, monkeypatch: pytest.MonkeyPatch
) -> None:
    def broken_manifest(identity, answers):  # type: ignore[no-untyped-def]
        raise ValueError("bad manifest")

    monkeypatch.setattr("licensegen.orchestrator.build_manifest", broken_manifest)
    orchestrator = _orchestrator(tmp_path, mit_answers)

    with pytest.raises(PipelineError) as excinfo:
        orchestrator.run(_license_file(tmp_path))

    assert excinfo.value.state is PipelineState.RESOLVE_IDENTITY
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert orchestrator.state is PipelineState.FAILED
    assert not (tmp_path / "MIT").exists()


def test_compile_failure_happens_before_any_mutation(tmp_path: Path, mit_answers: AnswerRecord) -> None:
    runner = RecordingGitRunner()
    orchestrator = _orchestrator(tmp_path, mit_answers, runner, compiler=FailingCompiler())

    with pytest.raises(PipelineError) as excinfo:
        orchestrator.run(_license_file(tmp_path))

    assert excinfo.value.state is PipelineState.COMPILE
    assert "malformed module" in str(excinfo.value)
    assert not (tmp_path / "MIT").exists()
    assert not runner.calls


def test_second_run_fails_at_directory_creation(tmp_path: Path, mit_answers: AnswerRecord) -> None:
    license_file = _license_file(tmp_path)
    first = _orchestrator(tmp_path, mit_answers).run(license_file)
    before = {name: path.read_bytes() for name, path in first.artifacts.files.items()}
    runner = RecordingGitRunner()

    with pytest.raises(PipelineError) as excinfo:
        _orchestrator(tmp_path, mit_answers, runner).run(license_file)

    assert excinfo.value.state is PipelineState.WRITE
    assert isinstance(excinfo.value.__cause__, FileExistsError)
    assert {name: path.read_bytes() for name, path in first.artifacts.files.items()} == before
    assert not runner.calls


def test_commit_failure_leaves_written_files(tmp_path: Path, mit_answers: AnswerRecord) -> None:
    runner = RecordingGitRunner(fail_on="commit-tree")

    with pytest.raises(PipelineError) as excinfo:
        _orchestrator(tmp_path, mit_answers, runner).run(_license_file(tmp_path))

    assert excinfo.value.state is PipelineState.COMMIT
    assert (tmp_path / "MIT" / "package.json").exists()
    assert "remote" not in runner.subcommands()


def test_remote_failure_is_reported_separately(tmp_path: Path, mit_answers: AnswerRecord) -> None:
    runner = RecordingGitRunner(fail_on="remote")

    with pytest.raises(PipelineError) as excinfo:
        _orchestrator(tmp_path, mit_answers, runner).run(_license_file(tmp_path))

    assert excinfo.value.state is PipelineState.ATTACH_REMOTE


def test_from_config_applies_compiler_and_git_settings(tmp_path: Path) -> None:
    config = LicenseGenConfig(
        root=tmp_path,
        compiler=CompilerConfig(mode="babel", command=["babel", "--presets", "@babel/preset-env"]),
        git=GitConfig(executable="/usr/local/bin/git"),
    )

    orchestrator = Orchestrator.from_config(config, root=tmp_path)

    assert isinstance(orchestrator.compiler, BabelCompiler)
    assert orchestrator.compiler.command == ("babel", "--presets", "@babel/preset-env")
    assert orchestrator.committer.git == "/usr/local/bin/git"


@requires_git
def test_end_to_end_with_real_git(tmp_path: Path, isolated_git_env: Path, mit_answers: AnswerRecord) -> None:
    out = tmp_path / "out"
    out.mkdir()
    orchestrator = Orchestrator(collect_answers=lambda: mit_answers, root=out)

    result = orchestrator.run(_license_file(tmp_path, "MIT License\n..."))

    package = out / "MIT"

    def git(*args: str) -> str:
        return subprocess.run(
            ["git", *args], cwd=package, check=True, capture_output=True, text=True
        ).stdout.strip()

    assert git("rev-list", "--count", "HEAD") == "1"
    assert git("log", "-1", "--format=%B") == "Initial commit (by @license-project/generator)"
    assert git("log", "-1", "--format=%an <%ae>") == "A <a@x.com>"
    assert git("remote", "get-url", "origin") == "git@github.com:license-project/MIT.git"
    assert git("status", "--porcelain") == ""
    assert result.repository.commit == git("rev-parse", "HEAD")
    assert (package / "LICENSE").read_text(encoding="utf-8").startswith("Creative Commons Legal Code")
