from __future__ import annotations

from pathlib import Path

import pytest

from licensegen.models import AnswerRecord
from tests._fixtures.git_recorder import RecordingGitRunner


@pytest.fixture
def mit_answers() -> AnswerRecord:
    return AnswerRecord(
        is_spdx=True,
        spdx_id="MIT",
        long_name="The MIT License",
        author_name="A",
        author_email="a@x.com",
        license_accepted=True,
    )


@pytest.fixture
def blueoak_answers() -> AnswerRecord:
    return AnswerRecord(
        is_spdx=False,
        short_name="BlueOak",
        version="1.0.0",
        long_name="Blue Oak Model License",
        author_name="B",
        author_email="b@x.com",
        license_accepted=True,
    )


@pytest.fixture
def git_runner() -> RecordingGitRunner:
    """Provide a git runner double that records every invocation."""
    return RecordingGitRunner()


@pytest.fixture
def isolated_git_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point git at an empty global config so host settings cannot leak in."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(home / ".gitconfig"))
    monkeypatch.chdir(tmp_path)
    for var in (
        "GIT_AUTHOR_NAME",
        "GIT_AUTHOR_EMAIL",
        "GIT_COMMITTER_NAME",
        "GIT_COMMITTER_EMAIL",
        "GIT_DIR",
        "GIT_WORK_TREE",
    ):
        monkeypatch.delenv(var, raising=False)
    return home
