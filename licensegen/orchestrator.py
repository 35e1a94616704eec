"""Pipeline orchestration for generating one license package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, TypeVar

from .config import LicenseGenConfig
from .constants import ARTIFACT_FILENAMES, REMOTE_NAME, remote_url
from .git.committer import RepositoryCommitter
from .git.user import read_git_user
from .identity import build_manifest, resolve_identity
from .interview import Interview, build_questions
from .logging import get_logger
from .models import (
    AnswerRecord,
    ArtifactSet,
    GeneratedModule,
    PackageIdentity,
    PackageManifest,
    RepositoryState,
)
from .synth.builder import ModuleSynthesizer
from .synth.compiler import CommonJSCompiler, ModuleCompiler, create_compiler
from .waiver import load_waiver_text
from .writer import ArtifactWriter

T = TypeVar("T")


class PipelineState(str, Enum):
    READ_INPUTS = "read_inputs"
    COLLECT_ANSWERS = "collect_answers"
    RESOLVE_IDENTITY = "resolve_identity"
    SYNTHESIZE = "synthesize"
    COMPILE = "compile"
    WRITE = "write"
    COMMIT = "commit"
    ATTACH_REMOTE = "attach_remote"
    DONE = "done"
    FAILED = "failed"


class PipelineError(RuntimeError):
    """A stage failed; ``state`` names it and ``__cause__`` holds the original error."""

    def __init__(self, state: PipelineState, cause: BaseException) -> None:
        self.state = state
        self.cause = cause
        super().__init__(f"{state.value.replace('_', ' ')} failed: {cause}")


@dataclass
class GenerationResult:
    """Everything one successful run produced."""

    identity: PackageIdentity
    manifest: PackageManifest
    module: GeneratedModule
    artifacts: ArtifactSet
    repository: RepositoryState


@dataclass
class _Inputs:
    license_text: str
    waiver_text: str


def read_license_text(path: Path) -> str:
    """Read the license file as UTF-8 without translating line endings."""
    return path.read_bytes().decode("utf-8")


def _default_collect_answers(git: str) -> Callable[[], AnswerRecord]:
    def collect() -> AnswerRecord:
        return Interview(build_questions(read_git_user(git=git))).run()

    return collect


class Orchestrator:
    """Runs the generation stages strictly in order and stops at the first failure."""

    def __init__(
        self,
        collect_answers: Callable[[], AnswerRecord] | None = None,
        synthesizer: ModuleSynthesizer | None = None,
        compiler: ModuleCompiler | None = None,
        writer: ArtifactWriter | None = None,
        committer: RepositoryCommitter | None = None,
        waiver_text: Callable[[], str] | None = None,
        root: Path | None = None,
    ) -> None:
        self.collect_answers = collect_answers or _default_collect_answers("git")
        self.synthesizer = synthesizer or ModuleSynthesizer()
        self.compiler = compiler or CommonJSCompiler()
        self.writer = writer or ArtifactWriter()
        self.committer = committer or RepositoryCommitter()
        self._waiver_text = waiver_text or load_waiver_text
        self._root = root
        self.state: Optional[PipelineState] = None
        self.logger = get_logger("orchestrator")

    @classmethod
    def from_config(cls, config: LicenseGenConfig, **overrides: object) -> "Orchestrator":
        """Build an orchestrator whose collaborators follow ``config``."""
        git = config.git.executable
        defaults: dict[str, object] = {
            "collect_answers": _default_collect_answers(git),
            "compiler": create_compiler(config.compiler.mode, config.compiler.command),
            "committer": RepositoryCommitter(git=git),
        }
        defaults.update(overrides)
        return cls(**defaults)  # type: ignore[arg-type]

    def run(self, license_path: Path | str) -> GenerationResult:
        """Generate the package for the license at ``license_path``.

        Raises :class:`PipelineError` on the first failing stage. Files and
        repository objects created before the failure are left in place.
        """
        root = (self._root or Path.cwd()).resolve()
        license_file = Path(license_path)
        self.logger.info("Generating license package from %s", license_file)

        inputs = self._stage(
            PipelineState.READ_INPUTS,
            lambda: _Inputs(
                license_text=read_license_text(license_file),
                waiver_text=self._waiver_text(),
            ),
        )
        answers = self._stage(PipelineState.COLLECT_ANSWERS, self._collect_answers)
        identity, manifest = self._stage(
            PipelineState.RESOLVE_IDENTITY, lambda: self._resolve_identity(answers)
        )
        source_form = self._stage(
            PipelineState.SYNTHESIZE,
            lambda: self.synthesizer.render(identity.name, inputs.license_text),
        )
        compiled_form = self._stage(PipelineState.COMPILE, lambda: self.compiler.compile(source_form))
        module = GeneratedModule(source_form=source_form, compiled_form=compiled_form)

        artifacts = self._stage(
            PipelineState.WRITE,
            lambda: self.writer.write(root, identity, manifest, module, inputs.waiver_text),
        )
        repository = self._stage(
            PipelineState.COMMIT,
            lambda: self.committer.commit(
                artifacts.root,
                [artifacts.files[filename] for filename in ARTIFACT_FILENAMES],
                author_name=answers.author_name,
                author_email=answers.author_email,
            ),
        )
        url = remote_url(identity.name)
        self._stage(
            PipelineState.ATTACH_REMOTE,
            lambda: self.committer.attach_remote(artifacts.root, url, name=REMOTE_NAME),
        )
        repository = RepositoryState(
            path=repository.path,
            commit=repository.commit,
            tree=repository.tree,
            remote_name=REMOTE_NAME,
            remote_url=url,
        )

        self._transition(PipelineState.DONE)
        self.logger.info(
            "Created %s in %s (commit %s)", identity.full_name, artifacts.root, repository.commit[:12]
        )
        return GenerationResult(
            identity=identity,
            manifest=manifest,
            module=module,
            artifacts=artifacts,
            repository=repository,
        )

    # ------------------------------------------------------------------
    # Internals

    @staticmethod
    def _resolve_identity(answers: AnswerRecord) -> tuple[PackageIdentity, PackageManifest]:
        identity = resolve_identity(answers)
        return identity, build_manifest(identity, answers)

    def _collect_answers(self) -> AnswerRecord:
        answers = self.collect_answers()
        answers.validate()
        return answers

    def _stage(self, state: PipelineState, action: Callable[[], T]) -> T:
        self._transition(state)
        try:
            return action()
        except Exception as exc:
            self.logger.debug("Stage raised %s: %s", type(exc).__name__, exc, extra={"stage": state.value})
            self._transition(PipelineState.FAILED)
            raise PipelineError(state, exc) from exc

    def _transition(self, state: PipelineState) -> None:
        previous = self.state.value if self.state else "start"
        self.state = state
        self.logger.debug("Entered from %s", previous, extra={"stage": state.value})


__all__ = [
    "GenerationResult",
    "Orchestrator",
    "PipelineError",
    "PipelineState",
    "read_license_text",
]
