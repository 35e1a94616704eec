"""Interactive interview collecting the answers for a new license package."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, TextIO, Union

from .git.user import GitUser
from .models import AnswerRecord, name_part_problem
from .spdx import is_spdx_id, suggest_spdx_id

Answers = Dict[str, Any]
Validator = Callable[[Any], Union[bool, str]]

_YES = {"y", "yes", "true"}
_NO = {"n", "no", "false"}

REQUIRED_MESSAGE = "This field is required."
WAIVER_MESSAGE = (
    "You must agree to license this package under the CC0 license to participate "
    "in the License Project."
)


class InterviewAborted(RuntimeError):
    """Raised when input ends before every question has been answered."""


@dataclass(frozen=True)
class Question:
    key: str
    message: str
    kind: str = "input"
    default: Optional[Any] = None
    when: Optional[Callable[[Answers], bool]] = None
    validate: Optional[Validator] = None


def validate_spdx_id(answer: str) -> Union[bool, str]:
    if is_spdx_id(answer):
        return True
    suggestion = suggest_spdx_id(answer)
    if suggestion:
        return f"That is not a valid SPDX identifier. Did you mean {suggestion}?"
    return "That is not a valid SPDX identifier."


def _name_part(label: str) -> Validator:
    def validate(answer: str) -> Union[bool, str]:
        return name_part_problem(answer, label) or True

    return validate


def _required(answer: str) -> Union[bool, str]:
    return answer != "" or REQUIRED_MESSAGE


def _short_name(answer: str) -> Union[bool, str]:
    if not answer:
        return REQUIRED_MESSAGE
    return _name_part("name")(answer)


def _accepted(answer: bool) -> Union[bool, str]:
    return answer or WAIVER_MESSAGE


def build_questions(git_user: GitUser) -> Sequence[Question]:
    """Return the interview questions in the order they are asked."""
    return (
        Question(
            key="spdx",
            message="Is this license listed by SPDX?",
            kind="confirm",
            default=True,
        ),
        Question(
            key="spdx_id",
            message="What is this license's SPDX identifier?",
            when=lambda answers: answers["spdx"],
            validate=validate_spdx_id,
        ),
        Question(
            key="short_name",
            message="What is a short version of this license's name? (e.g. GPL, BlueOak, CC-BY)",
            when=lambda answers: not answers["spdx"],
            validate=_short_name,
        ),
        Question(
            key="long_name",
            message="What is a long version of this license's name? (Usable as a package description)",
            validate=_required,
        ),
        Question(
            key="version",
            message=(
                "What is this license's version? "
                "(e.g. 2.0 for GPL-2.0, 1.0.0 for BlueOak-1.0.0, empty for ISC)"
            ),
            when=lambda answers: not answers["spdx"],
            validate=_name_part("version"),
        ),
        Question(
            key="author_name",
            message="What is your name?",
            default=git_user.name,
            validate=_required,
        ),
        Question(
            key="author_email",
            message="What is your email address?",
            default=git_user.email,
            validate=_required,
        ),
        Question(
            key="license",
            message="Do you agree to license this package under the CC0 license?",
            kind="confirm",
            default=True,
            validate=_accepted,
        ),
    )


class Interview:
    """Asks each applicable question until it receives a valid answer."""

    def __init__(
        self,
        questions: Sequence[Question],
        *,
        ask: Callable[[str], str] | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.questions = questions
        self._ask = ask or input
        self._err = err or sys.stderr

    def run(self) -> AnswerRecord:
        answers: Answers = {}
        for question in self.questions:
            if question.when is not None and not question.when(answers):
                continue
            answers[question.key] = self._ask_until_valid(question)
        return self._to_record(answers)

    def _ask_until_valid(self, question: Question) -> Any:
        prompt = _format_prompt(question)
        while True:
            try:
                raw = self._ask(prompt)
            except EOFError as exc:
                raise InterviewAborted(f"Input ended while asking: {question.message}") from exc
            raw = raw.strip()

            if question.kind == "confirm":
                value = _parse_confirm(raw, question.default)
                if value is None:
                    print("Please answer yes or no.", file=self._err)
                    continue
            else:
                value = raw if raw or question.default is None else question.default

            verdict = question.validate(value) if question.validate else True
            if verdict is True:
                return value
            print(verdict if isinstance(verdict, str) else REQUIRED_MESSAGE, file=self._err)

    @staticmethod
    def _to_record(answers: Answers) -> AnswerRecord:
        record = AnswerRecord(
            is_spdx=answers["spdx"],
            spdx_id=answers.get("spdx_id"),
            short_name=answers.get("short_name"),
            long_name=answers["long_name"],
            version=answers.get("version"),
            author_name=answers["author_name"],
            author_email=answers["author_email"],
            license_accepted=answers["license"],
        )
        record.validate()
        return record


def _format_prompt(question: Question) -> str:
    if question.kind == "confirm":
        hint = " (Y/n)" if question.default else " (y/N)"
    elif question.default:
        hint = f" ({question.default})"
    else:
        hint = ""
    return f"? {question.message}{hint} "


def _parse_confirm(raw: str, default: Optional[bool]) -> Optional[bool]:
    lowered = raw.lower()
    if not lowered:
        return default
    if lowered in _YES:
        return True
    if lowered in _NO:
        return False
    return None


__all__ = [
    "Interview",
    "InterviewAborted",
    "Question",
    "build_questions",
    "validate_spdx_id",
]
