"""In-memory question store.

The store is built once at startup from the JSON payload packaged with
questions_api (data/questions.json) and is never mutated afterwards, so it
is shared by all requests without locking.

Payload shape: {"<id>": {"id": "<id>", "title": ..., "content": ..., "tags": [...] | null}}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from importlib.resources import files
import logging
from types import MappingProxyType

from pydantic import TypeAdapter, ValidationError

from questions_api.errors import InvalidQuestionId, StartupDataError
from questions_api.schemas import Question, QuestionId

logger = logging.getLogger("uvicorn.error")

PAYLOAD_PACKAGE = "questions_api"
PAYLOAD_RESOURCE = ("data", "questions.json")

_payload_adapter = TypeAdapter(dict[str, Question])


@dataclass(frozen=True, eq=False)
class QuestionStore:
    """Read-only mapping of QuestionId -> Question.

    Every key equals the `id` of the question stored under it.

    Raises:
        InvalidQuestionId: A key is empty.
        ValueError: A key differs from its question's id.
    """

    questions: Mapping[QuestionId, Question] = field(default_factory=dict)

    def __post_init__(self) -> None:
        questions: dict[QuestionId, Question] = {}
        for key, question in self.questions.items():
            question_id = QuestionId(key)
            if question_id != question.id:
                raise ValueError(f"Store key {key!r} does not match question id {question.id!r}")
            questions[question_id] = question
        object.__setattr__(self, "questions", MappingProxyType(questions))

    @classmethod
    def from_questions(cls, questions: Iterable[Question]) -> QuestionStore:
        """Build a store keyed by each question's id (later duplicates win)."""
        return cls({question.id: question for question in questions})

    @classmethod
    def from_json(cls, raw: str | bytes) -> QuestionStore:
        """Parse a JSON payload into a store.

        Raises:
            StartupDataError: Payload is not valid JSON, does not match the
                question schema, or a key differs from its question's id.
        """
        try:
            parsed = _payload_adapter.validate_json(raw)
        except ValidationError as e:
            raise StartupDataError(f"Malformed question payload: {e}") from e

        questions: dict[QuestionId, Question] = {}
        for key, question in parsed.items():
            try:
                question_id = QuestionId(key)
            except InvalidQuestionId as e:
                raise StartupDataError("Question payload contains an empty key") from e
            if question_id != question.id:
                raise StartupDataError(
                    f"Question payload key {key!r} does not match question id {question.id!r}"
                )
            questions[question_id] = question
        return cls(questions)

    @classmethod
    def load(cls) -> QuestionStore:
        """Load the store from the payload shipped inside the package.

        Raises:
            StartupDataError: Payload is missing or malformed.
        """
        resource = files(PAYLOAD_PACKAGE)
        for part in PAYLOAD_RESOURCE:
            resource = resource / part
        try:
            raw = resource.read_bytes()
        except OSError as e:
            raise StartupDataError(f"Question payload not found: {'/'.join(PAYLOAD_RESOURCE)}") from e

        store = cls.from_json(raw)
        logger.info(f"Question store loaded: {len(store)} questions")
        return store

    def all(self) -> list[Question]:
        """Return every question, in insertion order."""
        return list(self.questions.values())

    def add_question(self, question: Question) -> QuestionStore:
        """Return a new store with `question` inserted or replaced.

        The current store is left untouched.
        """
        questions = dict(self.questions)
        questions[question.id] = question
        return QuestionStore(questions)

    def __len__(self) -> int:
        return len(self.questions)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self.questions
