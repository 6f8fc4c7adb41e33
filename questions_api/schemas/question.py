"""Schemas for questions and the /questions query string."""

from typing import Any

from pydantic import BaseModel, Field, GetCoreSchemaHandler
from pydantic_core import core_schema

from questions_api.errors import InvalidQuestionId


class QuestionId(str):
    """Non-empty question identifier.

    Compares and hashes like the underlying string, so it can key a dict.
    """

    def __new__(cls, value: str) -> "QuestionId":
        if not value:
            raise InvalidQuestionId("No id provided")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"QuestionId({str.__repr__(self)})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.to_string_ser_schema(),
        )


class Question(BaseModel):
    """A single question record."""

    id: QuestionId
    title: str
    content: str
    tags: list[str] | None = None

    model_config = {"frozen": True}


class QuestionQuery(BaseModel):
    """Recognized query parameters for GET /questions.

    `start` is accepted and logged but not applied to the result set.
    """

    start: str | None = Field(default=None, description="Requested offset (not applied)")
