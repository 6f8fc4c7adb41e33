"""Pydantic schemas for API request/response validation."""

from questions_api.schemas.question import Question, QuestionId, QuestionQuery

__all__ = [
    "Question",
    "QuestionId",
    "QuestionQuery",
]
