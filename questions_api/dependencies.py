"""FastAPI dependencies shared by routes."""

from fastapi import Request

from questions_api.stores import QuestionStore


def get_question_store(request: Request) -> QuestionStore:
    """Return the question store attached to the application at startup."""
    return request.app.state.question_store
