"""Question endpoints.

GET /questions - Returns every question in the store.

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends, Query

from questions_api.dependencies import get_question_store
from questions_api.schemas import Question, QuestionQuery
from questions_api.services.questions import list_questions
from questions_api.stores import QuestionStore

router = APIRouter()


@router.get("/questions", response_model=list[Question])
async def get_questions(
    start: str | None = Query(
        default=None,
        description="Offset into the question list (accepted, not applied)",
        examples=["0", "10"],
    ),
    store: QuestionStore = Depends(get_question_store),
) -> list[Question]:
    """Get all questions.

    Returns:
        JSON array of every question. Always 200.
    """
    return list_questions(store, QuestionQuery(start=start))
