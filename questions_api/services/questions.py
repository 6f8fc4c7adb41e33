"""Question listing service.

`start` is recognized in the query string but not applied: every question is
returned regardless of its value. Unknown parameters are ignored upstream.
"""

import logging

from questions_api.schemas import Question, QuestionQuery
from questions_api.stores import QuestionStore

logger = logging.getLogger("uvicorn.error")


def list_questions(store: QuestionStore, query: QuestionQuery) -> list[Question]:
    """List all questions in the store.

    Args:
        store: Shared read-only question store.
        query: Parsed query parameters.

    Returns:
        Every question, in store order.
    """
    if query.start is not None:
        logger.info(f"Question listing requested with start={query.start!r} (not applied)")
    return store.all()
