"""Data stores.

Stores handle:
- QuestionStore: the in-memory question collection loaded at startup

No request handling in stores - that belongs in services and routes.
"""

from questions_api.stores.questions import QuestionStore

__all__ = ["QuestionStore"]
