"""API routes."""

from fastapi import APIRouter

from questions_api.routes import questions

api_router = APIRouter()

# Question endpoints
api_router.include_router(questions.router, tags=["questions"])
