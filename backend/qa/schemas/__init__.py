from qa.schemas.question import (
    AnswerCreate,
    AnswerResponse,
    QuestionCreate,
    QuestionResponse,
    QuestionUpdate,
)

__all__ = [
    "AnswerCreate",
    "AnswerResponse",
    "QuestionCreate",
    "QuestionResponse",
    "QuestionUpdate",
]
