"""
Q&A Questions — Pydantic Input/Output Schemas
==============================================

What:  Pydantic models for the data a caller submits and the read model
       returned for display.
How:   Input schemas ignore unknown keys, so form fields such as `status`,
       `alias` or `user_id` can never reach the entity through them.
       Required-field checks live on the entity (Question.validate) so they
       raise the application's ValidationError with field-level messages.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Input Models — What a caller submits
# ══════════════════════════════════════════════════════════════════════════


class QuestionCreate(BaseModel):
    """Fields accepted when asking a question."""
    title: str = Field(default="", max_length=255, description="Question title")
    content: str = Field(default="", description="Question body")
    tags: str = Field(default="", description='Delimited tag names, e.g. "php, yii"')

    model_config = {"extra": "ignore"}


class QuestionUpdate(BaseModel):
    """Fields accepted when editing; None leaves the stored value unchanged."""
    title: Optional[str] = Field(default=None, max_length=255)
    content: Optional[str] = None
    tags: Optional[str] = None

    model_config = {"extra": "ignore"}


class AnswerCreate(BaseModel):
    content: str = Field(default="", description="Answer body")

    model_config = {"extra": "ignore"}


# ══════════════════════════════════════════════════════════════════════════
# Output Models — What callers render
# ══════════════════════════════════════════════════════════════════════════


class QuestionResponse(BaseModel):
    """
    Full representation of a question for display.

    tags_list, user_name and is_draft are computed by QuestionService.to_response.
    """
    id: int
    user_id: int
    user_name: str = Field(description="Author display name, or the raw user id")
    title: str
    alias: str
    content: str
    tags: str
    tags_list: List[str] = Field(default_factory=list)
    answers: int
    views: int
    votes: int
    status: int
    is_draft: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AnswerResponse(BaseModel):
    id: int
    question_id: int
    user_id: int
    content: str
    votes: int
    created_at: datetime

    model_config = {"from_attributes": True}
