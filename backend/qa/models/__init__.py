# Importing the package registers every table on Base.metadata
from qa.models.user import User
from qa.models.tag import Tag
from qa.models.question import Question, QuestionStatus
from qa.models.answer import Answer
from qa.models.favorite import Favorite
from qa.models.vote import Vote

__all__ = ["User", "Tag", "Question", "QuestionStatus", "Answer", "Favorite", "Vote"]
