"""
Q&A Questions — Package Initializer
====================================

What: The Question entity of a question-and-answer module and the services
      that drive its lifecycle.

Architecture Note:

    ┌─────────────────────────────────────┐
    │   Services (lifecycle, collaborators)│  ← create/update/delete, tags, favorites
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The embedding web application owns routing, authentication and views;
    it passes the acting user's id into every service call.
"""

__version__ = "1.0.0"
