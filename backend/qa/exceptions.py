"""
Q&A Questions — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the question lifecycle.
How:   Each exception class carries a message and optional context dict.
       Callers (controllers, jobs, tests) catch these and decide how to
       present them.
Who:   Raised by models and services.

Exception Hierarchy:
    QAError (base)
    ├── ValidationError        → required field missing / invalid input
    ├── NotFoundError          → question or answer does not exist
    └── PermissionDeniedError  → actor is not the author of the record

Storage failures are not part of this hierarchy: SQLAlchemy errors
propagate unmodified to the caller (see qa.database.session_scope).
"""

from typing import Any, Dict, Optional


class QAError(Exception):
    """
    Base exception for all Q&A application errors.

    Attributes:
        message:  User-facing error description
        context:  Additional debug info (logged, not shown to users)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(QAError):
    """
    Raised when input fails validation; nothing is written.

    Carries field-level messages so a form can show each error next to
    its input:

        ValidationError(errors={"title": "Title cannot be blank."})

    Attributes:
        errors: Mapping of field name to message
        field:  The first failing field (convenience for single-field errors)
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        errors: Optional[Dict[str, str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        errors = dict(errors or {})
        if field and field not in errors:
            errors[field] = message
        ctx = context or {}
        if errors:
            ctx["errors"] = errors
        super().__init__(message=message, context=ctx)
        self.errors = errors
        self.field = field or next(iter(errors), None)


class NotFoundError(QAError):
    """Raised when a requested record does not exist."""

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class PermissionDeniedError(QAError):
    """
    Raised when the acting user may not modify a record.

    When:    Updating or deleting a question the actor did not author.
    """

    def __init__(
        self,
        actor_id: Optional[int] = None,
        resource: str = "question",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx.update({"actor_id": actor_id, "resource": resource, "resource_id": resource_id})
        super().__init__(
            message=f"You are not allowed to modify this {resource}",
            context=ctx,
        )
        self.actor_id = actor_id
