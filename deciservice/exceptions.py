"""
Deciservice — Custom Exception Hierarchy
==========================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and the templater; caught by global handlers.

Exception Hierarchy:
    DeciserviceError (base)
    ├── NotFoundError            → 404 Not Found
    ├── TemplateError            → 500 Internal Server Error
    │   ├── TemplateLoadError    (template missing or unreadable)
    │   └── TemplateRenderError  (template failed while processing)
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class DeciserviceError(Exception):
    """
    Base exception for all Deciservice application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(DeciserviceError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/notes/{id} or an update aimed at an id that is not stored.
    HTTP:    404 Not Found

    The notes resource returns None for a missing single note; callers that
    need a 404 convert that None into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class TemplateError(DeciserviceError):
    """
    Raised when an HTML page cannot be produced.

    HTTP:    500 Internal Server Error

    Template failures are not recoverable inside a request; the handler
    lets them propagate and the global handler answers 500.
    """

    def __init__(
        self,
        message: str = "The page could not be rendered",
        template: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if template:
            ctx["template"] = template
        super().__init__(message=message, context=ctx)
        self.template = template


class TemplateLoadError(TemplateError):
    """The named template does not exist or could not be read."""

    def __init__(
        self,
        template: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=f"Cannot load template: {template}",
            template=template,
            context=context,
        )


class TemplateRenderError(TemplateError):
    """The template was loaded but failed while being processed."""

    def __init__(
        self,
        template: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=f"Cannot process template: {template}",
            template=template,
            context=context,
        )


class DatabaseError(DeciserviceError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The original
    error type goes into context and is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
