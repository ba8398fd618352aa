"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain errors
are consistently translated into API responses.
"""

from app.shared.errors.handlers import register_error_handlers

__all__ = ["register_error_handlers"]
