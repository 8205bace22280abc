"""API層モジュール."""
from .dependencies import Dependencies
from .handlers import finance_handler, users_handler
from .request import get_body, get_query_parameter
from .response import (
    bad_request_response,
    conflict_response,
    error_response,
    internal_error_response,
    not_found_response,
    success_response,
    unauthorized_response,
)

__all__ = [
    # Dependencies
    "Dependencies",
    # Request utilities
    "get_body",
    "get_query_parameter",
    # Response utilities
    "success_response",
    "error_response",
    "not_found_response",
    "bad_request_response",
    "conflict_response",
    "internal_error_response",
    "unauthorized_response",
    # Handlers
    "finance_handler",
    "users_handler",
]
