"""API middleware."""

from cotacao.api.middleware.error_handler import ErrorHandlerMiddleware
from cotacao.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
