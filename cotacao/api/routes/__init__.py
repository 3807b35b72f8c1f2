"""API route modules."""

from cotacao.api.routes.health import router as health_router
from cotacao.api.routes.lists import router as lists_router
from cotacao.api.routes.responses import router as responses_router

__all__ = [
    "health_router",
    "lists_router",
    "responses_router",
]
