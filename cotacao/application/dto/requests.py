"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from typing import Any

from pydantic import BaseModel, Field


class CreateListRequest(BaseModel):
    """Create a quotation list from raw product rows.

    Rows are positional (internal code, description, barcode); the caller
    excludes any header row.
    """

    name: str | None = Field(
        default=None,
        description="List name (defaults to 'Lista DD/MM/YYYY - HH:MM:SS')",
        examples=["Hortifruti semana 12"],
    )
    rows: list[list[Any]] = Field(
        ...,
        description="Raw product rows",
        examples=[[["P1", "Widget", "7891234567890"]]],
    )


class ReuseListRequest(BaseModel):
    """Create a fresh open list from a previous list's products."""

    name: str | None = Field(default=None, description="Name of the new list")


class IssueLinkRequest(BaseModel):
    """Issue a response link for one supplier."""

    supplier_name: str = Field(
        ...,
        min_length=1,
        description="Supplier (company) that will answer through the link",
        examples=["Distribuidora Alfa"],
    )


class SubmitResponseRequest(BaseModel):
    """Supplier price entries keyed by product internal code."""

    prices: dict[str, str | None] = Field(
        ...,
        description="Raw price text per internal code; blank means no offer",
        examples=[{"P1": "12,50", "P2": ""}],
    )
