"""
Quotation domain entities.

Contains the quotation list aggregate, the per-supplier response link
and the transient price entry filled in by a supplier.
"""

import uuid
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator

from cotacao.core.entities.product import Product


def utcnow() -> datetime:
    return datetime.now(UTC)


def new_id() -> str:
    return str(uuid.uuid4())


class ListStatus(str, Enum):
    """Lifecycle status of a quotation list."""

    OPEN = "open"
    FINALIZED = "finalized"


class LinkStatus(str, Enum):
    """Status of a supplier response link."""

    PENDING = "pending"
    RESPONDED = "responded"


class QuotationList(BaseModel):
    """
    Aggregate root: a named product list plus every supplier response.

    ``responses`` maps supplier name -> internal code -> raw price text as
    typed by the supplier. ``products`` order defines row order everywhere.
    ``version`` is bumped by storage on every persisted mutation.
    """

    id: str = Field(default_factory=new_id)
    name: str
    products: list[Product] = Field(default_factory=list)
    responses: dict[str, dict[str, str]] = Field(default_factory=dict)
    status: ListStatus = ListStatus.OPEN
    version: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def check_unique_codes(self) -> "QuotationList":
        """Reject duplicated internal codes."""
        seen: set[str] = set()
        for product in self.products:
            if product.internal_code in seen:
                raise ValueError(f"Duplicate internal code: {product.internal_code}")
            seen.add(product.internal_code)
        return self

    @property
    def is_finalized(self) -> bool:
        return self.status == ListStatus.FINALIZED

    @property
    def product_codes(self) -> list[str]:
        return [p.internal_code for p in self.products]

    @property
    def supplier_names(self) -> list[str]:
        """Responding suppliers in response order."""
        return list(self.responses.keys())

    def get_product(self, internal_code: str) -> Product | None:
        for product in self.products:
            if product.internal_code == internal_code:
                return product
        return None

    def price_text(self, supplier_name: str, internal_code: str) -> str | None:
        """Raw price text a supplier entered for a product, if any."""
        return self.responses.get(supplier_name, {}).get(internal_code)


class ResponseLink(BaseModel):
    """Single-use capability binding one supplier to one quotation list."""

    id: str = Field(default_factory=new_id)
    list_id: str
    supplier_name: str
    token: str
    status: LinkStatus = LinkStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_responded(self) -> bool:
        return self.status == LinkStatus.RESPONDED

    def url(self, base_origin: str) -> str:
        """Public URL of the link: ``{base_origin}/cotacao/{token}``."""
        return f"{base_origin.rstrip('/')}/cotacao/{self.token}"


class PriceEntry(BaseModel):
    """One price cell filled in by a supplier (not persisted on its own)."""

    internal_code: str
    raw_text: str = ""

    @property
    def is_blank(self) -> bool:
        return not self.raw_text.strip()
