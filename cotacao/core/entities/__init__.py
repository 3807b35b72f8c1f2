"""Core domain entities."""

from cotacao.core.entities.product import Product
from cotacao.core.entities.quotation import (
    LinkStatus,
    ListStatus,
    PriceEntry,
    QuotationList,
    ResponseLink,
)

__all__ = [
    # Catalog entities
    "Product",
    # Quotation entities
    "QuotationList",
    "ListStatus",
    "ResponseLink",
    "LinkStatus",
    "PriceEntry",
]
