"""
Quotation list lifecycle.

A list is created open, may be finalized exactly once, and is never
reopened: reuse produces a brand new list with the same products.
All functions return new instances and never mutate their input.
"""

from collections.abc import Sequence
from datetime import datetime

from cotacao.config import get_logger
from cotacao.core.entities.product import Product
from cotacao.core.entities.quotation import ListStatus, QuotationList, utcnow
from cotacao.core.exceptions import AlreadyFinalizedError, EmptyCatalogError

logger = get_logger(__name__)


def default_list_name(now: datetime | None = None) -> str:
    """Name given to imports without one, e.g. ``Lista 05/03/2025 - 14:30:00``."""
    now = now or datetime.now()
    return f"Lista {now:%d/%m/%Y} - {now:%H:%M:%S}"


def create_list(
    name: str | None,
    products: Sequence[Product],
    now: datetime | None = None,
) -> QuotationList:
    """
    Create an open list with no responses.

    Raises:
        EmptyCatalogError: If ``products`` is empty.
    """
    if not products:
        raise EmptyCatalogError()

    timestamp = now or utcnow()
    quotation_list = QuotationList(
        name=(name or "").strip() or default_list_name(),
        products=list(products),
        responses={},
        status=ListStatus.OPEN,
        created_at=timestamp,
        updated_at=timestamp,
    )
    logger.info(
        "quotation_list_created",
        list_id=quotation_list.id,
        products=len(quotation_list.products),
    )
    return quotation_list


def finalize_list(
    quotation_list: QuotationList,
    now: datetime | None = None,
) -> QuotationList:
    """
    Close a list to further responses.

    Calling it on a finalized list is an error rather than a no-op: it
    means the caller lost track of the list state.

    Raises:
        AlreadyFinalizedError: If the list is already finalized.
    """
    if quotation_list.is_finalized:
        raise AlreadyFinalizedError(quotation_list.id)

    finalized = quotation_list.model_copy(
        update={"status": ListStatus.FINALIZED, "updated_at": now or utcnow()},
        deep=True,
    )
    logger.info(
        "quotation_list_finalized",
        list_id=finalized.id,
        suppliers=len(finalized.responses),
    )
    return finalized


def reopen_as_template(
    quotation_list: QuotationList,
    name: str | None = None,
    now: datetime | None = None,
) -> QuotationList:
    """New open list reusing the products of ``quotation_list``."""
    reused = create_list(name or quotation_list.name, quotation_list.products, now=now)
    logger.info(
        "quotation_list_reused",
        source_list_id=quotation_list.id,
        list_id=reused.id,
    )
    return reused
