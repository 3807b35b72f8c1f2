"""Response link issuance."""

import uuid

from cotacao.config import get_logger
from cotacao.core.entities.quotation import LinkStatus, QuotationList, ResponseLink
from cotacao.core.exceptions import ListFinalizedError, ValidationError

logger = get_logger(__name__)


def generate_token() -> str:
    """Opaque random token (UUID4, 122 random bits)."""
    return str(uuid.uuid4())


def issue_link(quotation_list: QuotationList, supplier_name: str) -> ResponseLink:
    """
    Mint a pending link for one supplier on an open list.

    Raises:
        ListFinalizedError: If the list no longer accepts responses.
        ValidationError: If the supplier name is blank.
    """
    if quotation_list.is_finalized:
        raise ListFinalizedError(quotation_list.id)

    supplier = (supplier_name or "").strip()
    if not supplier:
        raise ValidationError("supplier_name", "Supplier name is required", supplier_name)

    link = ResponseLink(
        list_id=quotation_list.id,
        supplier_name=supplier,
        token=generate_token(),
        status=LinkStatus.PENDING,
    )
    logger.info(
        "response_link_issued",
        list_id=quotation_list.id,
        link_id=link.id,
        supplier=supplier,
    )
    return link
