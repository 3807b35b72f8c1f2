"""
Supplier response submission.

Validates a supplier's price entries against the link and list states
and produces the merged list. Storage applies the same merge atomically
(see IQuotationStore.record_submission); this module is the pure rule.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from cotacao.config import get_logger
from cotacao.core.entities.quotation import (
    LinkStatus,
    QuotationList,
    ResponseLink,
    utcnow,
)
from cotacao.core.exceptions import (
    EmptyResponseError,
    LinkAlreadyRespondedError,
    ListFinalizedError,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    """Updated list and consumed link produced by a submission."""

    quotation_list: QuotationList
    link: ResponseLink


def clean_entries(
    quotation_list: QuotationList,
    entries: Mapping[str, str | None],
) -> dict[str, str]:
    """Keep entries for known products only, in product order."""
    known = set(quotation_list.product_codes)
    dropped = [code for code in entries if code not in known]
    if dropped:
        logger.debug(
            "submission_unknown_codes_dropped",
            list_id=quotation_list.id,
            codes=dropped,
        )
    return {
        code: entries[code] or ""
        for code in quotation_list.product_codes
        if code in entries
    }


def validate_submission(
    link: ResponseLink,
    quotation_list: QuotationList,
    entries: Mapping[str, str | None],
) -> dict[str, str]:
    """
    Check link and list state and return the entries to store.

    Raises:
        LinkAlreadyRespondedError: If the link was already used.
        ListFinalizedError: If the list is finalized.
        EmptyResponseError: If every entry is blank after trimming.
    """
    if link.status == LinkStatus.RESPONDED:
        raise LinkAlreadyRespondedError(link.id, link.supplier_name)
    if quotation_list.is_finalized:
        raise ListFinalizedError(quotation_list.id)
    if not any((text or "").strip() for text in entries.values()):
        raise EmptyResponseError(link.id)

    return clean_entries(quotation_list, entries)


def submit_response(
    link: ResponseLink,
    quotation_list: QuotationList,
    entries: Mapping[str, str | None],
    now: datetime | None = None,
) -> SubmissionResult:
    """
    Merge a supplier's entries into a copy of the list and consume the link.

    The supplier's previous entries, if any, are replaced as a whole.
    """
    cleaned = validate_submission(link, quotation_list, entries)
    timestamp = now or utcnow()

    responses = {supplier: dict(prices) for supplier, prices in quotation_list.responses.items()}
    responses[link.supplier_name] = cleaned

    updated_list = quotation_list.model_copy(
        update={"responses": responses, "updated_at": timestamp},
        deep=True,
    )
    responded_link = link.model_copy(
        update={"status": LinkStatus.RESPONDED, "updated_at": timestamp}
    )
    return SubmissionResult(quotation_list=updated_list, link=responded_link)
