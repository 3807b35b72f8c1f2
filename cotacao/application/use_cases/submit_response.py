"""
Submit Response Use Case.

Stores a supplier's prices through its single-use link.
"""

from collections.abc import Mapping

from cotacao.application.dto.responses import SubmitResponseResponse
from cotacao.application.use_cases.open_response_form import resolve_link
from cotacao.config import get_logger
from cotacao.core.interfaces import IQuotationStore
from cotacao.core.services import SubmissionResult, validate_submission

logger = get_logger(__name__)


class SubmitResponseUseCase:
    """
    Record a supplier submission.

    Flow:
    1. Resolve the token to its link
    2. Validate link state, list state and non-blank entries
    3. Merge the entries and consume the link in one storage transaction

    Step 2 gives early, precise errors; step 3 re-checks both states
    against the stored rows, so concurrent submissions stay consistent.
    """

    def __init__(self, store: IQuotationStore | None = None):
        self._store = store

    async def _get_store(self) -> IQuotationStore:
        if self._store is None:
            from cotacao.infrastructure.storage.sqlite import get_quotation_store

            self._store = await get_quotation_store()
        return self._store

    async def execute(
        self,
        token: str,
        prices: Mapping[str, str | None],
    ) -> SubmissionResult:
        store = await self._get_store()

        link = await resolve_link(store, token)
        logger.info(
            "submit_response_started",
            list_id=link.list_id,
            link_id=link.id,
            supplier=link.supplier_name,
        )

        quotation_list = await store.get_list(link.list_id)
        entries = validate_submission(link, quotation_list, prices)

        updated_list, responded_link = await store.record_submission(link, entries)

        logger.info(
            "submit_response_complete",
            list_id=updated_list.id,
            supplier=responded_link.supplier_name,
            prices=sum(1 for text in entries.values() if text.strip()),
        )
        return SubmissionResult(quotation_list=updated_list, link=responded_link)

    def to_response(self, result: SubmissionResult) -> SubmitResponseResponse:
        entries = result.quotation_list.responses.get(result.link.supplier_name, {})
        return SubmitResponseResponse(
            list_id=result.quotation_list.id,
            supplier_name=result.link.supplier_name,
            link_status=result.link.status.value,
            prices_received=sum(1 for text in entries.values() if text.strip()),
        )
