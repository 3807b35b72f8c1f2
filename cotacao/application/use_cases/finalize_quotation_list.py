"""Finalize Quotation List Use Case."""

from cotacao.application.dto.responses import QuotationListResponse
from cotacao.application.use_cases.converters import to_list_response
from cotacao.config import get_logger
from cotacao.core.entities import QuotationList
from cotacao.core.interfaces import IQuotationStore
from cotacao.core.services import finalize_list

logger = get_logger(__name__)


class FinalizeQuotationListUseCase:
    """Close a list to further links and responses."""

    def __init__(self, store: IQuotationStore | None = None):
        self._store = store

    async def _get_store(self) -> IQuotationStore:
        if self._store is None:
            from cotacao.infrastructure.storage.sqlite import get_quotation_store

            self._store = await get_quotation_store()
        return self._store

    async def execute(self, list_id: str) -> QuotationList:
        """
        Finalize the list.

        The save is version-checked: a submission committed after the
        load makes it fail with ConcurrentModificationError instead of
        silently dropping that response.
        """
        store = await self._get_store()

        quotation_list = await store.get_list(list_id)
        finalized = finalize_list(quotation_list)
        saved = await store.save_list(finalized)

        logger.info(
            "finalize_list_complete",
            list_id=saved.id,
            suppliers=saved.supplier_names,
        )
        return saved

    def to_response(self, quotation_list: QuotationList) -> QuotationListResponse:
        return to_list_response(quotation_list)
