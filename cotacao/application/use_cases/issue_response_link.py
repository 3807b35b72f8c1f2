"""Issue Response Link Use Case."""

from cotacao.application.dto.responses import ResponseLinkResponse
from cotacao.application.use_cases.converters import to_link_response
from cotacao.config import get_logger, get_settings
from cotacao.core.entities import ResponseLink
from cotacao.core.interfaces import IQuotationStore
from cotacao.core.services import issue_link

logger = get_logger(__name__)


class IssueResponseLinkUseCase:
    """Create a single-use response link for one supplier of an open list."""

    def __init__(
        self,
        store: IQuotationStore | None = None,
        base_origin: str | None = None,
    ):
        self._store = store
        self._base_origin = base_origin

    async def _get_store(self) -> IQuotationStore:
        if self._store is None:
            from cotacao.infrastructure.storage.sqlite import get_quotation_store

            self._store = await get_quotation_store()
        return self._store

    @property
    def base_origin(self) -> str:
        if self._base_origin is None:
            self._base_origin = get_settings().api.public_base_url
        return self._base_origin

    async def execute(self, list_id: str, supplier_name: str) -> ResponseLink:
        """
        Issue and persist the link.

        Raises:
            QuotationListNotFoundError: If the list does not exist.
            ListFinalizedError: If the list is finalized.
            ValidationError: If the supplier name is blank.
        """
        store = await self._get_store()

        quotation_list = await store.get_list(list_id)
        link = await store.save_link(issue_link(quotation_list, supplier_name))

        logger.info(
            "issue_link_complete",
            list_id=link.list_id,
            link_id=link.id,
            supplier=link.supplier_name,
        )
        return link

    def url_for(self, link: ResponseLink) -> str:
        return link.url(self.base_origin)

    def to_response(self, link: ResponseLink) -> ResponseLinkResponse:
        return to_link_response(link, self.base_origin)
