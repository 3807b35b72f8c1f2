"""
Open Response Form Use Case.

Resolves a supplier's token to its link and list and builds the blank
price form shown to the supplier.
"""

from dataclasses import dataclass, field

from cotacao.application.dto.responses import PriceEntryResponse, ResponseFormResponse
from cotacao.config import get_logger
from cotacao.core.entities import PriceEntry, QuotationList, ResponseLink
from cotacao.core.exceptions import (
    LinkAlreadyRespondedError,
    LinkNotFoundError,
    ListFinalizedError,
)
from cotacao.core.interfaces import IQuotationStore

logger = get_logger(__name__)


async def resolve_link(store: IQuotationStore, token: str) -> ResponseLink:
    """
    Find the link for a token.

    Raises:
        LinkNotFoundError: If no link has this exact token.
    """
    link = await store.get_link_by_token(token)
    if link is None:
        logger.warning("response_link_not_found")
        raise LinkNotFoundError(token)
    return link


@dataclass
class ResponseForm:
    """A resolved link, its list, and one blank entry per product."""

    link: ResponseLink
    quotation_list: QuotationList
    entries: list[PriceEntry] = field(default_factory=list)


class OpenResponseFormUseCase:
    """Resolve a token into the supplier response form."""

    def __init__(self, store: IQuotationStore | None = None):
        self._store = store

    async def _get_store(self) -> IQuotationStore:
        if self._store is None:
            from cotacao.infrastructure.storage.sqlite import get_quotation_store

            self._store = await get_quotation_store()
        return self._store

    async def resolve(self, token: str) -> ResponseLink:
        return await resolve_link(await self._get_store(), token)

    async def execute(self, token: str) -> ResponseForm:
        """
        Build the form for a pending link of an open list.

        Raises:
            LinkNotFoundError: Unknown token.
            LinkAlreadyRespondedError: The link was already used.
            ListFinalizedError: The list no longer accepts responses.
        """
        store = await self._get_store()

        link = await resolve_link(store, token)
        if link.is_responded:
            raise LinkAlreadyRespondedError(link.id, link.supplier_name)

        quotation_list = await store.get_list(link.list_id)
        if quotation_list.is_finalized:
            raise ListFinalizedError(quotation_list.id)

        logger.info(
            "response_form_opened",
            list_id=quotation_list.id,
            link_id=link.id,
            supplier=link.supplier_name,
        )
        return ResponseForm(
            link=link,
            quotation_list=quotation_list,
            entries=[PriceEntry(internal_code=code) for code in quotation_list.product_codes],
        )

    def to_response(self, form: ResponseForm) -> ResponseFormResponse:
        products = {p.internal_code: p for p in form.quotation_list.products}
        return ResponseFormResponse(
            list_id=form.quotation_list.id,
            list_name=form.quotation_list.name,
            supplier_name=form.link.supplier_name,
            entries=[
                PriceEntryResponse(
                    internal_code=entry.internal_code,
                    description=products[entry.internal_code].description,
                    barcode=products[entry.internal_code].barcode,
                    raw_text=entry.raw_text,
                )
                for entry in form.entries
            ],
        )
