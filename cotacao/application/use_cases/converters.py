"""Entity to response DTO conversion shared by the use cases."""

from cotacao.application.dto.responses import (
    ProductResponse,
    QuotationListResponse,
    QuotationListSummaryResponse,
    ResponseLinkResponse,
)
from cotacao.core.entities import QuotationList, ResponseLink


def to_summary_response(quotation_list: QuotationList) -> QuotationListSummaryResponse:
    return QuotationListSummaryResponse(
        id=quotation_list.id,
        name=quotation_list.name,
        status=quotation_list.status.value,
        product_count=len(quotation_list.products),
        response_count=len(quotation_list.responses),
        suppliers=quotation_list.supplier_names,
        created_at=quotation_list.created_at,
        updated_at=quotation_list.updated_at,
    )


def to_list_response(quotation_list: QuotationList) -> QuotationListResponse:
    return QuotationListResponse(
        **to_summary_response(quotation_list).model_dump(),
        version=quotation_list.version,
        products=[
            ProductResponse(
                internal_code=p.internal_code,
                description=p.description,
                barcode=p.barcode,
            )
            for p in quotation_list.products
        ],
        responses={s: dict(prices) for s, prices in quotation_list.responses.items()},
    )


def to_link_response(link: ResponseLink, base_origin: str) -> ResponseLinkResponse:
    return ResponseLinkResponse(
        id=link.id,
        list_id=link.list_id,
        supplier_name=link.supplier_name,
        token=link.token,
        url=link.url(base_origin),
        status=link.status.value,
        created_at=link.created_at,
    )
