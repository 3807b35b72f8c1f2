"""Data transfer objects for API contracts."""

from cotacao.application.dto.requests import (
    CreateListRequest,
    IssueLinkRequest,
    ReuseListRequest,
    SubmitResponseRequest,
)
from cotacao.application.dto.responses import (
    ComparisonGridResponse,
    ErrorResponse,
    ExportFileResponse,
    ExportResultsResponse,
    GridCellResponse,
    HealthResponse,
    LowestPriceResponse,
    PriceEntryResponse,
    ProductResponse,
    QuotationListListResponse,
    QuotationListResponse,
    QuotationListSummaryResponse,
    ResponseFormResponse,
    ResponseLinkResponse,
    SubmitResponseResponse,
)

__all__ = [
    # Requests
    "CreateListRequest",
    "ReuseListRequest",
    "IssueLinkRequest",
    "SubmitResponseRequest",
    # Responses
    "ProductResponse",
    "QuotationListResponse",
    "QuotationListSummaryResponse",
    "QuotationListListResponse",
    "ResponseLinkResponse",
    "PriceEntryResponse",
    "ResponseFormResponse",
    "SubmitResponseResponse",
    "LowestPriceResponse",
    "GridCellResponse",
    "ComparisonGridResponse",
    "ExportFileResponse",
    "ExportResultsResponse",
    "HealthResponse",
    "ErrorResponse",
]
