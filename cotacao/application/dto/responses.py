"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ProductResponse(BaseModel):
    """Product row."""

    internal_code: str = Field(..., description="Internal product code")
    description: str = Field(..., description="Product description")
    barcode: str = Field(..., description="Barcode (EAN/GTIN)")


class QuotationListSummaryResponse(BaseModel):
    """Quotation list without its rows."""

    id: str = Field(..., description="List ID")
    name: str = Field(..., description="List name")
    status: str = Field(..., description="open or finalized")
    product_count: int = Field(default=0, description="Number of products")
    response_count: int = Field(default=0, description="Number of responding suppliers")
    suppliers: list[str] = Field(default_factory=list, description="Responding suppliers")
    created_at: datetime
    updated_at: datetime


class QuotationListResponse(QuotationListSummaryResponse):
    """Full quotation list."""

    version: int = Field(default=0, description="Storage version")
    products: list[ProductResponse] = Field(default_factory=list)
    responses: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="Supplier -> internal code -> raw price text",
    )


class QuotationListListResponse(BaseModel):
    """List of quotation lists."""

    items: list[QuotationListSummaryResponse]
    total: int


class ResponseLinkResponse(BaseModel):
    """Supplier response link."""

    id: str = Field(..., description="Link ID")
    list_id: str = Field(..., description="Quotation list ID")
    supplier_name: str = Field(..., description="Supplier bound to the link")
    token: str = Field(..., description="Opaque link token")
    url: str = Field(..., description="Public URL to send to the supplier")
    status: str = Field(..., description="pending or responded")
    created_at: datetime


class PriceEntryResponse(BaseModel):
    """Blank price cell of the supplier response form."""

    internal_code: str
    description: str
    barcode: str
    raw_text: str = ""


class ResponseFormResponse(BaseModel):
    """What a supplier sees when opening a link."""

    list_id: str
    list_name: str
    supplier_name: str
    entries: list[PriceEntryResponse]


class SubmitResponseResponse(BaseModel):
    """Result of a supplier submission."""

    list_id: str
    supplier_name: str
    link_status: str
    prices_received: int = Field(..., description="Non-blank prices stored")


class LowestPriceResponse(BaseModel):
    """Lowest price for one product."""

    internal_code: str
    min_value: float | None = None
    winners: list[str] = Field(default_factory=list)


class GridCellResponse(BaseModel):
    """Comparison grid cell."""

    value: str
    read_only: bool = False
    is_lowest: bool = False


class ComparisonGridResponse(BaseModel):
    """Supplier price comparison for a list."""

    list_id: str
    status: str
    headers: list[str]
    suppliers: list[str]
    rows: list[list[GridCellResponse]]
    lowest_prices: list[LowestPriceResponse]


class ExportFileResponse(BaseModel):
    """Rendered purchase-order file for one winning supplier."""

    supplier_name: str
    filename: str
    content: str
    line_count: int


class ExportResultsResponse(BaseModel):
    """All export files of a list."""

    list_id: str
    files: list[ExportFileResponse]
    total: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime_seconds: float | None = Field(default=None)


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. LINK_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
