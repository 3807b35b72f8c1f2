"""Quotation list endpoints: import, lifecycle, links, analysis and export."""

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from cotacao.api.dependencies import (
    get_analyze_use_case,
    get_export_use_case,
    get_finalize_list_use_case,
    get_import_list_use_case,
    get_issue_link_use_case,
    get_list_lists_use_case,
    get_reuse_list_use_case,
)
from cotacao.application.dto.requests import (
    CreateListRequest,
    IssueLinkRequest,
    ReuseListRequest,
)
from cotacao.application.dto.responses import (
    ComparisonGridResponse,
    ErrorResponse,
    ExportResultsResponse,
    QuotationListListResponse,
    QuotationListResponse,
    ResponseLinkResponse,
)
from cotacao.application.use_cases import (
    AnalyzeQuotationUseCase,
    ExportResultsUseCase,
    FinalizeQuotationListUseCase,
    ImportQuotationListUseCase,
    IssueResponseLinkUseCase,
    ListQuotationListsUseCase,
    ReuseQuotationListUseCase,
)
from cotacao.application.use_cases.converters import to_list_response
from cotacao.core.entities import ListStatus

router = APIRouter(prefix="/api/lists", tags=["lists"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "List not found"}}


@router.get("", response_model=QuotationListListResponse)
async def list_lists(
    list_status: ListStatus | None = Query(default=None, alias="status"),
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    use_case: ListQuotationListsUseCase = Depends(get_list_lists_use_case),
) -> QuotationListListResponse:
    """All lists, newest first."""
    lists = await use_case.execute(status=list_status, limit=limit, offset=offset)
    return use_case.to_response(lists)


@router.get("/open-quotes", response_model=QuotationListListResponse)
async def open_quotes(
    use_case: ListQuotationListsUseCase = Depends(get_list_lists_use_case),
) -> QuotationListListResponse:
    """Open lists that already have links or responses."""
    return use_case.to_response(await use_case.open_quotes())


@router.post(
    "",
    response_model=QuotationListResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse, "description": "No valid products"}},
)
async def create_list(
    request: CreateListRequest,
    use_case: ImportQuotationListUseCase = Depends(get_import_list_use_case),
) -> QuotationListResponse:
    """Create a list from raw product rows."""
    quotation_list = await use_case.execute(request.rows, name=request.name)
    return use_case.to_response(quotation_list)


@router.post(
    "/import",
    response_model=QuotationListResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Unsupported file"},
        413: {"model": ErrorResponse, "description": "File too large"},
        422: {"model": ErrorResponse, "description": "Unreadable sheet or no valid products"},
    },
)
async def import_list(
    file: UploadFile = File(...),
    name: str | None = Form(default=None),
    use_case: ImportQuotationListUseCase = Depends(get_import_list_use_case),
) -> QuotationListResponse:
    """Create a list from an uploaded .xlsx or .csv product sheet."""
    content = await file.read()
    quotation_list = await use_case.execute_file(content, file.filename or "", name=name)
    return use_case.to_response(quotation_list)


@router.get("/{list_id}", response_model=QuotationListResponse, responses=NOT_FOUND)
async def get_list(
    list_id: str,
    use_case: ListQuotationListsUseCase = Depends(get_list_lists_use_case),
) -> QuotationListResponse:
    """Full list with products and responses."""
    return to_list_response(await use_case.get(list_id))


@router.post(
    "/{list_id}/finalize",
    response_model=QuotationListResponse,
    responses={
        **NOT_FOUND,
        409: {"model": ErrorResponse, "description": "Already finalized or changed meanwhile"},
    },
)
async def finalize_list(
    list_id: str,
    use_case: FinalizeQuotationListUseCase = Depends(get_finalize_list_use_case),
) -> QuotationListResponse:
    """Close the list to further links and responses."""
    return use_case.to_response(await use_case.execute(list_id))


@router.post(
    "/{list_id}/reuse",
    response_model=QuotationListResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
)
async def reuse_list(
    list_id: str,
    request: ReuseListRequest | None = None,
    use_case: ReuseQuotationListUseCase = Depends(get_reuse_list_use_case),
) -> QuotationListResponse:
    """Start a new open list with the same products."""
    name = request.name if request else None
    return use_case.to_response(await use_case.execute(list_id, name=name))


@router.post(
    "/{list_id}/links",
    response_model=ResponseLinkResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        **NOT_FOUND,
        409: {"model": ErrorResponse, "description": "List finalized"},
    },
)
async def issue_link(
    list_id: str,
    request: IssueLinkRequest,
    use_case: IssueResponseLinkUseCase = Depends(get_issue_link_use_case),
) -> ResponseLinkResponse:
    """Issue a single-use response link for a supplier."""
    link = await use_case.execute(list_id, request.supplier_name)
    return use_case.to_response(link)


@router.get("/{list_id}/links", response_model=list[ResponseLinkResponse], responses=NOT_FOUND)
async def list_links(
    list_id: str,
    use_case: ListQuotationListsUseCase = Depends(get_list_lists_use_case),
    link_use_case: IssueResponseLinkUseCase = Depends(get_issue_link_use_case),
) -> list[ResponseLinkResponse]:
    """Links issued for the list, oldest first."""
    links = await use_case.links(list_id)
    return [link_use_case.to_response(link) for link in links]


@router.get("/{list_id}/analysis", response_model=ComparisonGridResponse, responses=NOT_FOUND)
async def analyze_list(
    list_id: str,
    use_case: AnalyzeQuotationUseCase = Depends(get_analyze_use_case),
) -> ComparisonGridResponse:
    """Lowest prices and the supplier comparison grid."""
    return use_case.to_response(await use_case.execute(list_id))


@router.get("/{list_id}/export", response_model=ExportResultsResponse, responses=NOT_FOUND)
async def export_results(
    list_id: str,
    use_case: ExportResultsUseCase = Depends(get_export_use_case),
) -> ExportResultsResponse:
    """One purchase-order file per winning supplier."""
    files = await use_case.execute(list_id)
    return use_case.to_response(list_id, files)
