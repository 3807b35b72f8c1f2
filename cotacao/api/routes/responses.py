"""Supplier response endpoints, addressed by link token."""

from fastapi import APIRouter, Depends

from cotacao.api.dependencies import get_open_form_use_case, get_submit_response_use_case
from cotacao.application.dto.requests import SubmitResponseRequest
from cotacao.application.dto.responses import (
    ErrorResponse,
    ResponseFormResponse,
    SubmitResponseResponse,
)
from cotacao.application.use_cases import OpenResponseFormUseCase, SubmitResponseUseCase

router = APIRouter(prefix="/api/cotacao", tags=["responses"])

LINK_ERRORS = {
    404: {"model": ErrorResponse, "description": "Unknown link"},
    409: {"model": ErrorResponse, "description": "Link used or list finalized"},
}


@router.get("/{token}", response_model=ResponseFormResponse, responses=LINK_ERRORS)
async def open_form(
    token: str,
    use_case: OpenResponseFormUseCase = Depends(get_open_form_use_case),
) -> ResponseFormResponse:
    """Blank price form for the supplier bound to the link."""
    return use_case.to_response(await use_case.execute(token))


@router.post(
    "/{token}",
    response_model=SubmitResponseResponse,
    responses={
        **LINK_ERRORS,
        422: {"model": ErrorResponse, "description": "Every price blank"},
    },
)
async def submit_response(
    token: str,
    request: SubmitResponseRequest,
    use_case: SubmitResponseUseCase = Depends(get_submit_response_use_case),
) -> SubmitResponseResponse:
    """Submit the supplier's prices. The link can be used once."""
    result = await use_case.execute(token, request.prices)
    return use_case.to_response(result)
