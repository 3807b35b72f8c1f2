"""
Application layer - Use cases and DTOs.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services and storage

Use cases are the only entry point for API handlers and the CLI.
"""

from cotacao.application.dto import ErrorResponse, HealthResponse
from cotacao.application.use_cases import (
    AnalyzeQuotationUseCase,
    ExportResultsUseCase,
    FinalizeQuotationListUseCase,
    ImportQuotationListUseCase,
    IssueResponseLinkUseCase,
    ListQuotationListsUseCase,
    OpenResponseFormUseCase,
    ReuseQuotationListUseCase,
    SubmitResponseUseCase,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ImportQuotationListUseCase",
    "FinalizeQuotationListUseCase",
    "ReuseQuotationListUseCase",
    "IssueResponseLinkUseCase",
    "OpenResponseFormUseCase",
    "SubmitResponseUseCase",
    "AnalyzeQuotationUseCase",
    "ExportResultsUseCase",
    "ListQuotationListsUseCase",
]
