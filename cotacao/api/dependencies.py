"""
Dependency injection container for FastAPI.

Provides use case instances to route handlers.
"""

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


# List use cases
def get_import_list_use_case() -> ImportQuotationListUseCase:
    return ImportQuotationListUseCase()


def get_finalize_list_use_case() -> FinalizeQuotationListUseCase:
    return FinalizeQuotationListUseCase()


def get_reuse_list_use_case() -> ReuseQuotationListUseCase:
    return ReuseQuotationListUseCase()


def get_list_lists_use_case() -> ListQuotationListsUseCase:
    return ListQuotationListsUseCase()


# Link and response use cases
def get_issue_link_use_case() -> IssueResponseLinkUseCase:
    return IssueResponseLinkUseCase()


def get_open_form_use_case() -> OpenResponseFormUseCase:
    return OpenResponseFormUseCase()


def get_submit_response_use_case() -> SubmitResponseUseCase:
    return SubmitResponseUseCase()


# Analysis use cases
def get_analyze_use_case() -> AnalyzeQuotationUseCase:
    return AnalyzeQuotationUseCase()


def get_export_use_case() -> ExportResultsUseCase:
    return ExportResultsUseCase()
