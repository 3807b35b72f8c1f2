"""Application use cases."""

from cotacao.application.use_cases.analyze_quotation import (
    AnalysisResult,
    AnalyzeQuotationUseCase,
)
from cotacao.application.use_cases.export_results import ExportResultsUseCase
from cotacao.application.use_cases.finalize_quotation_list import FinalizeQuotationListUseCase
from cotacao.application.use_cases.import_quotation_list import ImportQuotationListUseCase
from cotacao.application.use_cases.issue_response_link import IssueResponseLinkUseCase
from cotacao.application.use_cases.list_quotation_lists import ListQuotationListsUseCase
from cotacao.application.use_cases.open_response_form import (
    OpenResponseFormUseCase,
    ResponseForm,
    resolve_link,
)
from cotacao.application.use_cases.reuse_quotation_list import ReuseQuotationListUseCase
from cotacao.application.use_cases.submit_response import SubmitResponseUseCase

__all__ = [
    "ImportQuotationListUseCase",
    "FinalizeQuotationListUseCase",
    "ReuseQuotationListUseCase",
    "IssueResponseLinkUseCase",
    "OpenResponseFormUseCase",
    "ResponseForm",
    "resolve_link",
    "SubmitResponseUseCase",
    "AnalyzeQuotationUseCase",
    "AnalysisResult",
    "ExportResultsUseCase",
    "ListQuotationListsUseCase",
]
