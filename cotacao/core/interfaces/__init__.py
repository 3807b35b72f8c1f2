"""Core interfaces (ports) for dependency injection."""

from cotacao.core.interfaces.quotation_store import IQuotationStore
from cotacao.core.interfaces.sheet_reader import ISheetReader

__all__ = [
    # Storage interfaces
    "IQuotationStore",
    # Import interfaces
    "ISheetReader",
]
