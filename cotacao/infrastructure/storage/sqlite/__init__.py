"""SQLite storage implementations."""

from cotacao.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from cotacao.infrastructure.storage.sqlite.quotation_store import SQLiteQuotationStore

# Singleton instances
_quotation_store: SQLiteQuotationStore | None = None


async def get_quotation_store() -> SQLiteQuotationStore:
    """Get singleton quotation store instance."""
    global _quotation_store
    if _quotation_store is None:
        _quotation_store = SQLiteQuotationStore()
    return _quotation_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteQuotationStore",
    # Factory functions
    "get_quotation_store",
]
