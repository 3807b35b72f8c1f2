"""Storage infrastructure implementations."""

from cotacao.infrastructure.storage.sqlite import (
    SQLiteQuotationStore,
    close_pool,
    get_connection,
    get_pool,
    get_quotation_store,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteQuotationStore",
    "get_quotation_store",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
