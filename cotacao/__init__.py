"""Cotação: request-for-quotation aggregation and response collection."""

__version__ = "1.0.0"
