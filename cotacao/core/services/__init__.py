"""
Core business logic services.

Layer-pure services that depend only on:
- cotacao/core/entities/*
- cotacao/core/exceptions.py

NO infrastructure imports. Every function works on in-memory snapshots
and returns new values.
"""

from cotacao.core.services.comparison_grid import (
    ComparisonGrid,
    GridCell,
    build_comparison_grid,
)
from cotacao.core.services.price_analysis import LowestPriceResult, analyze, parse_price
from cotacao.core.services.product_catalog import coerce_cell, parse_rows
from cotacao.core.services.quotation_lifecycle import (
    create_list,
    default_list_name,
    finalize_list,
    reopen_as_template,
)
from cotacao.core.services.response_links import generate_token, issue_link
from cotacao.core.services.response_submission import (
    SubmissionResult,
    submit_response,
    validate_submission,
)
from cotacao.core.services.result_exporter import (
    ExportFile,
    ExportLine,
    build_export_files,
    export_filename,
    export_winners,
    render_lines,
    unique_filename,
)

__all__ = [
    # Product catalog
    "parse_rows",
    "coerce_cell",
    # Lifecycle
    "create_list",
    "finalize_list",
    "reopen_as_template",
    "default_list_name",
    # Links
    "issue_link",
    "generate_token",
    # Submission
    "submit_response",
    "validate_submission",
    "SubmissionResult",
    # Analysis
    "analyze",
    "parse_price",
    "LowestPriceResult",
    # Export
    "export_winners",
    "build_export_files",
    "render_lines",
    "export_filename",
    "unique_filename",
    "ExportLine",
    "ExportFile",
    # Grid
    "build_comparison_grid",
    "ComparisonGrid",
    "GridCell",
]
