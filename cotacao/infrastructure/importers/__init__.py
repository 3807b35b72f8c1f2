"""Product sheet importers."""

from cotacao.infrastructure.importers.spreadsheet import (
    CsvSheetReader,
    SheetReaderRegistry,
    XlsxSheetReader,
    get_sheet_reader_registry,
)

__all__ = [
    "XlsxSheetReader",
    "CsvSheetReader",
    "SheetReaderRegistry",
    "get_sheet_reader_registry",
]
