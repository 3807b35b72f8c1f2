"""
Product sheet readers.

Read ``.xlsx`` (openpyxl) and ``.csv`` uploads into raw positional rows,
skipping the header row(s). Cell values are passed through untouched;
text coercion and row validation belong to the product catalog.
"""

import csv
import io
import zipfile
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from cotacao.config import get_logger
from cotacao.core.exceptions import SheetReadError, UnsupportedFileTypeError
from cotacao.core.interfaces import ISheetReader

logger = get_logger(__name__)


def _is_row_empty(row: Any) -> bool:
    if row is None:
        return True
    return all(c is None or (isinstance(c, str) and c.strip() == "") for c in row)


class XlsxSheetReader(ISheetReader):
    """Reads the active (or a named) worksheet of an ``.xlsx`` workbook."""

    def __init__(self, header_rows: int = 1, sheet_name: str | None = None):
        self.header_rows = header_rows
        self.sheet_name = sheet_name

    def supports(self, filename: str) -> bool:
        return Path(filename).suffix.lower() == ".xlsx"

    def read_rows(self, content: bytes, filename: str) -> list[list[Any]]:
        try:
            wb = load_workbook(filename=io.BytesIO(content), data_only=True, read_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError, OSError) as e:
            raise SheetReadError(filename, "not a valid .xlsx workbook") from e

        try:
            if self.sheet_name:
                if self.sheet_name not in wb.sheetnames:
                    raise SheetReadError(filename, f"sheet '{self.sheet_name}' not found")
                ws = wb[self.sheet_name]
            else:
                ws = wb.active

            rows: list[list[Any]] = []
            for index, row in enumerate(ws.iter_rows(values_only=True)):
                if index < self.header_rows or _is_row_empty(row):
                    continue
                rows.append(list(row))
        finally:
            wb.close()

        logger.info("sheet_read", filename=filename, format="xlsx", rows=len(rows))
        return rows


class CsvSheetReader(ISheetReader):
    """Reads ``.csv`` files; delimiter detected between ',' and ';' when not set."""

    def __init__(self, header_rows: int = 1, delimiter: str | None = None):
        self.header_rows = header_rows
        self.delimiter = delimiter

    def supports(self, filename: str) -> bool:
        return Path(filename).suffix.lower() == ".csv"

    @staticmethod
    def detect_delimiter(sample: str) -> str:
        # Spreadsheets in pt-BR locales save CSV with ';'
        return ";" if sample.count(";") > sample.count(",") else ","

    def read_rows(self, content: bytes, filename: str) -> list[list[Any]]:
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError:
            text = content.decode("latin-1")

        delimiter = self.delimiter or self.detect_delimiter(text[:2048])
        reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)

        try:
            rows = [
                list(row)
                for index, row in enumerate(reader)
                if index >= self.header_rows and not _is_row_empty(row)
            ]
        except csv.Error as e:
            raise SheetReadError(filename, str(e)) from e

        logger.info(
            "sheet_read",
            filename=filename,
            format="csv",
            delimiter=delimiter,
            rows=len(rows),
        )
        return rows


class SheetReaderRegistry:
    """Routes an upload to the reader that handles its extension."""

    def __init__(self, readers: list[ISheetReader] | None = None):
        self._readers: list[ISheetReader] = list(readers or [])

    def register(self, reader: ISheetReader) -> None:
        self._readers.append(reader)

    def get_reader(self, filename: str) -> ISheetReader:
        for reader in self._readers:
            if reader.supports(filename):
                return reader
        raise UnsupportedFileTypeError(
            filename=filename,
            extension=Path(filename).suffix.lower(),
            allowed=[".xlsx", ".csv"],
        )

    def read_rows(self, content: bytes, filename: str) -> list[list[Any]]:
        return self.get_reader(filename).read_rows(content, filename)


def get_sheet_reader_registry(
    header_rows: int | None = None,
    sheet_name: str | None = None,
    csv_delimiter: str | None = None,
) -> SheetReaderRegistry:
    """Registry with the xlsx and csv readers configured from settings."""
    from cotacao.config import get_settings

    settings = get_settings().importing
    rows_to_skip = settings.header_rows if header_rows is None else header_rows
    return SheetReaderRegistry(
        [
            XlsxSheetReader(header_rows=rows_to_skip, sheet_name=sheet_name or settings.sheet_name),
            CsvSheetReader(header_rows=rows_to_skip, delimiter=csv_delimiter or settings.csv_delimiter),
        ]
    )
