"""
Import Quotation List Use Case.

Turns a product sheet (raw rows or an uploaded xlsx/csv file) into a new
open quotation list.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from cotacao.application.dto.responses import QuotationListResponse
from cotacao.application.use_cases.converters import to_list_response
from cotacao.config import get_logger, get_settings
from cotacao.core.entities import QuotationList
from cotacao.core.exceptions import FileTooLargeError, UnsupportedFileTypeError
from cotacao.core.interfaces import IQuotationStore
from cotacao.core.services import create_list, parse_rows
from cotacao.infrastructure.importers import SheetReaderRegistry, get_sheet_reader_registry

logger = get_logger(__name__)


class ImportQuotationListUseCase:
    """
    Create a quotation list from product rows.

    Flow:
    1. Read rows from the uploaded sheet (file imports only)
    2. Keep complete rows, first occurrence of each internal code
    3. Create the open list and persist it
    """

    def __init__(
        self,
        store: IQuotationStore | None = None,
        readers: SheetReaderRegistry | None = None,
    ):
        self._store = store
        self._readers = readers

    async def _get_store(self) -> IQuotationStore:
        if self._store is None:
            from cotacao.infrastructure.storage.sqlite import get_quotation_store

            self._store = await get_quotation_store()
        return self._store

    def _get_readers(self) -> SheetReaderRegistry:
        if self._readers is None:
            self._readers = get_sheet_reader_registry()
        return self._readers

    async def execute(
        self,
        rows: Sequence[Sequence[Any]],
        name: str | None = None,
    ) -> QuotationList:
        """
        Create and store a list from raw rows (header already removed).

        Raises:
            EmptyCatalogError: If no row yields a valid product.
        """
        logger.info("import_list_started", rows=len(rows), name=name)

        products = parse_rows(rows)
        quotation_list = create_list(name, products)

        store = await self._get_store()
        quotation_list = await store.create_list(quotation_list)

        logger.info(
            "import_list_complete",
            list_id=quotation_list.id,
            products=len(quotation_list.products),
            rows_dropped=len(rows) - len(products),
        )
        return quotation_list

    async def execute_file(
        self,
        content: bytes,
        filename: str,
        name: str | None = None,
    ) -> QuotationList:
        """
        Create and store a list from an uploaded xlsx or csv file.

        Raises:
            FileTooLargeError: If the file exceeds the upload limit.
            UnsupportedFileTypeError: If the extension is not allowed.
            SheetReadError: If the file cannot be read.
        """
        settings = get_settings().importing

        extension = Path(filename).suffix.lower()
        if extension not in settings.allowed_extensions:
            raise UnsupportedFileTypeError(filename, extension, settings.allowed_extensions)
        if len(content) > settings.max_upload_size:
            raise FileTooLargeError(filename, len(content), settings.max_upload_size)

        rows = self._get_readers().read_rows(content, filename)
        logger.debug("import_file_read", filename=filename, rows=len(rows))

        return await self.execute(rows, name=name)

    def to_response(self, quotation_list: QuotationList) -> QuotationListResponse:
        """Convert result to API response."""
        return to_list_response(quotation_list)
