"""
Export Results Use Case.

Builds one purchase-order file per winning supplier and, when asked,
writes them to disk.
"""

from pathlib import Path

from cotacao.application.dto.responses import ExportFileResponse, ExportResultsResponse
from cotacao.config import get_logger, get_settings
from cotacao.core.interfaces import IQuotationStore
from cotacao.core.services import ExportFile, analyze, build_export_files
from cotacao.infrastructure.exporters import write_export_files

logger = get_logger(__name__)


class ExportResultsUseCase:
    """Render winner exports for a list."""

    def __init__(self, store: IQuotationStore | None = None):
        self._store = store

    async def _get_store(self) -> IQuotationStore:
        if self._store is None:
            from cotacao.infrastructure.storage.sqlite import get_quotation_store

            self._store = await get_quotation_store()
        return self._store

    async def execute(self, list_id: str) -> list[ExportFile]:
        """Rendered files; an empty list means there is nothing to export."""
        settings = get_settings().export
        store = await self._get_store()

        quotation_list = await store.get_list(list_id)
        files = build_export_files(
            quotation_list,
            analyze(quotation_list),
            delimiter=settings.delimiter,
            extension=settings.file_extension,
        )
        if not files:
            logger.info("export_nothing_to_export", list_id=list_id)
        return files

    async def write(self, list_id: str, out_dir: Path | None = None) -> list[Path]:
        """Render and write the files to ``out_dir`` (settings default)."""
        settings = get_settings().export
        files = await self.execute(list_id)
        return write_export_files(files, out_dir or settings.output_dir, encoding=settings.encoding)

    def to_response(self, list_id: str, files: list[ExportFile]) -> ExportResultsResponse:
        return ExportResultsResponse(
            list_id=list_id,
            files=[
                ExportFileResponse(
                    supplier_name=f.supplier_name,
                    filename=f.filename,
                    content=f.content,
                    line_count=f.line_count,
                )
                for f in files
            ],
            total=len(files),
        )
