"""Writes rendered supplier exports to a directory."""

from pathlib import Path

from cotacao.config import get_logger
from cotacao.core.exceptions import ValidationError
from cotacao.core.services.result_exporter import ExportFile

logger = get_logger(__name__)


def check_filename(filename: str) -> None:
    """
    Reject anything but a bare file name inside the output directory.

    Raises:
        ValidationError: For empty names, dot names or names with a path part.
    """
    if (
        not filename
        or filename in (".", "..")
        or "/" in filename
        or "\\" in filename
        or Path(filename).name != filename
    ):
        raise ValidationError("filename", "Export file name must be a bare file name", filename)


def write_export_files(
    files: list[ExportFile],
    out_dir: Path,
    encoding: str = "utf-8",
) -> list[Path]:
    """
    Write each export to ``out_dir / file.filename``.

    Every name is checked before the first write. Existing files with the
    same name are overwritten; names repeated within ``files`` are rejected.
    """
    seen: set[str] = set()
    for export in files:
        check_filename(export.filename)
        if export.filename in seen:
            raise ValidationError("filename", "Duplicate export file name", export.filename)
        seen.add(export.filename)

    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for export in files:
        path = out_dir / export.filename
        path.write_text(export.content, encoding=encoding)
        written.append(path)
        logger.info(
            "export_file_written",
            supplier=export.supplier_name,
            path=str(path),
            lines=export.line_count,
        )
    return written
