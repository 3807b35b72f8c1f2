"""Export sinks."""

from cotacao.infrastructure.exporters.file_sink import write_export_files

__all__ = ["write_export_files"]
