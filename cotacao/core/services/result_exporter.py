"""
Winner export.

Builds per-supplier purchase lines from a lowest-price analysis and
renders them as ``barcode;quantity;priceText`` text, one file per
winning supplier.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from cotacao.config import get_logger
from cotacao.core.entities.quotation import QuotationList
from cotacao.core.services.price_analysis import LowestPriceResult

logger = get_logger(__name__)

# Products carry no quantity, every line orders one unit.
EXPORT_QUANTITY = 1
DEFAULT_FILE_STEM = "fornecedor"


@dataclass(frozen=True)
class ExportLine:
    """One purchase line for a winning supplier."""

    barcode: str
    price_text: str
    quantity: int = EXPORT_QUANTITY

    def render(self, delimiter: str = ";") -> str:
        return delimiter.join([self.barcode, str(self.quantity), self.price_text])


@dataclass(frozen=True)
class ExportFile:
    """Rendered export for one supplier."""

    supplier_name: str
    filename: str
    content: str
    line_count: int


def export_winners(
    quotation_list: QuotationList,
    analysis: dict[str, LowestPriceResult],
) -> dict[str, list[ExportLine]]:
    """
    Group winning lines by supplier.

    ``price_text`` is the supplier's original text, not the parsed value.
    Suppliers without a winning line are left out; lines follow product order.
    """
    result: dict[str, list[ExportLine]] = {}
    for product in quotation_list.products:
        outcome = analysis.get(product.internal_code)
        if outcome is None or not outcome.winners:
            continue
        # Iterate suppliers in response order so output is deterministic
        for supplier in quotation_list.supplier_names:
            if supplier not in outcome.winners:
                continue
            price_text = quotation_list.price_text(supplier, product.internal_code)
            if price_text is None:
                continue
            result.setdefault(supplier, []).append(
                ExportLine(barcode=product.barcode, price_text=price_text)
            )
    return result


def render_lines(lines: list[ExportLine], delimiter: str = ";") -> str:
    """Serialize lines, no header row."""
    return "\n".join(line.render(delimiter) for line in lines)


def export_filename(supplier_name: str, extension: str = ".csv") -> str:
    """
    Supplier name lower-cased with all whitespace removed.

    Path separators and leading dots are dropped so the result is always a
    bare file name; a name with nothing left becomes ``fornecedor``.
    """
    stem = re.sub(r"[\s/\\]+", "", supplier_name.lower()).lstrip(".")
    return (stem or DEFAULT_FILE_STEM) + extension


def unique_filename(filename: str, taken: set[str]) -> str:
    """``filename`` or, when already taken, ``stem-2.ext``, ``stem-3.ext``, ..."""
    if filename not in taken:
        return filename
    path = Path(filename)
    counter = 2
    while f"{path.stem}-{counter}{path.suffix}" in taken:
        counter += 1
    return f"{path.stem}-{counter}{path.suffix}"


def build_export_files(
    quotation_list: QuotationList,
    analysis: dict[str, LowestPriceResult],
    delimiter: str = ";",
    extension: str = ".csv",
) -> list[ExportFile]:
    """
    Rendered export files, one per winning supplier.

    Suppliers whose names normalize to the same file name get numbered
    names in response order (``acme.csv``, ``acme-2.csv``).
    """
    files: list[ExportFile] = []
    taken: set[str] = set()
    for supplier, lines in export_winners(quotation_list, analysis).items():
        filename = unique_filename(export_filename(supplier, extension), taken)
        taken.add(filename)
        files.append(
            ExportFile(
                supplier_name=supplier,
                filename=filename,
                content=render_lines(lines, delimiter),
                line_count=len(lines),
            )
        )
    logger.info(
        "export_files_built",
        list_id=quotation_list.id,
        suppliers=[f.supplier_name for f in files],
    )
    return files
