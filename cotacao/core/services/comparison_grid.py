"""Side-by-side comparison grid of supplier prices."""

from dataclasses import dataclass, field

from cotacao.core.entities.quotation import QuotationList
from cotacao.core.services.price_analysis import LowestPriceResult

PRODUCT_HEADERS = ["Código Interno", "Descrição", "Código de Barras"]


@dataclass(frozen=True)
class GridCell:
    """A single grid cell."""

    value: str
    read_only: bool = False
    is_lowest: bool = False


@dataclass
class ComparisonGrid:
    """Header plus one row per product, supplier columns in response order."""

    headers: list[str]
    rows: list[list[GridCell]] = field(default_factory=list)
    suppliers: list[str] = field(default_factory=list)


def build_comparison_grid(
    quotation_list: QuotationList,
    analysis: dict[str, LowestPriceResult],
) -> ComparisonGrid:
    """
    Build the grid shown to the buyer.

    Product cells are always read-only. Price cells become read-only once
    the list is finalized, and are flagged ``is_lowest`` for winners.
    """
    suppliers = quotation_list.supplier_names
    grid = ComparisonGrid(headers=PRODUCT_HEADERS + suppliers, suppliers=suppliers)

    for product in quotation_list.products:
        winners = analysis.get(product.internal_code, LowestPriceResult()).winners
        row = [
            GridCell(product.internal_code, read_only=True),
            GridCell(product.description, read_only=True),
            GridCell(product.barcode, read_only=True),
        ]
        for supplier in suppliers:
            row.append(
                GridCell(
                    value=quotation_list.price_text(supplier, product.internal_code) or "",
                    read_only=quotation_list.is_finalized,
                    is_lowest=supplier in winners,
                )
            )
        grid.rows.append(row)

    return grid
