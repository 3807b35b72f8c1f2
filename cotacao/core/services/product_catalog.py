"""
Product catalog parsing.

Turns raw positional rows from a sheet into Product records. The import
is best-effort: rows missing any of the three required cells are dropped
without error, since spreadsheet exports commonly carry malformed trailing
rows.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from cotacao.config import get_logger
from cotacao.core.entities.product import Product
from cotacao.core.exceptions import EmptyCatalogError

logger = get_logger(__name__)

# Positional columns: internal code, description, barcode
REQUIRED_COLUMNS = 3


def coerce_cell(value: Any) -> str:
    """Coerce a raw cell to stripped text (None -> "", 123.0 -> "123")."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def parse_rows(raw_rows: Iterable[Sequence[Any]]) -> list[Product]:
    """
    Parse raw rows into products.

    Args:
        raw_rows: Rows of cells, header already excluded. Only the first
            three cells are read; extra cells are ignored.

    Returns:
        Accepted products in input order.

    Raises:
        EmptyCatalogError: If no row is accepted.
    """
    products: list[Product] = []
    seen_codes: set[str] = set()
    received = 0

    for index, row in enumerate(raw_rows):
        received += 1
        cells = [coerce_cell(c) for c in list(row)[:REQUIRED_COLUMNS]]
        cells += [""] * (REQUIRED_COLUMNS - len(cells))
        internal_code, description, barcode = cells

        if not (internal_code and description and barcode):
            logger.debug("catalog_row_dropped", row_index=index, reason="missing_field")
            continue
        if internal_code in seen_codes:
            logger.debug(
                "catalog_row_dropped",
                row_index=index,
                reason="duplicate_code",
                internal_code=internal_code,
            )
            continue

        seen_codes.add(internal_code)
        products.append(
            Product(
                internal_code=internal_code,
                description=description,
                barcode=barcode,
            )
        )

    if not products:
        raise EmptyCatalogError(rows_received=received)

    logger.info("catalog_parsed", rows_received=received, products=len(products))
    return products
