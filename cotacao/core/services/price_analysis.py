"""
Lowest price analysis.

For every product, finds the minimum valid price across suppliers and
every supplier tied at that minimum. Ties are kept, never broken.

Price text accepts comma or period as decimal separator ("12,50" and
"12.50" are both 12.5). Anything else (currency symbols, thousands
separators, letters) does not parse and the entry is simply not a
candidate. Results are computed fresh on every call.
"""

import math
import re
from dataclasses import dataclass, field

from cotacao.core.entities.quotation import QuotationList

_PRICE_RE = re.compile(r"^(?:[0-9]+(?:[.,][0-9]*)?|[.,][0-9]+)$")


@dataclass(frozen=True)
class LowestPriceResult:
    """Minimum price for one product and the suppliers offering it."""

    min_value: float | None = None
    winners: frozenset[str] = field(default_factory=frozenset)

    @property
    def has_winner(self) -> bool:
        return bool(self.winners)


def parse_price(raw_text: str | None) -> float | None:
    """
    Parse supplier price text.

    Returns:
        The positive finite value, or None when the text is blank, not a
        number, zero, or not finite.
    """
    if raw_text is None:
        return None
    text = raw_text.strip()
    if not text or not _PRICE_RE.match(text):
        return None

    value = float(text.replace(",", "."))
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def collect_candidates(quotation_list: QuotationList, internal_code: str) -> dict[str, float]:
    """Parsed prices per supplier for one product."""
    candidates: dict[str, float] = {}
    for supplier, prices in quotation_list.responses.items():
        value = parse_price(prices.get(internal_code))
        if value is not None:
            candidates[supplier] = value
    return candidates


def lowest_price(candidates: dict[str, float]) -> LowestPriceResult:
    """Minimum value and all suppliers at exactly that value."""
    if not candidates:
        return LowestPriceResult()
    minimum = min(candidates.values())
    winners = frozenset(s for s, v in candidates.items() if v == minimum)
    return LowestPriceResult(min_value=minimum, winners=winners)


def analyze(quotation_list: QuotationList) -> dict[str, LowestPriceResult]:
    """Lowest price result for every product of the list, in product order."""
    return {
        product.internal_code: lowest_price(
            collect_candidates(quotation_list, product.internal_code)
        )
        for product in quotation_list.products
    }
