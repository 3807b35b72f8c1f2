"""Analyze Quotation Use Case: lowest prices and the comparison grid."""

from dataclasses import dataclass

from cotacao.application.dto.responses import (
    ComparisonGridResponse,
    GridCellResponse,
    LowestPriceResponse,
)
from cotacao.config import get_logger
from cotacao.core.entities import QuotationList
from cotacao.core.interfaces import IQuotationStore
from cotacao.core.services import (
    ComparisonGrid,
    LowestPriceResult,
    analyze,
    build_comparison_grid,
)

logger = get_logger(__name__)


@dataclass
class AnalysisResult:
    """Analysis of one list."""

    quotation_list: QuotationList
    lowest_prices: dict[str, LowestPriceResult]
    grid: ComparisonGrid


class AnalyzeQuotationUseCase:
    """Compute lowest prices for a list. Nothing is stored."""

    def __init__(self, store: IQuotationStore | None = None):
        self._store = store

    async def _get_store(self) -> IQuotationStore:
        if self._store is None:
            from cotacao.infrastructure.storage.sqlite import get_quotation_store

            self._store = await get_quotation_store()
        return self._store

    async def execute(self, list_id: str) -> AnalysisResult:
        store = await self._get_store()

        quotation_list = await store.get_list(list_id)
        lowest = analyze(quotation_list)

        logger.info(
            "analysis_complete",
            list_id=quotation_list.id,
            products=len(lowest),
            with_winner=sum(1 for r in lowest.values() if r.has_winner),
        )
        return AnalysisResult(
            quotation_list=quotation_list,
            lowest_prices=lowest,
            grid=build_comparison_grid(quotation_list, lowest),
        )

    def to_response(self, result: AnalysisResult) -> ComparisonGridResponse:
        return ComparisonGridResponse(
            list_id=result.quotation_list.id,
            status=result.quotation_list.status.value,
            headers=result.grid.headers,
            suppliers=result.grid.suppliers,
            rows=[
                [
                    GridCellResponse(
                        value=cell.value,
                        read_only=cell.read_only,
                        is_lowest=cell.is_lowest,
                    )
                    for cell in row
                ]
                for row in result.grid.rows
            ],
            lowest_prices=[
                LowestPriceResponse(
                    internal_code=code,
                    min_value=outcome.min_value,
                    winners=sorted(outcome.winners),
                )
                for code, outcome in result.lowest_prices.items()
            ],
        )
