"""Integration test for the full quotation round on a real SQLite database."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

import cotacao.infrastructure.storage.sqlite.connection as conn_module
from cotacao.application.use_cases import (
    AnalyzeQuotationUseCase,
    ExportResultsUseCase,
    FinalizeQuotationListUseCase,
    ImportQuotationListUseCase,
    IssueResponseLinkUseCase,
    ListQuotationListsUseCase,
    OpenResponseFormUseCase,
    ReuseQuotationListUseCase,
    SubmitResponseUseCase,
)
from cotacao.core.entities import ListStatus
from cotacao.core.exceptions import (
    EmptyResponseError,
    LinkAlreadyRespondedError,
    ListFinalizedError,
)
from cotacao.infrastructure.storage.sqlite import SQLiteQuotationStore, close_pool
from cotacao.infrastructure.storage.sqlite.migrations import initialize_database

SHEET = (
    "Código Interno;Descrição;Código de Barras\n"
    "P1;Arroz 5kg;7891000000011\n"
    "P2;Feijão 1kg;7891000000028\n"
    ";linha sem código;7891000000099\n"
    "P3;Óleo 900ml;7891000000035\n"
    "P1;Arroz repetido;7891000000042\n"
).encode()


@pytest.fixture
async def store(tmp_path: Path):
    db_path = tmp_path / "flow.db"
    await initialize_database(db_path)

    mock_settings = MagicMock()
    mock_settings.storage.db_path = db_path
    mock_settings.storage.pool_size = 2
    mock_settings.storage.busy_timeout = 5000

    conn_module._pool = None
    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        try:
            yield SQLiteQuotationStore()
        finally:
            await close_pool()


class TestQuotationFlow:
    """Import → links → responses → analysis → finalize → export → reuse."""

    async def test_full_round(self, store, tmp_path: Path):
        # Step 1: import the product sheet
        quotation_list = await ImportQuotationListUseCase(store=store).execute_file(
            SHEET, "produtos.csv", name="Semana 12"
        )
        assert quotation_list.product_codes == ["P1", "P2", "P3"]
        list_id = quotation_list.id

        # Step 2: one link per supplier
        links_uc = IssueResponseLinkUseCase(store=store, base_origin="https://compras.example.com")
        alfa = await links_uc.execute(list_id, "Distribuidora Alfa")
        beta = await links_uc.execute(list_id, "Beta Atacado")
        assert alfa.token != beta.token

        lists_uc = ListQuotationListsUseCase(store=store)
        assert [ql.id for ql in await lists_uc.open_quotes()] == [list_id]

        # Step 3: suppliers open their forms and answer
        form = await OpenResponseFormUseCase(store=store).execute(alfa.token)
        assert [e.internal_code for e in form.entries] == ["P1", "P2", "P3"]

        submit_uc = SubmitResponseUseCase(store=store)
        with pytest.raises(EmptyResponseError):
            await submit_uc.execute(beta.token, {"P1": "", "P2": "  "})

        await submit_uc.execute(alfa.token, {"P1": "10,00", "P2": "7.50", "P3": ""})
        await submit_uc.execute(beta.token, {"P1": "9,90", "P2": "7,5", "P3": "R$ 3"})

        with pytest.raises(LinkAlreadyRespondedError):
            await submit_uc.execute(alfa.token, {"P1": "1"})

        # Step 4: lowest prices
        analysis = await AnalyzeQuotationUseCase(store=store).execute(list_id)
        assert analysis.lowest_prices["P1"].winners == {"Beta Atacado"}
        assert analysis.lowest_prices["P2"].winners == {"Distribuidora Alfa", "Beta Atacado"}
        assert analysis.lowest_prices["P2"].min_value == 7.5
        assert not analysis.lowest_prices["P3"].has_winner

        # Step 5: finalize closes the list to new links and answers
        finalized = await FinalizeQuotationListUseCase(store=store).execute(list_id)
        assert finalized.status == ListStatus.FINALIZED
        with pytest.raises(ListFinalizedError):
            await links_uc.execute(list_id, "Gama")
        assert await lists_uc.open_quotes() == []

        # Step 6: export one file per winner
        paths = await ExportResultsUseCase(store=store).write(list_id, out_dir=tmp_path / "out")
        contents = {p.name: p.read_text(encoding="utf-8") for p in paths}
        assert contents == {
            "distribuidoraalfa.csv": "7891000000028;1;7.50",
            "betaatacado.csv": "7891000000011;1;9,90\n7891000000028;1;7,5",
        }

        # Step 7: reuse the products for the next round
        reused = await ReuseQuotationListUseCase(store=store).execute(list_id, name="Semana 13")
        assert reused.id != list_id
        assert reused.product_codes == ["P1", "P2", "P3"]
        assert reused.responses == {}
        original = await lists_uc.get(list_id)
        assert original.status == ListStatus.FINALIZED
        assert set(original.responses) == {"Distribuidora Alfa", "Beta Atacado"}
