"""Tests for IssueResponseLinkUseCase and OpenResponseFormUseCase."""

from unittest.mock import AsyncMock, patch

import pytest

from cotacao.application.use_cases.issue_response_link import IssueResponseLinkUseCase
from cotacao.application.use_cases.open_response_form import OpenResponseFormUseCase
from cotacao.core.exceptions import (
    LinkAlreadyRespondedError,
    LinkNotFoundError,
    ListFinalizedError,
    ValidationError,
)


@pytest.fixture
def mock_store():
    store = AsyncMock()
    store.save_link.side_effect = lambda link: link
    return store


class TestIssueResponseLinkUseCase:
    async def test_issue(self, mock_store, open_list):
        mock_store.get_list.return_value = open_list
        use_case = IssueResponseLinkUseCase(store=mock_store, base_origin="https://compras.example.com")

        link = await use_case.execute("list-1", "Distribuidora Alfa")

        mock_store.save_link.assert_awaited_once_with(link)
        assert link.supplier_name == "Distribuidora Alfa"
        assert use_case.url_for(link) == f"https://compras.example.com/cotacao/{link.token}"

    async def test_logs_completion_event(self, mock_store, open_list):
        mock_store.get_list.return_value = open_list
        with patch("cotacao.application.use_cases.issue_response_link.logger") as logger:
            link = await IssueResponseLinkUseCase(store=mock_store).execute("list-1", "Alfa")

        logger.info.assert_called_once_with(
            "issue_link_complete",
            list_id=link.list_id,
            link_id=link.id,
            supplier="Alfa",
        )

    async def test_finalized_list(self, mock_store, finalized_list):
        mock_store.get_list.return_value = finalized_list
        with pytest.raises(ListFinalizedError):
            await IssueResponseLinkUseCase(store=mock_store).execute("list-1", "Alfa")
        mock_store.save_link.assert_not_awaited()

    async def test_blank_supplier(self, mock_store, open_list):
        mock_store.get_list.return_value = open_list
        with pytest.raises(ValidationError):
            await IssueResponseLinkUseCase(store=mock_store).execute("list-1", "  ")

    def test_to_response(self, pending_link):
        response = IssueResponseLinkUseCase(base_origin="http://x").to_response(pending_link)
        assert response.url == "http://x/cotacao/tok-gama"
        assert response.status == "pending"


class TestOpenResponseFormUseCase:
    async def test_open_form(self, mock_store, pending_link, open_list):
        mock_store.get_link_by_token.return_value = pending_link
        mock_store.get_list.return_value = open_list
        use_case = OpenResponseFormUseCase(store=mock_store)

        form = await use_case.execute("tok-gama")

        mock_store.get_list.assert_awaited_once_with("list-1")
        assert [e.internal_code for e in form.entries] == ["P1", "P2", "P3"]
        assert all(e.is_blank for e in form.entries)

        response = use_case.to_response(form)
        assert response.supplier_name == "Gama"
        assert response.entries[1].description == "Feijão 1kg"

    async def test_unknown_token(self, mock_store):
        mock_store.get_link_by_token.return_value = None
        with pytest.raises(LinkNotFoundError):
            await OpenResponseFormUseCase(store=mock_store).execute("bad")

    async def test_resolve(self, mock_store, pending_link):
        mock_store.get_link_by_token.return_value = pending_link
        assert await OpenResponseFormUseCase(store=mock_store).resolve("tok-gama") == pending_link

    async def test_responded_link(self, mock_store, responded_link):
        mock_store.get_link_by_token.return_value = responded_link
        with pytest.raises(LinkAlreadyRespondedError):
            await OpenResponseFormUseCase(store=mock_store).execute("tok-gama")
        mock_store.get_list.assert_not_awaited()

    async def test_finalized_list(self, mock_store, pending_link, finalized_list):
        mock_store.get_link_by_token.return_value = pending_link
        mock_store.get_list.return_value = finalized_list
        with pytest.raises(ListFinalizedError):
            await OpenResponseFormUseCase(store=mock_store).execute("tok-gama")
