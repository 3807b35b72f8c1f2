"""Tests for SQLiteQuotationStore."""

import asyncio
from datetime import UTC, datetime, timedelta

import pytest

from cotacao.core.entities import LinkStatus, ListStatus, QuotationList, ResponseLink
from cotacao.core.exceptions import (
    ConcurrentModificationError,
    LinkAlreadyRespondedError,
    ListFinalizedError,
    QuotationListNotFoundError,
)
from cotacao.core.services import finalize_list, issue_link

BASE_TIME = datetime(2025, 3, 5, 14, 30, tzinfo=UTC)


def _link(list_id: str, supplier: str, token: str, minutes: int = 0) -> ResponseLink:
    return ResponseLink(
        list_id=list_id,
        supplier_name=supplier,
        token=token,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


class TestListStorage:
    """Tests for quotation list persistence."""

    async def test_create_and_get(self, store, open_list):
        await store.create_list(open_list)
        fetched = await store.get_list("list-1")

        assert fetched.name == "Semana 12"
        assert fetched.products == open_list.products
        assert fetched.responses == {}
        assert fetched.status == ListStatus.OPEN
        assert fetched.version == 0

    async def test_round_trips_unicode_and_responses(self, store, quoted_list):
        await store.create_list(quoted_list)
        fetched = await store.get_list("list-1")

        assert fetched.products[2].description == "Óleo 900ml"
        assert fetched.responses == quoted_list.responses
        assert fetched.supplier_names == ["Alfa", "Beta"]

    async def test_get_missing(self, store):
        with pytest.raises(QuotationListNotFoundError):
            await store.get_list("missing")

    async def test_save_bumps_version(self, store, open_list):
        await store.create_list(open_list)
        loaded = await store.get_list("list-1")

        saved = await store.save_list(finalize_list(loaded))

        assert saved.version == 1
        fetched = await store.get_list("list-1")
        assert fetched.status == ListStatus.FINALIZED
        assert fetched.version == 1

    async def test_save_stale_version(self, store, open_list):
        await store.create_list(open_list)
        stale = await store.get_list("list-1")
        await store.save_list(stale.model_copy(update={"name": "Renomeada"}))

        with pytest.raises(ConcurrentModificationError):
            await store.save_list(finalize_list(stale))

        fetched = await store.get_list("list-1")
        assert fetched.status == ListStatus.OPEN
        assert fetched.name == "Renomeada"

    async def test_save_missing(self, store, open_list):
        with pytest.raises(QuotationListNotFoundError):
            await store.save_list(open_list)

    async def test_list_lists_newest_first(self, store, sample_products):
        for i in range(3):
            await store.create_list(
                QuotationList(
                    id=f"list-{i}",
                    name=f"Lista {i}",
                    products=sample_products,
                    created_at=BASE_TIME + timedelta(days=i),
                    status=ListStatus.FINALIZED if i == 1 else ListStatus.OPEN,
                )
            )

        assert [ql.id for ql in await store.list_lists()] == ["list-2", "list-1", "list-0"]
        assert [ql.id for ql in await store.list_lists(status=ListStatus.OPEN)] == [
            "list-2",
            "list-0",
        ]
        assert [ql.id for ql in await store.list_lists(limit=1, offset=1)] == ["list-1"]
        assert len(await store.list_lists(limit=-1)) == 3


class TestLinkStorage:
    """Tests for response link persistence."""

    async def test_save_and_get_by_token(self, store, open_list):
        await store.create_list(open_list)
        link = await store.save_link(issue_link(open_list, "Alfa"))

        fetched = await store.get_link_by_token(link.token)

        assert fetched is not None
        assert fetched.id == link.id
        assert fetched.supplier_name == "Alfa"
        assert fetched.status == LinkStatus.PENDING

    async def test_unknown_token(self, store, open_list):
        await store.create_list(open_list)
        link = await store.save_link(issue_link(open_list, "Alfa"))

        assert await store.get_link_by_token("nope") is None
        assert await store.get_link_by_token(link.token[:-1]) is None

    async def test_list_links_oldest_first(self, store, open_list):
        await store.create_list(open_list)
        await store.save_link(_link("list-1", "Beta", "tok-b", minutes=5))
        await store.save_link(_link("list-1", "Alfa", "tok-a", minutes=1))

        links = await store.list_links("list-1")

        assert [link.supplier_name for link in links] == ["Alfa", "Beta"]
        assert await store.list_ids_with_links() == {"list-1"}

    async def test_responded_link_never_reset(self, store, open_list):
        await store.create_list(open_list)
        link = await store.save_link(_link("list-1", "Alfa", "tok-a"))
        await store.record_submission(link, {"P1": "10"})

        await store.save_link(link)

        fetched = await store.get_link_by_token("tok-a")
        assert fetched.status == LinkStatus.RESPONDED


class TestRecordSubmission:
    """Tests for the atomic submission path."""

    async def test_records_response(self, store, open_list):
        await store.create_list(open_list)
        link = await store.save_link(_link("list-1", "Alfa", "tok-a"))

        updated_list, updated_link = await store.record_submission(link, {"P1": "10,00", "P2": ""})

        assert updated_link.status == LinkStatus.RESPONDED
        assert updated_list.responses == {"Alfa": {"P1": "10,00", "P2": ""}}
        fetched = await store.get_list("list-1")
        assert fetched.responses == {"Alfa": {"P1": "10,00", "P2": ""}}
        assert fetched.version == 1
        assert (await store.get_link_by_token("tok-a")).status == LinkStatus.RESPONDED

    async def test_replaces_previous_entries_of_supplier(self, store, open_list):
        await store.create_list(open_list)
        first = await store.save_link(_link("list-1", "Alfa", "tok-1"))
        second = await store.save_link(_link("list-1", "Alfa", "tok-2", minutes=1))

        await store.record_submission(first, {"P1": "10", "P2": "5"})
        await store.record_submission(second, {"P3": "3"})

        fetched = await store.get_list("list-1")
        assert fetched.responses == {"Alfa": {"P3": "3"}}

    async def test_already_responded(self, store, open_list):
        await store.create_list(open_list)
        link = await store.save_link(_link("list-1", "Alfa", "tok-a"))
        await store.record_submission(link, {"P1": "10"})

        with pytest.raises(LinkAlreadyRespondedError):
            await store.record_submission(link, {"P1": "8"})

        fetched = await store.get_list("list-1")
        assert fetched.responses == {"Alfa": {"P1": "10"}}

    async def test_finalized_list(self, store, open_list):
        await store.create_list(open_list)
        link = await store.save_link(_link("list-1", "Alfa", "tok-a"))
        await store.save_list(finalize_list(await store.get_list("list-1")))

        with pytest.raises(ListFinalizedError):
            await store.record_submission(link, {"P1": "10"})

        assert (await store.get_link_by_token("tok-a")).status == LinkStatus.PENDING
        assert (await store.get_list("list-1")).responses == {}

    async def test_concurrent_suppliers_both_kept(self, store, open_list):
        await store.create_list(open_list)
        alfa = await store.save_link(_link("list-1", "Alfa", "tok-a"))
        beta = await store.save_link(_link("list-1", "Beta", "tok-b"))

        await asyncio.gather(
            store.record_submission(alfa, {"P1": "10"}),
            store.record_submission(beta, {"P1": "9"}),
        )

        fetched = await store.get_list("list-1")
        assert fetched.responses["Alfa"] == {"P1": "10"}
        assert fetched.responses["Beta"] == {"P1": "9"}
        assert fetched.version == 2

    async def test_concurrent_same_link_single_winner(self, store, open_list):
        await store.create_list(open_list)
        link = await store.save_link(_link("list-1", "Alfa", "tok-a"))

        results = await asyncio.gather(
            store.record_submission(link, {"P1": "10"}),
            store.record_submission(link, {"P1": "8"}),
            return_exceptions=True,
        )

        errors = [r for r in results if isinstance(r, Exception)]
        assert len(errors) == 1
        assert isinstance(errors[0], LinkAlreadyRespondedError)
        fetched = await store.get_list("list-1")
        assert fetched.version == 1

    async def test_finalize_after_submission_detects_change(self, store, open_list):
        await store.create_list(open_list)
        link = await store.save_link(_link("list-1", "Alfa", "tok-a"))
        loaded = await store.get_list("list-1")

        await store.record_submission(link, {"P1": "10"})

        with pytest.raises(ConcurrentModificationError):
            await store.save_list(finalize_list(loaded))
