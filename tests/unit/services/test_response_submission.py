"""Tests for supplier response submission."""

import pytest

from cotacao.core.entities import LinkStatus
from cotacao.core.exceptions import (
    EmptyResponseError,
    LinkAlreadyRespondedError,
    ListFinalizedError,
)
from cotacao.core.services.response_submission import (
    clean_entries,
    submit_response,
    validate_submission,
)


class TestValidateSubmission:
    def test_responded_link_checked_first(self, responded_link, finalized_list):
        with pytest.raises(LinkAlreadyRespondedError):
            validate_submission(responded_link, finalized_list, {})

    def test_finalized_list(self, pending_link, finalized_list):
        with pytest.raises(ListFinalizedError):
            validate_submission(pending_link, finalized_list, {"P1": "1"})

    @pytest.mark.parametrize(
        "entries",
        [{}, {"P1": ""}, {"P1": "   ", "P2": None}, {"P1": "\t"}],
    )
    def test_all_blank(self, pending_link, open_list, entries):
        with pytest.raises(EmptyResponseError):
            validate_submission(pending_link, open_list, entries)

    def test_returns_cleaned_entries(self, pending_link, open_list):
        cleaned = validate_submission(pending_link, open_list, {"P2": "5", "P1": "", "P9": "1"})
        assert cleaned == {"P1": "", "P2": "5"}


class TestCleanEntries:
    def test_unknown_codes_dropped(self, open_list):
        assert clean_entries(open_list, {"P1": "1", "OLD": "2"}) == {"P1": "1"}

    def test_product_order(self, open_list):
        assert list(clean_entries(open_list, {"P3": "3", "P1": "1"})) == ["P1", "P3"]

    def test_none_becomes_blank(self, open_list):
        assert clean_entries(open_list, {"P1": None}) == {"P1": ""}


class TestSubmitResponse:
    def test_new_supplier_added(self, pending_link, quoted_list):
        result = submit_response(pending_link, quoted_list, {"P1": "8,00"})
        assert result.quotation_list.responses["Gama"] == {"P1": "8,00"}
        assert result.quotation_list.supplier_names == ["Alfa", "Beta", "Gama"]
        assert result.link.status == LinkStatus.RESPONDED

    def test_other_suppliers_untouched(self, pending_link, quoted_list):
        result = submit_response(pending_link, quoted_list, {"P1": "8,00"})
        assert result.quotation_list.responses["Alfa"] == quoted_list.responses["Alfa"]
        assert result.quotation_list.responses["Beta"] == quoted_list.responses["Beta"]

    def test_same_supplier_replaced_as_a_whole(self, pending_link, quoted_list):
        link = pending_link.model_copy(update={"supplier_name": "Alfa"})
        result = submit_response(link, quoted_list, {"P3": "4"})
        assert result.quotation_list.responses["Alfa"] == {"P3": "4"}

    def test_inputs_not_mutated(self, pending_link, quoted_list):
        before = {s: dict(p) for s, p in quoted_list.responses.items()}
        submit_response(pending_link, quoted_list, {"P1": "8"})
        assert quoted_list.responses == before
        assert pending_link.status == LinkStatus.PENDING

    def test_blank_submission_leaves_link_pending(self, pending_link, open_list):
        with pytest.raises(EmptyResponseError):
            submit_response(pending_link, open_list, {"P1": "", "P2": "  "})
        assert pending_link.status == LinkStatus.PENDING

    def test_responded_link_never_mutates(self, responded_link, quoted_list):
        before = {s: dict(p) for s, p in quoted_list.responses.items()}
        with pytest.raises(LinkAlreadyRespondedError):
            submit_response(responded_link, quoted_list, {"P1": "1"})
        assert quoted_list.responses == before
