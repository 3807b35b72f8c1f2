"""Pytest configuration and shared fixtures."""

import pytest

from cotacao.core.entities import LinkStatus, ListStatus, Product, QuotationList, ResponseLink


@pytest.fixture
def sample_products() -> list[Product]:
    """Three products in catalog order."""
    return [
        Product(internal_code="P1", description="Arroz 5kg", barcode="7891000000011"),
        Product(internal_code="P2", description="Feijão 1kg", barcode="7891000000028"),
        Product(internal_code="P3", description="Óleo 900ml", barcode="7891000000035"),
    ]


@pytest.fixture
def open_list(sample_products: list[Product]) -> QuotationList:
    """Open list without responses."""
    return QuotationList(id="list-1", name="Semana 12", products=sample_products)


@pytest.fixture
def quoted_list(sample_products: list[Product]) -> QuotationList:
    """Open list with two supplier responses."""
    return QuotationList(
        id="list-1",
        name="Semana 12",
        products=sample_products,
        responses={
            "Alfa": {"P1": "10,00", "P2": "7.50", "P3": ""},
            "Beta": {"P1": "9,90", "P2": "7,5", "P3": "abc"},
        },
        version=2,
    )


@pytest.fixture
def finalized_list(quoted_list: QuotationList) -> QuotationList:
    return quoted_list.model_copy(update={"status": ListStatus.FINALIZED})


@pytest.fixture
def pending_link() -> ResponseLink:
    return ResponseLink(
        id="link-1",
        list_id="list-1",
        supplier_name="Gama",
        token="tok-gama",
        status=LinkStatus.PENDING,
    )


@pytest.fixture
def responded_link(pending_link: ResponseLink) -> ResponseLink:
    return pending_link.model_copy(update={"status": LinkStatus.RESPONDED})
