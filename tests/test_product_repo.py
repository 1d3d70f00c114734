import pytest
from fastapi import HTTPException

from storefront.models.product import Product
from storefront.schemas.product import ProductCreate
from storefront.services.product_service import ProductService

SEED_SIZE = 59


def test_get_all_returns_seed_in_insertion_order(session, product_repo):
    products = product_repo.get_all(session)

    assert len(products) == SEED_SIZE
    assert [p.id for p in products] == list(range(1, SEED_SIZE + 1))
    assert products[0].sku == "MP-001"
    assert products[-1].sku == "AC-015"


def test_get_by_id(session, product_repo):
    product = product_repo.get_by_id(session, 1)

    assert product.name == "Navy Piqué Polo"
    assert product.price == "1499"
    assert product.colors == ["Navy", "White", "Gray"]
    assert product.in_stock is True
    assert product.created_at is not None

    assert product_repo.get_by_id(session, 9999) is None


@pytest.mark.parametrize("category", ["Men", "men", "MEN", "Kids", "accessories"])
def test_get_by_category_is_case_insensitive_exact(session, product_repo, category):
    found = product_repo.get_by_category(session, category)
    expected = [
        p for p in product_repo.get_all(session)
        if p.category.lower() == category.lower()
    ]

    assert found
    assert [p.id for p in found] == [p.id for p in expected]


def test_get_by_category_does_not_match_substrings(session, product_repo):
    assert product_repo.get_by_category(session, "Me") == []
    assert product_repo.get_by_category(session, "Women ") == []


def test_search_matches_name_description_category_and_tags(session, product_repo):
    hoodies = product_repo.search(session, "HOODIE")
    assert {p.sku for p in hoodies} == {"WH-001", "WH-002", "WH-003", "KH-001", "KH-002"}

    best = product_repo.search(session, "best_seller")
    assert {p.sku for p in best} == {"MP-001", "WP-002"}

    kids = product_repo.search(session, "kids")
    assert {p.category for p in kids} == {"Kids"}
    assert len(kids) == 14


def test_search_without_hits(session, product_repo):
    assert product_repo.search(session, "no-such-thing") == []


def test_create_product_rejects_duplicate_sku(session, product_repo):
    service = ProductService(product_repo)
    payload = ProductCreate(sku="MP-001", name="Copy", category="Men", price="10")

    with pytest.raises(HTTPException) as exc:
        service.create_product(session, payload)
    assert exc.value.status_code == 400


def test_create_product_assigns_id_and_defaults(session, product_repo):
    service = ProductService(product_repo)
    payload = ProductCreate.model_validate(
        {"sku": "ZZ-001", "name": "Test Cap", "category": "Accessories", "price": "249.50"}
    )

    created = service.create_product(session, payload)

    assert isinstance(created, Product)
    assert created.id == SEED_SIZE + 1
    assert created.in_stock is True
    assert created.stock_count == 0
    assert created.colors is None


def test_seed_catalog_skips_non_empty_store(session, product_repo):
    from storefront.core.config import get_settings

    service = ProductService(product_repo)
    assert service.seed_catalog(session, get_settings().SEED_PRODUCTS_PATH) == 0
    assert product_repo.count(session) == SEED_SIZE


@pytest.mark.parametrize("price", ["", "abc", "-5", "NaN"])
def test_product_create_rejects_bad_prices(price):
    with pytest.raises(ValueError):
        ProductCreate(sku="X-1", name="X", category="Men", price=price)
