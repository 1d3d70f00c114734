SEED_SIZE = 59


def test_health(client):
    assert client.get("/").json() == {"status": "ok", "service": "storefront"}


def test_list_products_uses_camel_case(client):
    response = client.get("/api/products")

    assert response.status_code == 200
    products = response.json()
    assert len(products) == SEED_SIZE

    first = products[0]
    assert first["id"] == 1
    assert first["sku"] == "MP-001"
    assert first["price"] == "1499"
    assert first["inStock"] is True
    assert first["stockCount"] == 50
    assert first["originalPrice"] is None
    assert "createdAt" in first
    assert "in_stock" not in first


def test_list_products_by_category(client):
    products = client.get("/api/products", params={"category": "kids"}).json()

    assert len(products) == 14
    assert {p["category"] for p in products} == {"Kids"}


def test_search_takes_precedence_over_category(client):
    products = client.get(
        "/api/products", params={"search": "hoodie", "category": "Accessories"}
    ).json()

    assert {p["sku"] for p in products} == {"WH-001", "WH-002", "WH-003", "KH-001", "KH-002"}


def test_blank_search_falls_back_to_category(client):
    products = client.get("/api/products", params={"search": "", "category": "Men"}).json()

    assert len(products) == 15


def test_list_products_with_filters_and_sort(client):
    products = client.get(
        "/api/products",
        params={"category": "Men", "sizes": "M", "maxPrice": 1400, "sortBy": "price_low"},
    ).json()

    prices = [float(p["price"]) for p in products]
    assert products
    assert prices == sorted(prices)
    assert all(price <= 1400 for price in prices)
    assert all("M" in p["sizes"] for p in products)


def test_list_products_repeated_query_params(client):
    products = client.get(
        "/api/products", params=[("categories", "Men"), ("categories", "Women")]
    ).json()

    assert len(products) == 30


def test_best_sellers_sort(client):
    products = client.get("/api/products", params={"sortBy": "best_sellers"}).json()

    assert [p["sku"] for p in products[:2]] == ["MP-001", "WP-002"]
    assert len(products) == SEED_SIZE


def test_unknown_sort_is_400(client):
    response = client.get("/api/products", params={"sortBy": "cheapest"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid request data"
    assert body["details"]


def test_inverted_price_range_is_400(client):
    response = client.get("/api/products", params={"minPrice": 900, "maxPrice": 100})

    assert response.status_code == 400


def test_get_product(client):
    response = client.get("/api/products/17")

    assert response.status_code == 200
    assert response.json()["sku"] == "WP-002"


def test_get_missing_product_is_404(client):
    response = client.get("/api/products/9999")

    assert response.status_code == 404
    assert response.json() == {"error": "Product not found"}


def test_get_product_with_bad_id_is_400(client):
    response = client.get("/api/products/abc")

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request data"


def test_categories_are_fixed(client):
    response = client.get("/api/categories")

    assert response.status_code == 200
    assert response.json() == [
        {"name": "Men", "count": 15},
        {"name": "Women", "count": 15},
        {"name": "Kids", "count": 15},
        {"name": "Accessories", "count": 15},
    ]


def test_unknown_route_uses_error_shape(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert "error" in response.json()


def test_unexpected_failure_is_500_with_route_message(client, monkeypatch):
    from storefront.routers import products as products_router

    def boom(*args, **kwargs):
        raise RuntimeError("store exploded")

    monkeypatch.setattr(products_router.service, "list_products", boom)

    response = client.get("/api/products")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch products"}
