def seed(create_product, count, **overrides):
    return [
        create_product(name=f"Product {i:02d}", sustainabilityScore=i, **overrides)
        for i in range(count)
    ]


def test_default_listing_sorted_by_score_desc(client, create_product):
    seed(create_product, 3)
    body = client.get("/api/products").json()
    scores = [p["sustainabilityScore"] for p in body["products"]]
    assert scores == [2, 1, 0]


def test_pagination_summary(client, create_product):
    seed(create_product, 25)

    first = client.get("/api/products", params={"page": 1, "limit": 10}).json()
    assert len(first["products"]) == 10
    assert first["pagination"] == {
        "currentPage": 1,
        "totalPages": 3,
        "totalProducts": 25,
        "hasNextPage": True,
        "hasPrevPage": False,
    }

    last = client.get("/api/products", params={"page": 3, "limit": 10}).json()
    assert len(last["products"]) == 5
    assert last["pagination"]["hasNextPage"] is False
    assert last["pagination"]["hasPrevPage"] is True


def test_pages_do_not_overlap(client, create_product):
    seed(create_product, 12, category="Energy")
    page1 = client.get("/api/products", params={"limit": 5, "page": 1}).json()["products"]
    page2 = client.get("/api/products", params={"limit": 5, "page": 2}).json()["products"]
    ids1 = {p["_id"] for p in page1}
    ids2 = {p["_id"] for p in page2}
    assert not ids1 & ids2


def test_page_past_the_end_is_empty(client, create_product):
    seed(create_product, 3)
    body = client.get("/api/products", params={"page": 50, "limit": 10}).json()
    assert body["products"] == []
    assert body["pagination"]["totalProducts"] == 3
    assert body["pagination"]["hasNextPage"] is False


def test_large_limit_is_accepted(client, create_product):
    seed(create_product, 4)
    body = client.get("/api/products", params={"limit": 100000}).json()
    assert len(body["products"]) == 4
    assert body["pagination"]["totalPages"] == 1


def test_huge_page_returns_empty_page(client, create_product):
    seed(create_product, 3)
    r = client.get("/api/products", params={"page": 10 ** 18, "limit": 10})
    assert r.status_code == 200
    body = r.json()
    assert body["products"] == []
    assert body["pagination"] == {
        "currentPage": 10 ** 18,
        "totalPages": 1,
        "totalProducts": 3,
        "hasNextPage": False,
        "hasPrevPage": True,
    }


def test_huge_limit_returns_everything(client, create_product):
    seed(create_product, 3)
    r = client.get("/api/products", params={"limit": 10 ** 19})
    assert r.status_code == 200
    body = r.json()
    assert len(body["products"]) == 3
    assert body["pagination"]["totalPages"] == 1
    assert body["pagination"]["hasNextPage"] is False


def test_non_positive_page_or_limit_rejected(client):
    r = client.get("/api/products", params={"page": 0})
    assert r.status_code == 400
    assert r.json()["errors"] == ["Page must be at least 1"]
    r = client.get("/api/products", params={"limit": 0})
    assert r.status_code == 400
    assert r.json()["errors"] == ["Limit must be at least 1"]


def test_category_filter_and_all(client, create_product):
    create_product(name="Panel", category="Energy")
    create_product(name="Shirt", category="Clothing")

    energy = client.get("/api/products", params={"category": "Energy"}).json()["products"]
    assert [p["name"] for p in energy] == ["Panel"]

    everything = client.get("/api/products").json()["products"]
    all_filter = client.get("/api/products", params={"category": "All"}).json()["products"]
    assert [p["_id"] for p in all_filter] == [p["_id"] for p in everything]
    assert len(all_filter) == 2


def test_search_is_case_insensitive_on_description(client, create_product):
    create_product(name="Toothbrush", description="Bamboo handle")
    create_product(name="Water Bottle", description="Stainless steel")

    found = client.get("/api/products", params={"search": "bamboo"}).json()
    assert [p["name"] for p in found["products"]] == ["Toothbrush"]
    assert found["pagination"]["totalProducts"] == 1


def test_search_matches_name(client, create_product):
    create_product(name="Solar Charger", description="Portable")
    create_product(name="Wool Socks", description="Warm")
    found = client.get("/api/products", params={"search": "SOLAR"}).json()["products"]
    assert [p["name"] for p in found] == ["Solar Charger"]


def test_search_wildcards_are_literal(client, create_product):
    create_product(name="100% Recycled Bag", description="Tote")
    create_product(name="Recycled Paper", description="A4 ream")
    found = client.get("/api/products", params={"search": "100%"}).json()["products"]
    assert [p["name"] for p in found] == ["100% Recycled Bag"]


def test_sort_by_name_ascending(client, create_product):
    for name in ("Cedar Box", "Acorn Lamp", "Birch Tray"):
        create_product(name=name)
    body = client.get("/api/products", params={"sortBy": "name", "sortOrder": "asc"}).json()
    assert [p["name"] for p in body["products"]] == ["Acorn Lamp", "Birch Tray", "Cedar Box"]


def test_unknown_sort_field_falls_back_to_id_order(client, create_product):
    created = [create_product(name=name) for name in ("Cedar Box", "Acorn Lamp", "Birch Tray")]
    r = client.get("/api/products", params={"sortBy": "colour"})
    assert r.status_code == 200
    assert [p["_id"] for p in r.json()["products"]] == sorted(p["_id"] for p in created)


def test_sort_by_id_descending(client, create_product):
    created = [create_product(name=f"Item {i}") for i in range(3)]
    r = client.get("/api/products", params={"sortBy": "_id", "sortOrder": "desc"})
    assert r.status_code == 200
    ids = [p["_id"] for p in r.json()["products"]]
    assert ids == sorted((p["_id"] for p in created), reverse=True)


def test_categories_lists_only_used_values(client, create_product):
    create_product(category="Energy")
    create_product(category="Clothing")
    create_product(category="Energy")
    assert client.get("/api/products/categories").json() == ["Clothing", "Energy"]


def test_categories_empty_catalog(client):
    assert client.get("/api/products/categories").json() == []
