"""Integration tests for the product, collection and category endpoints."""

import pytest


@pytest.fixture()
def catalogue(trex_id, raptor_id, stego_id):
    return {"trex": trex_id, "raptor": raptor_id, "stego": stego_id}


class TestProductEndpoints:
    def test_list_products(self, client, catalogue):
        response = client.get("/api/products")
        assert response.status_code == 200
        assert len(response.json()) == 3

    def test_product_payload_is_camel_case(self, client, catalogue):
        product = client.get(f"/api/products/{catalogue['trex']}").json()
        assert product["id"] == catalogue["trex"]
        assert product["name"] == "T-Rex Trappers"
        assert product["price"] == 129.99
        assert product["imageUrl"] == "https://example.com/trex.jpg"
        assert product["imageUrls"] == ["https://example.com/trex.jpg"]
        assert product["colors"] == ["#39FF14", "#FF5714"]
        assert product["sizes"] == ["9", "10"]
        assert product["isFeatured"] is True
        assert product["badge"] == "HOT!"
        assert product["dinoFacts"].startswith("Grip pattern")
        assert product["stock"] == 25

    def test_featured_products(self, client, catalogue):
        response = client.get("/api/products/featured")
        assert response.status_code == 200
        assert {p["name"] for p in response.json()} == {"T-Rex Trappers", "Volcano Velociraptors"}

    def test_unknown_product(self, client):
        response = client.get("/api/products/3f1e1b8e-0000-4000-8000-000000000000")
        assert response.status_code == 404
        assert "message" in response.json()

    def test_malformed_product_id(self, client):
        response = client.get("/api/products/not-an-id")
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid product ID"}

    def test_empty_catalogue(self, client):
        response = client.get("/api/products")
        assert response.status_code == 200
        assert response.json() == []


class TestCollectionAndCategoryEndpoints:
    def test_collection(self, client, catalogue):
        response = client.get("/api/collections/herbivore collection")
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Stegosaurus Steppers"]

    def test_unknown_collection_is_empty(self, client, catalogue):
        response = client.get("/api/collections/Sky Series")
        assert response.status_code == 200
        assert response.json() == []

    def test_category(self, client, catalogue):
        response = client.get("/api/categories/RUNNING")
        assert response.status_code == 200
        assert {p["name"] for p in response.json()} == {"T-Rex Trappers", "Volcano Velociraptors"}
