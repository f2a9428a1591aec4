"""End-to-end tests for the HTTP routes through FastAPI's TestClient."""

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from src.shop.entities.cart_line import CartLineRepository


def _register(client: TestClient, email: str = "ada@example.com") -> dict:
    response = client.post(
        "/api/register", json={"name": "Ada", "email": email, "password": "pw"}
    )
    assert response.status_code == 201
    return response.json()["user"]


def _product(client: TestClient, name: str = "Mug", price: float = 10.0, stock: int = 5) -> dict:
    response = client.post(
        "/api/products", json={"name": name, "price": price, "stock": stock}
    )
    assert response.status_code == 201
    return response.json()


class TestHealth:
    def test_liveness(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"]["database"]["status"] == "healthy"

    def test_request_id_echoed(self, client: TestClient):
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"


class TestAccountRoutes:
    def test_register_hides_password(self, client: TestClient):
        user = _register(client)

        assert user["role"] == "customer"
        assert "password" not in user
        assert "password_hash" not in user

    def test_register_missing_field(self, client: TestClient):
        response = client.post("/api/register", json={"name": "Ada", "email": "a@example.com"})

        assert response.status_code == 400
        assert "message" in response.json()

    def test_register_unknown_field(self, client: TestClient):
        response = client.post(
            "/api/register",
            json={"name": "Ada", "email": "a@example.com", "password": "pw", "role": "admin"},
        )

        assert response.status_code == 400

    def test_duplicate_email_conflicts(self, client: TestClient):
        _register(client)

        response = client.post(
            "/api/register", json={"name": "Ada 2", "email": "ada@example.com", "password": "x"}
        )

        assert response.status_code == 409
        assert response.json()["message"]

    def test_admin_setup_and_login(self, client: TestClient):
        setup = client.post(
            "/api/admin/setup",
            json={"name": "Root", "email": "root@example.com", "password": "s3cret"},
        )
        assert setup.status_code == 201
        assert setup.json()["user"]["role"] == "admin"

        ok = client.post("/api/admin/login", json={"email": "root@example.com", "password": "s3cret"})
        assert ok.status_code == 200

        bad = client.post("/api/admin/login", json={"email": "root@example.com", "password": "nope"})
        assert bad.status_code == 401

    def test_list_customers(self, client: TestClient):
        _register(client)

        response = client.get("/api/users")

        assert response.status_code == 200
        assert [u["email"] for u in response.json()] == ["ada@example.com"]


class TestProductRoutes:
    def test_crud(self, client: TestClient):
        product = _product(client)
        assert product["category"] == "General"

        fetched = client.get(f"/api/products/{product['id']}")
        assert fetched.json()["name"] == "Mug"

        updated = client.put(f"/api/products/{product['id']}", json={"price": 12.0})
        assert updated.status_code == 200
        assert updated.json()["price"] == 12.0
        assert updated.json()["stock"] == 5

        deleted = client.delete(f"/api/products/{product['id']}")
        assert deleted.status_code == 200

        assert client.get(f"/api/products/{product['id']}").status_code == 404

    def test_invalid_id(self, client: TestClient):
        response = client.get("/api/products/not-an-id")

        assert response.status_code == 400
        assert "message" in response.json()

    def test_negative_price_rejected(self, client: TestClient):
        response = client.post("/api/products", json={"name": "Bad", "price": -1})

        assert response.status_code == 400

    def test_set_stock(self, client: TestClient):
        product = _product(client)

        response = client.patch(f"/api/products/{product['id']}/stock", json={"stock": 9})
        assert response.status_code == 200
        assert response.json()["stock"] == 9

        negative = client.patch(f"/api/products/{product['id']}/stock", json={"stock": -1})
        assert negative.status_code == 400
        assert client.get(f"/api/products/{product['id']}").json()["stock"] == 9

    def test_list_by_category(self, client: TestClient):
        client.post("/api/products", json={"name": "Tee", "price": 9, "category": "Apparel"})
        _product(client)

        response = client.get("/api/products", params={"category": "Apparel"})

        assert [p["name"] for p in response.json()] == ["Tee"]

    def test_oversized_stock_rejected(self, client: TestClient):
        product = _product(client)

        response = client.patch(f"/api/products/{product['id']}/stock", json={"stock": 2**70})
        assert response.status_code == 400

        ok = client.patch(f"/api/products/{product['id']}/stock", json={"stock": 3})
        assert ok.status_code == 200
        assert ok.json()["stock"] == 3

    def test_fields_are_camel_case(self, client: TestClient):
        product = _product(client)

        assert "createdAt" in product
        assert "created_at" not in product


class TestCartRoutes:
    @pytest.fixture
    def user(self, client: TestClient) -> dict:
        return _register(client)

    def _delta(self, client: TestClient, user: dict, product: dict, change: int):
        return client.post(
            "/api/cart",
            json={"userId": user["id"], "productId": product["id"], "quantityChange": change},
        )

    def test_add_then_increment(self, client: TestClient, user: dict):
        product = _product(client)

        first = self._delta(client, user, product, 1)
        assert first.status_code == 201
        assert first.json()["quantity"] == 1

        second = self._delta(client, user, product, 1)
        assert second.status_code == 200
        assert second.json()["quantity"] == 2
        assert second.json()["action"] == "updated"

    def test_oversized_delta_rejected(self, client: TestClient, user: dict):
        product = _product(client)

        response = self._delta(client, user, product, 2**70)
        assert response.status_code == 400

        ok = self._delta(client, user, product, 1)
        assert ok.status_code == 201

    def test_store_failure_maps_to_500(self, client: TestClient, user: dict, monkeypatch):
        def fail(self, user_id):
            raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

        monkeypatch.setattr(CartLineRepository, "totals", fail)

        response = client.get(f"/api/cart/{user['id']}")

        assert response.status_code == 500
        assert response.json()["message"] == "compute_total: store unavailable"
        assert "requestId" in response.json()

    def test_decrement_removes(self, client: TestClient, user: dict):
        product = _product(client)
        self._delta(client, user, product, 1)

        response = self._delta(client, user, product, -1)

        assert response.status_code == 200
        assert response.json()["action"] == "removed"
        assert response.json()["removedQuantity"] == 1

    def test_decrement_absent_line(self, client: TestClient, user: dict):
        product = _product(client)

        response = self._delta(client, user, product, -1)

        assert response.status_code == 404
        assert response.json()["message"] == "Cart item not found"

    def test_body_validation(self, client: TestClient, user: dict):
        product = _product(client)

        missing = client.post("/api/cart", json={"userId": user["id"], "productId": product["id"]})
        assert missing.status_code == 400

        non_numeric = client.post(
            "/api/cart",
            json={"userId": user["id"], "productId": product["id"], "quantityChange": "lots"},
        )
        assert non_numeric.status_code == 400

    def test_get_cart_with_totals(self, client: TestClient, user: dict):
        p1 = _product(client, name="P1", price=10.0)
        p2 = _product(client, name="P2", price=5.0)
        self._delta(client, user, p1, 2)
        self._delta(client, user, p2, 1)

        body = client.get(f"/api/cart/{user['id']}").json()

        assert body["totalItems"] == 3
        assert body["totalPrice"] == 25.0
        assert {item["name"] for item in body["items"]} == {"P1", "P2"}

        client.delete(f"/api/cart/{user['id']}/{p1['id']}")
        body = client.get(f"/api/cart/{user['id']}").json()
        assert (body["totalItems"], body["totalPrice"]) == (1, 5.0)

    def test_empty_cart(self, client: TestClient):
        body = client.get(f"/api/cart/{uuid.uuid4()}").json()

        assert body["items"] == []
        assert body["totalItems"] == 0
        assert body["totalPrice"] == 0

    def test_clear_cart(self, client: TestClient, user: dict):
        product = _product(client)
        self._delta(client, user, product, 3)

        response = client.delete(f"/api/cart/{user['id']}")
        assert response.json()["removedCount"] == 1

        again = client.delete(f"/api/cart/{user['id']}")
        assert again.status_code == 200
        assert again.json()["removedCount"] == 0

    def test_remove_missing_line(self, client: TestClient, user: dict):
        response = client.delete(f"/api/cart/{user['id']}/{uuid.uuid4()}")

        assert response.status_code == 404

    def test_product_delete_cascades(self, client: TestClient, user: dict):
        product = _product(client)
        self._delta(client, user, product, 2)

        response = client.delete(f"/api/products/{product['id']}")

        assert response.json()["removedCartLines"] == 1
        assert client.get(f"/api/cart/{user['id']}").json()["totalItems"] == 0
