import uuid

import pytest
from flask import Flask

from productapi.api import ProductHandler, configure_api_routes
from productapi.wiring import setup_use_cases


@pytest.fixture
def app():
    flask_app = Flask(__name__)
    configure_api_routes(flask_app, setup_use_cases())
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


def _create(client, name):
    response = client.post("/api/v1/product", json={"name": name})
    assert response.status_code == 201
    return response.get_json()["data"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "message": "Src/simple API is running"}


def test_docs_lists_product_endpoints(client):
    body = client.get("/api/v1/docs").get_json()
    assert body["version"] == "1.0.0"
    assert body["message"] == "Src/simple API Documentation"
    assert body["endpoints"]["product"]["DELETE /api/v1/product/:id"] == "Delete product"
    assert len(body["endpoints"]["product"]) == 5


def test_create_generates_uuid(client):
    response = client.post("/api/v1/product", json={"name": "Widget"})
    assert response.status_code == 201
    body = response.get_json()
    assert body["message"] == "Product created successfully"
    assert body["data"]["name"] == "Widget"
    assert str(uuid.UUID(body["data"]["id"])) == body["data"]["id"]


def test_create_keeps_given_id(client):
    response = client.post("/api/v1/product", json={"id": "abc", "name": "Widget"})
    assert response.get_json()["data"]["id"] == "abc"
    assert client.get("/api/v1/product/abc").get_json()["data"]["name"] == "Widget"


def test_create_rejects_empty_name(client):
    response = client.post("/api/v1/product", json={"name": ""})
    assert response.status_code == 500
    assert response.get_json() == {
        "error": "Failed to create product",
        "details": "invalid product entity",
    }


def test_create_rejects_malformed_body(client):
    response = client.post(
        "/api/v1/product", data="{not json", content_type="application/json"
    )
    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid request body"


def test_create_rejects_non_json_content(client):
    response = client.post("/api/v1/product", data="name=Widget")
    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid request body"


def test_create_rejects_wrong_field_type(client):
    response = client.post("/api/v1/product", json={"name": 5})
    assert response.status_code == 400
    assert "name" in response.get_json()["details"]


def test_get_returns_created_product(client):
    created = _create(client, "Widget")
    response = client.get(f"/api/v1/product/{created['id']}")
    assert response.status_code == 200
    assert response.get_json() == {"data": created}


def test_get_missing_is_404(client):
    response = client.get("/api/v1/product/nope")
    assert response.status_code == 404
    assert response.get_json() == {
        "error": "Product not found",
        "details": "product not found",
    }


def test_list_empty(client):
    response = client.get("/api/v1/product")
    assert response.status_code == 200
    assert response.get_json() == {"data": []}


def test_list_returns_all(client):
    _create(client, "Widget")
    _create(client, "Gadget")
    names = sorted(p["name"] for p in client.get("/api/v1/product").get_json()["data"])
    assert names == ["Gadget", "Widget"]


def test_update_uses_path_id(client):
    created = _create(client, "Widget")
    response = client.put(
        f"/api/v1/product/{created['id']}", json={"id": "other", "name": "Gadget"}
    )
    assert response.status_code == 200
    body = response.get_json()
    assert body["message"] == "Product updated successfully"
    assert body["data"]["id"] == created["id"]
    fetched = client.get(f"/api/v1/product/{created['id']}").get_json()["data"]
    assert fetched["name"] == "Gadget"
    assert client.get("/api/v1/product/other").status_code == 404


def test_update_keeps_timestamp_from_body(client):
    created = _create(client, "Widget")
    response = client.put(
        f"/api/v1/product/{created['id']}",
        json={"name": "Gadget", "created_at": "2024-01-02T03:04:05.5Z"},
    )
    assert response.get_json()["data"]["created_at"] == "2024-01-02T03:04:05.5Z"


def test_update_rejects_bad_timestamp(client):
    created = _create(client, "Widget")
    response = client.put(
        f"/api/v1/product/{created['id']}",
        json={"name": "Gadget", "created_at": "yesterday"},
    )
    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid request body"


def test_update_missing_is_500(client):
    response = client.put("/api/v1/product/nope", json={"name": "Gadget"})
    assert response.status_code == 500
    assert response.get_json() == {
        "error": "Failed to update product",
        "details": "product not found",
    }


def test_update_rejects_empty_name(client):
    created = _create(client, "Widget")
    response = client.put(f"/api/v1/product/{created['id']}", json={"name": ""})
    assert response.status_code == 500
    assert response.get_json()["details"] == "invalid product entity"


def test_delete_then_get_is_404(client):
    created = _create(client, "Widget")
    response = client.delete(f"/api/v1/product/{created['id']}")
    assert response.status_code == 200
    assert response.get_json() == {"message": "Product deleted successfully"}
    assert client.get(f"/api/v1/product/{created['id']}").status_code == 404


def test_delete_missing_is_500(client):
    response = client.delete("/api/v1/product/nope")
    assert response.status_code == 500
    assert response.get_json()["error"] == "Failed to delete product"


def test_handler_requires_id():
    handler = ProductHandler(setup_use_cases())
    flask_app = Flask(__name__)
    with flask_app.test_request_context():
        response, status = handler.get_product("")
        assert status == 400
        assert response.get_json() == {"error": "ID parameter is required"}