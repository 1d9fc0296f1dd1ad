# productapi

A small JSON HTTP API for creating, reading, updating, deleting and listing
products, built on Flask. Products are kept in memory for the lifetime of the
server process.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
productapi
```

By default the server listens on `0.0.0.0`, port 3000. Both can be changed:

```
productapi --host 127.0.0.1 --port 8080
```

Every response carries `Access-Control-Allow-Origin: *`, CORS preflight
requests (`OPTIONS` with `Access-Control-Request-Method`) are answered with
`204`, and each request is logged with its status, duration, client address,
method and path.

## Endpoints

| Method | Path                   | Description            |
|--------|------------------------|------------------------|
| GET    | `/health`              | Health check           |
| GET    | `/api/v1/docs`         | List of endpoints      |
| GET    | `/api/v1/product`      | List products          |
| GET    | `/api/v1/product/<id>` | Get a product by ID    |
| POST   | `/api/v1/product`      | Create a new product   |
| PUT    | `/api/v1/product/<id>` | Update a product       |
| DELETE | `/api/v1/product/<id>` | Delete a product       |

A product has the fields `id`, `name`, `created_at` and `updated_at`; the
timestamps are RFC 3339 strings in UTC. The name must not be empty. When no
`id` is given on creation, a UUID is generated. The store sets `created_at`
and `updated_at` when a product is created and refreshes `updated_at` on
update.

Responses:

- `POST` answers `201` with `{"message": "Product created successfully", "data": {...}}`.
- `PUT` and `DELETE` answer `200` with a `message`; `PUT` also returns the
  updated product under `data`.
- `GET /api/v1/product/<id>` answers `404` with `"error": "Product not found"`
  when the product does not exist.
- A body that is not a JSON object, or has fields of the wrong type, gets
  `400` with `"error": "Invalid request body"` and a `details` field.
- Failures of create, update, delete and list (for example an empty name, or
  updating or deleting a product that does not exist) get `500` with an
  `error` and a `details` field.
- Unknown routes get `404` with `"error": "Cannot <METHOD> <path>"`.

## Using it from Python

The application can be built and served from your own code:

```python
from productapi.wiring import setup_use_cases
from productapi.server import build_app

app = build_app(setup_use_cases())
client = app.test_client()
response = client.post("/api/v1/product", json={"name": "Widget"})
print(response.status_code, response.get_json())
```

The building blocks are also available on their own:

- `productapi.domain`: `Product`, `new_product`, `ProductDomainService` and
  `InvalidProductError`.
- `productapi.repository`: `InMemoryProductRepository`, `UUIDGenerator` and
  `ProductNotFoundError`.
- `productapi.usecases`: `CreateProductUseCase`, `GetProductUseCase`,
  `UpdateProductUseCase`, `DeleteProductUseCase` and `ListProductUseCase`.
- `productapi.wiring`: `UseCases` and `setup_use_cases`.
- `productapi.api`: `ProductHandler`, `register_product_routes` and
  `configure_api_routes`.

## Limitations

There is no persistent storage: all products are lost when the process
stops. The server is Flask's built-in development server.