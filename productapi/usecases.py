"""Application use cases for managing products."""

from __future__ import annotations

from typing import Protocol

from productapi.domain import Product, ProductDomainService


class _ProductRepository(Protocol):
    def create(self, product: Product) -> Product: ...

    def get_by_id(self, product_id: str) -> Product: ...

    def list(self) -> list[Product]: ...

    def update(self, product: Product) -> Product: ...

    def delete(self, product_id: str) -> None: ...


class _IDGenerator(Protocol):
    def generate_id(self) -> str: ...


class CreateProductUseCase:
    """Validate and store a new product."""

    def __init__(
        self,
        product_repository: _ProductRepository,
        id_generator: _IDGenerator,
        product_domain_service: ProductDomainService,
    ) -> None:
        self._repository = product_repository
        self._id_generator = id_generator
        self._domain_service = product_domain_service

    def execute(self, product: Product) -> Product:
        if not product.id:
            product.id = self._id_generator.generate_id()
        self._domain_service.validate_product(product)
        return self._repository.create(product)


class GetProductUseCase:
    """Fetch one product by id."""

    def __init__(self, product_repository: _ProductRepository) -> None:
        self._repository = product_repository

    def execute(self, product_id: str) -> Product:
        return self._repository.get_by_id(product_id)


class UpdateProductUseCase:
    """Validate and replace an existing product."""

    def __init__(
        self,
        product_repository: _ProductRepository,
        product_domain_service: ProductDomainService,
    ) -> None:
        self._repository = product_repository
        self._domain_service = product_domain_service

    def execute(self, product: Product) -> Product:
        self._repository.get_by_id(product.id)
        self._domain_service.validate_product(product)
        return self._repository.update(product)


class DeleteProductUseCase:
    """Remove an existing product."""

    def __init__(self, product_repository: _ProductRepository) -> None:
        self._repository = product_repository

    def execute(self, product_id: str) -> None:
        self._repository.get_by_id(product_id)
        self._repository.delete(product_id)


class ListProductUseCase:
    """List all products."""

    def __init__(self, product_repository: _ProductRepository) -> None:
        self._repository = product_repository

    def execute(self) -> list[Product]:
        return self._repository.list()