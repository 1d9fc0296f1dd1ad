"""Assembly of repositories, services and use cases for the application."""

from __future__ import annotations

from dataclasses import dataclass

from productapi.domain import ProductDomainService
from productapi.repository import InMemoryProductRepository, UUIDGenerator
from productapi.usecases import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductUseCase,
    UpdateProductUseCase,
)


@dataclass(frozen=True)
class UseCases:
    """The set of product use cases the API exposes."""

    create_product: CreateProductUseCase
    get_product: GetProductUseCase
    update_product: UpdateProductUseCase
    delete_product: DeleteProductUseCase
    list_product: ListProductUseCase


def setup_use_cases() -> UseCases:
    """Build use cases backed by one shared in-memory repository."""
    repository = InMemoryProductRepository()
    id_generator = UUIDGenerator()
    domain_service = ProductDomainService()
    return UseCases(
        create_product=CreateProductUseCase(repository, id_generator, domain_service),
        get_product=GetProductUseCase(repository),
        update_product=UpdateProductUseCase(repository, domain_service),
        delete_product=DeleteProductUseCase(repository),
        list_product=ListProductUseCase(repository),
    )