# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Catalog reads and writes with cache coherence."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from storefront.application.dto.catalog import CreateProductInput, UpdateProductInput
from storefront.application.services.product_cache import ProductCache
from storefront.application.use_cases.catalog.create_product import CreateProductUseCase
from storefront.application.use_cases.catalog.delete_product import DeleteProductUseCase
from storefront.application.use_cases.catalog.get_product import GetProductUseCase
from storefront.application.use_cases.catalog.list_products import ListProductsUseCase
from storefront.application.use_cases.catalog.update_product import UpdateProductUseCase
from storefront.domain.catalog.entities import Product
from storefront.domain.catalog.repositories import ProductRepository
from storefront.shared.errors.validation import validate_input


class CatalogService:
    def __init__(
        self,
        *,
        list_use_case: ListProductsUseCase,
        get_use_case: GetProductUseCase,
        create_use_case: CreateProductUseCase,
        update_use_case: UpdateProductUseCase,
        delete_use_case: DeleteProductUseCase,
    ) -> None:
        self._list_use_case = list_use_case
        self._get_use_case = get_use_case
        self._create_use_case = create_use_case
        self._update_use_case = update_use_case
        self._delete_use_case = delete_use_case

    @classmethod
    def build(cls, *, products: ProductRepository, cache: ProductCache) -> CatalogService:
        return cls(
            list_use_case=ListProductsUseCase(cache=cache),
            get_use_case=GetProductUseCase(cache=cache),
            create_use_case=CreateProductUseCase(products=products, cache=cache),
            update_use_case=UpdateProductUseCase(products=products, cache=cache),
            delete_use_case=DeleteProductUseCase(products=products, cache=cache),
        )

    def list_products(self) -> list[Product]:
        return self._list_use_case.execute()

    def get_product(self, slug: str) -> Product:
        return self._get_use_case.execute(slug)

    def create_product(self, data: CreateProductInput | Mapping[str, Any]) -> Product:
        return self._create_use_case.execute(validate_input(CreateProductInput, data))

    def update_product(
        self, slug: str, patch: UpdateProductInput | Mapping[str, Any]
    ) -> Product:
        return self._update_use_case.execute(slug, validate_input(UpdateProductInput, patch))

    def delete_product(self, slug: str) -> None:
        self._delete_use_case.execute(slug)
