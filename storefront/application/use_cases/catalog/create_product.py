# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.application.dto.catalog import CreateProductInput
from storefront.application.services.product_cache import ProductCache
from storefront.domain.catalog.entities import Product
from storefront.domain.catalog.exceptions import DuplicateSlugError
from storefront.domain.catalog.repositories import ProductRepository
from storefront.shared.logging import logger


class CreateProductUseCase:
    def __init__(self, *, products: ProductRepository, cache: ProductCache) -> None:
        self._products = products
        self._cache = cache

    def execute(self, data: CreateProductInput) -> Product:
        if self._products.find_by_slug(data.slug) is not None:
            raise DuplicateSlugError(data.slug)

        product = self._products.add(data.to_entity())
        self._cache.invalidate_all()
        logger.info(f"catalog.create: ok slug={product.slug} id={product.id}")
        return product
