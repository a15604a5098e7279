# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.application.services.product_cache import ProductCache
from storefront.domain.catalog.exceptions import ProductNotFoundError
from storefront.domain.catalog.repositories import ProductRepository
from storefront.shared.logging import logger


class DeleteProductUseCase:
    def __init__(self, *, products: ProductRepository, cache: ProductCache) -> None:
        self._products = products
        self._cache = cache

    def execute(self, slug: str) -> None:
        self._cache.get_by_slug(slug)

        deleted = self._products.delete_by_slug(slug)
        self._cache.invalidate(slug)
        self._cache.invalidate_all()
        if not deleted:
            raise ProductNotFoundError(slug)
        logger.info(f"catalog.delete: ok slug={slug}")
