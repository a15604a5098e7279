# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.application.dto.catalog import UpdateProductInput
from storefront.application.services.product_cache import ProductCache
from storefront.domain.catalog.entities import Product
from storefront.domain.catalog.exceptions import DuplicateSlugError, ProductNotFoundError
from storefront.domain.catalog.repositories import ProductRepository
from storefront.shared.logging import logger


class UpdateProductUseCase:
    def __init__(self, *, products: ProductRepository, cache: ProductCache) -> None:
        self._products = products
        self._cache = cache

    def execute(self, slug: str, patch: UpdateProductInput) -> Product:
        existing = self._cache.get_by_slug(slug)
        changes = patch.changes()

        new_slug = changes.get("slug")
        if new_slug is not None and new_slug != existing.slug:
            if self._products.find_by_slug(new_slug) is not None:
                raise DuplicateSlugError(new_slug)

        updated = self._products.update_by_slug(slug, changes)
        if updated is None:
            # Deleted between the lookup and the write.
            self._cache.invalidate(slug)
            raise ProductNotFoundError(slug)

        self._cache.invalidate(slug)
        if updated.slug != slug:
            self._cache.invalidate(updated.slug)
        self._cache.invalidate_all()
        logger.info(f"catalog.update: ok slug={slug} fields={sorted(changes)}")
        return updated
