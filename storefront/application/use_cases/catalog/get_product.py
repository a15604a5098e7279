from __future__ import annotations

from storefront.application.services.product_cache import ProductCache
from storefront.domain.catalog.entities import Product


class GetProductUseCase:
    def __init__(self, *, cache: ProductCache) -> None:
        self._cache = cache

    def execute(self, slug: str) -> Product:
        # Slugs are used verbatim: no trimming or case folding.
        return self._cache.get_by_slug(slug)
