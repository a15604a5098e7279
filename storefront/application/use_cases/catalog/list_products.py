from __future__ import annotations

from storefront.application.services.product_cache import ProductCache
from storefront.domain.catalog.entities import Product


class ListProductsUseCase:
    def __init__(self, *, cache: ProductCache) -> None:
        self._cache = cache

    def execute(self) -> list[Product]:
        return self._cache.get_all()
