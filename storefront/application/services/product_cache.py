# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Cache-aside reads over the product store.

Entries are JSON snapshots kept for a fixed TTL. The store stays
authoritative: a write commits first and the matching keys are dropped
afterwards, so a reader racing a writer can re-populate a stale entry. That
entry lives until the next invalidation or TTL expiry, whichever comes first.
Backend failures degrade reads to the store and never fail a write.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from storefront.application.interfaces import KeyValueCache
from storefront.domain.catalog.entities import Product
from storefront.domain.catalog.exceptions import ProductNotFoundError
from storefront.domain.catalog.repositories import ProductRepository
from storefront.shared.errors.base import CacheUnavailableError
from storefront.shared.logging import logger

ALL_PRODUCTS_KEY = "all_products"
DEFAULT_TTL_SECONDS = 3600


def product_key(slug: str) -> str:
    return f"product:{slug}"


class ProductSnapshot(BaseModel):
    id: int
    name: str
    slug: str
    description: str
    price: int
    image: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, frozen=True)

    def to_entity(self) -> Product:
        return Product(**self.model_dump())


_SNAPSHOT = TypeAdapter(ProductSnapshot)
_SNAPSHOT_LIST = TypeAdapter(list[ProductSnapshot])


def _encode_one(product: Product) -> bytes:
    return _SNAPSHOT.dump_json(ProductSnapshot.model_validate(product))


def _encode_many(products: Sequence[Product]) -> bytes:
    return _SNAPSHOT_LIST.dump_json([ProductSnapshot.model_validate(p) for p in products])


class ProductCache:
    def __init__(
        self,
        *,
        cache: KeyValueCache,
        products: ProductRepository,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ) -> None:
        self._cache = cache
        self._products = products
        self._ttl = ttl_seconds

    def get_all(self) -> list[Product]:
        raw = self._read(ALL_PRODUCTS_KEY)
        if raw is not None:
            try:
                cached = [s.to_entity() for s in _SNAPSHOT_LIST.validate_json(raw)]
            except PydanticValidationError:
                logger.warning(f"cache: undecodable entry key={ALL_PRODUCTS_KEY}, refetching")
            else:
                logger.debug("cache: hit key=all_products")
                return cached

        logger.debug("cache: miss key=all_products")
        products = list(self._products.list_all())
        self._write(ALL_PRODUCTS_KEY, _encode_many(products))
        return products

    def get_by_slug(self, slug: str) -> Product:
        key = product_key(slug)
        raw = self._read(key)
        if raw is not None:
            try:
                cached = _SNAPSHOT.validate_json(raw).to_entity()
            except PydanticValidationError:
                logger.warning(f"cache: undecodable entry key={key}, refetching")
            else:
                logger.debug(f"cache: hit key={key}")
                return cached

        logger.debug(f"cache: miss key={key}")
        product = self._products.find_by_slug(slug)
        if product is None:
            # Absence is not cached; the next lookup asks the store again.
            raise ProductNotFoundError(slug)
        self._write(key, _encode_one(product))
        return product

    def invalidate(self, slug: str) -> None:
        self._drop(product_key(slug))

    def invalidate_all(self) -> None:
        self._drop(ALL_PRODUCTS_KEY)

    def _read(self, key: str) -> bytes | None:
        try:
            return self._cache.get(key)
        except CacheUnavailableError:
            logger.warning(f"cache: get failed key={key}, reading from store")
            return None

    def _write(self, key: str, value: bytes) -> None:
        try:
            self._cache.set(key, value, self._ttl)
        except CacheUnavailableError:
            logger.warning(f"cache: set failed key={key}, entry not cached")

    def _drop(self, key: str) -> None:
        try:
            self._cache.delete(key)
            logger.debug(f"cache: invalidate key={key}")
        except CacheUnavailableError:
            logger.warning(f"cache: invalidate failed key={key}, stale for at most the TTL")


__all__ = ["ALL_PRODUCTS_KEY", "ProductCache", "ProductSnapshot", "product_key"]
