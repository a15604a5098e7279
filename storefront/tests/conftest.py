from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

import pytest

from storefront.application.services.catalog_service import CatalogService
from storefront.application.services.product_cache import ProductCache
from storefront.application.services.session_service import SessionService
from storefront.application.services.token_codec import JwtTokenCodec
from storefront.domain.catalog.entities import NewProduct, Product
from storefront.domain.catalog.repositories import ProductRepository
from storefront.domain.users.entities import User
from storefront.domain.users.repositories import PasswordHasher, UserRepository
from storefront.infrastructure.cache import InMemoryTTLCache
from storefront.shared.config import TokenLifetime
from storefront.shared.errors.base import CacheUnavailableError

TEST_SECRET = "test-secret-with-enough-bytes-for-hs256"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        new_user = replace(user, id=self._seq)
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def update_access_token(self, user_id: int, token: str | None) -> None:
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = replace(user, access_token=token)

    def remove(self, user_id: int) -> None:
        self._users.pop(user_id, None)


class InMemoryProductRepository(ProductRepository):
    def __init__(self) -> None:
        self._products: dict[str, Product] = {}
        self._seq = 1
        self.list_calls = 0
        self.find_calls: list[str] = []

    def list_all(self) -> Sequence[Product]:
        self.list_calls += 1
        return sorted(self._products.values(), key=lambda p: p.id)

    def find_by_slug(self, slug: str) -> Product | None:
        self.find_calls.append(slug)
        return self._products.get(slug)

    def add(self, product: NewProduct) -> Product:
        now = datetime.now(UTC)
        created = Product(
            id=self._seq,
            name=product.name,
            slug=product.slug,
            description=product.description,
            price=product.price,
            image=product.image,
            created_at=now,
            updated_at=now,
        )
        self._seq += 1
        self._products[created.slug] = created
        return created

    def update_by_slug(self, slug: str, changes: Mapping[str, Any]) -> Product | None:
        current = self._products.pop(slug, None)
        if current is None:
            return None
        updated = replace(current, updated_at=datetime.now(UTC), **changes)
        self._products[updated.slug] = updated
        return updated

    def delete_by_slug(self, slug: str) -> bool:
        return self._products.pop(slug, None) is not None


class RecordingCache(InMemoryTTLCache):
    """In-memory backend that records calls and can simulate an outage."""

    def __init__(self) -> None:
        super().__init__()
        self.gets: list[str] = []
        self.sets: list[tuple[str, int]] = []
        self.deletes: list[str] = []
        self.unavailable = False

    def get(self, key: str) -> bytes | None:
        self.gets.append(key)
        if self.unavailable:
            raise CacheUnavailableError("get", key)
        return super().get(key)

    def set(self, key: str, value: bytes, ttl_seconds: int) -> None:
        self.sets.append((key, ttl_seconds))
        if self.unavailable:
            raise CacheUnavailableError("set", key)
        super().set(key, value, ttl_seconds)

    def delete(self, key: str) -> None:
        self.deletes.append(key)
        if self.unavailable:
            raise CacheUnavailableError("delete", key)
        super().delete(key)

    def ping(self) -> bool:
        return not self.unavailable


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def products() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture()
def cache_backend() -> RecordingCache:
    return RecordingCache()


@pytest.fixture()
def token_codec() -> JwtTokenCodec:
    return JwtTokenCodec(secret=TEST_SECRET, lifetime=TokenLifetime.ONE_HOUR)


@pytest.fixture()
def product_cache(cache_backend: RecordingCache, products: InMemoryProductRepository) -> ProductCache:
    return ProductCache(cache=cache_backend, products=products, ttl_seconds=3600)


@pytest.fixture()
def session_service(users: InMemoryUserRepository, token_codec: JwtTokenCodec) -> SessionService:
    return SessionService.build(
        users=users, tokens=token_codec, password_hasher=DeterministicHasher()
    )


@pytest.fixture()
def catalog_service(
    products: InMemoryProductRepository, product_cache: ProductCache
) -> CatalogService:
    return CatalogService.build(products=products, cache=product_cache)


def product_payload(slug: str = "test-product-1", **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": "Test Product 1",
        "slug": slug,
        "description": "Test description",
        "price": 100,
        "image": "https://cdn.example.com/test-image.jpg",
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def make_product_payload():
    return product_payload
