from __future__ import annotations

import pytest

from storefront.infrastructure.cache import InMemoryTTLCache
from storefront.infrastructure.container import Container, build_container
from storefront.infrastructure.redis_cache import RedisKeyValueCache
from storefront.shared.config import (
    AppConfig,
    CacheConfig,
    DatabaseConfig,
    JwtConfig,
    PasswordConfig,
)
from storefront.shared.errors.base import InvalidTokenError, NotFoundError

from conftest import TEST_SECRET, RecordingCache, product_payload


def _config(backend: str = "memory") -> AppConfig:
    return AppConfig(
        app_env="test",
        database=DatabaseConfig(url="sqlite://"),
        cache=CacheConfig(backend=backend, ttl_seconds=60),
        jwt=JwtConfig(secret=TEST_SECRET, expires_in="1h"),
        password=PasswordConfig(hash_method="pbkdf2:sha256:1000", salt_length=8),
    )


@pytest.fixture()
def container():
    container = build_container(_config(), configure_logging=False)
    container.init_storage()
    yield container
    container.close()


def test_cache_backend_follows_config() -> None:
    assert isinstance(Container(_config("memory")).cache_backend, InMemoryTTLCache)
    assert isinstance(Container(_config("redis")).cache_backend, RedisKeyValueCache)


def test_components_are_built_once(container: Container) -> None:
    assert container.session_service is container.session_service
    assert container.product_cache is container.product_cache
    assert container.token_codec.lifetime.value == "1h"


def test_session_flow_against_database(container: Container) -> None:
    sessions = container.session_service

    registered = sessions.register("Alice", "alice@example.com", "pw123456", "pw123456")
    logged_in = sessions.login("alice@example.com", "pw123456")

    assert registered.user.username == "alice"
    assert sessions.identify(logged_in.token).email == "alice@example.com"
    stored = container.user_repository.find_by_email("alice@example.com")
    assert stored.access_token == logged_in.token
    assert stored.password_hash != "pw123456"

    sessions.logout(logged_in.token)
    assert container.user_repository.find_by_email("alice@example.com").access_token is None
    with pytest.raises(InvalidTokenError):
        sessions.identify("garbage")


def test_catalog_flow_against_database(container: Container) -> None:
    catalog = container.catalog_service

    catalog.create_product(product_payload("mug", name="Mug", price=1299))
    assert [p.slug for p in catalog.list_products()] == ["mug"]

    catalog.update_product("mug", {"price": 1499})
    assert catalog.get_product("mug").price == 1499
    assert catalog.list_products()[0].price == 1499

    catalog.delete_product("mug")
    assert catalog.list_products() == []
    with pytest.raises(NotFoundError):
        catalog.get_product("mug")


def test_health_reports_components(container: Container) -> None:
    report = container.health()

    assert report["success"] is True
    assert report["service"] == "storefront"
    assert report["checks"] == {"database": True, "cache": True}
    assert report["uptime"] >= 0
    assert report["timestamp"]


def test_health_tolerates_unreachable_cache(container: Container) -> None:
    backend = RecordingCache()
    backend.unavailable = True
    container.cache_backend = backend

    report = container.health()

    assert report["success"] is True
    assert report["checks"]["cache"] is False


def test_close_releases_built_components(container: Container) -> None:
    container.cache_backend.set("k", b"v", 60)

    container.close()

    assert container.cache_backend.get("k") is None


def test_close_does_not_build_unused_components() -> None:
    container = Container(_config("redis"))

    container.close()

    assert "engine" not in vars(container)
    assert "cache_backend" not in vars(container)
