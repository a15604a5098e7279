# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from functools import cached_property
from typing import Any

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from storefront.application.interfaces import KeyValueCache
from storefront.application.services.catalog_service import CatalogService
from storefront.application.services.password_hashing import WerkzeugPasswordHasher
from storefront.application.services.product_cache import ProductCache
from storefront.application.services.session_service import SessionService
from storefront.application.services.token_codec import JwtTokenCodec
from storefront.infrastructure.cache import InMemoryTTLCache
from storefront.infrastructure.db import (
    create_engine_from_config,
    create_session_factory,
    init_db,
)
from storefront.infrastructure.health import collect_health
from storefront.infrastructure.redis_cache import RedisKeyValueCache, connect_cache
from storefront.infrastructure.repositories.catalog.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)
from storefront.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from storefront.shared.config import AppConfig, load_config
from storefront.shared.logging import logger, setup_logging


class Container:
    """Builds every component from one explicit configuration value."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self._started_at = time.monotonic()

    @cached_property
    def engine(self) -> Engine:
        return create_engine_from_config(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return create_session_factory(self.engine)

    @cached_property
    def cache_backend(self) -> KeyValueCache:
        if self.config.cache.backend == "memory":
            return InMemoryTTLCache()
        return RedisKeyValueCache.from_config(self.config.cache)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher.from_config(self.config.password)

    @cached_property
    def token_codec(self) -> JwtTokenCodec:
        return JwtTokenCodec.from_config(self.config.jwt)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def product_repository(self) -> SqlAlchemyProductRepository:
        return SqlAlchemyProductRepository(self.session_factory)

    @cached_property
    def product_cache(self) -> ProductCache:
        return ProductCache(
            cache=self.cache_backend,
            products=self.product_repository,
            ttl_seconds=self.config.cache.ttl_seconds,
        )

    @cached_property
    def session_service(self) -> SessionService:
        return SessionService.build(
            users=self.user_repository,
            tokens=self.token_codec,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def catalog_service(self) -> CatalogService:
        return CatalogService.build(products=self.product_repository, cache=self.product_cache)

    def init_storage(self) -> None:
        init_db(self.engine)
        connect_cache(self.cache_backend)
        logger.info(
            f"storefront: storage ready cache_backend={self.config.cache.backend} "
            f"token_lifetime={self.config.jwt.expires_in.value}"
        )

    def close(self) -> None:
        """Release the cache connection pool and the database engine, if built."""

        built = vars(self)
        if "cache_backend" in built:
            self.cache_backend.close()
        if "engine" in built:
            self.engine.dispose()
        logger.info("storefront: resources released")

    def health(self) -> dict[str, Any]:
        return collect_health(
            engine=self.engine,
            cache=self.cache_backend,
            service_name=self.config.service_name,
            started_at=self._started_at,
        )


def build_container(
    config: AppConfig | None = None, *, configure_logging: bool = True
) -> Container:
    config = config or load_config()
    if configure_logging:
        setup_logging(
            config.logging.level,
            log_file=config.logging.file,
            debug_mode=config.logging.debug,
        )
    return Container(config)
