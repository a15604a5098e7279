# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from storefront.application.interfaces import KeyValueCache
from storefront.shared.logging import logger


def check_database(engine: Engine) -> bool:
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("health: database check failed")
        return False
    return True


def check_cache(cache: KeyValueCache) -> bool:
    return cache.ping()


def collect_health(
    *,
    engine: Engine,
    cache: KeyValueCache,
    service_name: str,
    started_at: float,
) -> dict[str, Any]:
    database_ok = check_database(engine)
    cache_ok = check_cache(cache)
    return {
        # The cache is optional; only the database decides overall health.
        "success": database_ok,
        "service": service_name,
        "timestamp": datetime.now(UTC).isoformat(),
        "uptime": round(time.monotonic() - started_at, 3),
        "checks": {"database": database_ok, "cache": cache_ok},
    }


__all__ = ["check_cache", "check_database", "collect_health"]
