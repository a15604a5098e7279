# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol


class KeyValueCache(Protocol):
    """Byte-oriented cache port.

    Implementations raise ``CacheUnavailableError`` when the backend cannot be
    reached; callers decide whether that is fatal.
    """

    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes, ttl_seconds: int) -> None: ...

    def delete(self, key: str) -> None: ...

    def ping(self) -> bool: ...

    def close(self) -> None: ...
