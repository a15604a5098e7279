# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .entities import NewProduct, Product


class ProductRepository(Protocol):
    def list_all(self) -> Sequence[Product]: ...
    def find_by_slug(self, slug: str) -> Product | None: ...
    def add(self, product: NewProduct) -> Product: ...
    def update_by_slug(self, slug: str, changes: Mapping[str, Any]) -> Product | None: ...
    def delete_by_slug(self, slug: str) -> bool: ...
