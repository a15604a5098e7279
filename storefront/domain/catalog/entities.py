# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Catalog entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..exceptions import InvariantViolation


def _check_product_fields(slug: str, price: int) -> None:
    if not slug:
        raise InvariantViolation("slug must not be empty", field="slug")
    if price < 0:
        raise InvariantViolation("price must be >= 0", field="price")


@dataclass(slots=True, frozen=True)
class Product:
    """Catalog entry addressed externally by its slug. Price is in cents."""

    id: int
    name: str
    slug: str
    description: str
    price: int
    image: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        _check_product_fields(self.slug, self.price)


@dataclass(slots=True, frozen=True)
class NewProduct:

    name: str
    slug: str
    description: str
    price: int
    image: str

    def __post_init__(self) -> None:
        _check_product_fields(self.slug, self.price)
