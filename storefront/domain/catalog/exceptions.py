# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.shared.errors.base import ConflictError, NotFoundError


class ProductNotFoundError(NotFoundError):
    code = "product_not_found"

    def __init__(self, slug: str) -> None:
        super().__init__(f"Product with slug {slug} not found", context={"slug": slug})


class DuplicateSlugError(ConflictError):
    code = "duplicate_slug"
    message = "Product with this slug already exists"

    def __init__(self, slug: str) -> None:
        super().__init__(context={"slug": slug})
