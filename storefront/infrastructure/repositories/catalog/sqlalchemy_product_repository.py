# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from storefront.domain.catalog.entities import NewProduct
from storefront.domain.catalog.entities import Product as DomainProduct
from storefront.domain.catalog.exceptions import DuplicateSlugError
from storefront.domain.catalog.repositories import ProductRepository
from storefront.infrastructure.db import SessionFactory
from storefront.infrastructure.db.models import Product
from storefront.infrastructure.unit_of_work import unit_of_work_scope
from storefront.shared.logging import logger

_UPDATABLE = frozenset({"name", "slug", "description", "price", "image"})


def _to_domain(row: Product) -> DomainProduct:
    return DomainProduct(
        id=row.id,
        name=row.name,
        slug=row.slug,
        description=row.description,
        price=row.price,
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyProductRepository(ProductRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[DomainProduct]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(select(Product).order_by(Product.id.asc())).all()
            return [_to_domain(row) for row in rows]

    def find_by_slug(self, slug: str) -> DomainProduct | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(Product).where(Product.slug == slug)).first()
            return _to_domain(row) if row else None

    def add(self, product: NewProduct) -> DomainProduct:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Product(
                    name=product.name,
                    slug=product.slug,
                    description=product.description,
                    price=product.price,
                    image=product.image,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.warning(f"SqlAlchemyProductRepository: integrity error on add slug={product.slug}")
            raise DuplicateSlugError(product.slug) from exc

    def update_by_slug(self, slug: str, changes: Mapping[str, Any]) -> DomainProduct | None:
        unknown = set(changes) - _UPDATABLE
        if unknown:
            raise ValueError(f"unsupported product fields: {sorted(unknown)}")
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.scalars(select(Product).where(Product.slug == slug)).first()
                if not row:
                    return None
                for field, value in changes.items():
                    setattr(row, field, value)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            target = changes.get("slug", slug)
            logger.warning(f"SqlAlchemyProductRepository: integrity error on update slug={target}")
            raise DuplicateSlugError(target) from exc

    def delete_by_slug(self, slug: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            result = session.execute(delete(Product).where(Product.slug == slug))
            return bool(result.rowcount)
