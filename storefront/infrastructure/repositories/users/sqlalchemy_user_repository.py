# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from storefront.domain.users.entities import User as DomainUser
from storefront.domain.users.exceptions import UserAlreadyExistsError
from storefront.domain.users.repositories import UserRepository
from storefront.infrastructure.db import SessionFactory
from storefront.infrastructure.db.models import User
from storefront.infrastructure.unit_of_work import unit_of_work_scope
from storefront.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        name=row.name,
        email=row.email,
        username=row.username,
        password_hash=row.password_hash,
        access_token=row.access_token,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    name=user.name,
                    email=user.email,
                    username=user.username,
                    password_hash=user.password_hash,
                    access_token=user.access_token,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.warning("SqlAlchemyUserRepository: integrity error on add, email taken")
            raise UserAlreadyExistsError() from exc

    def update_access_token(self, user_id: int, token: str | None) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            session.execute(
                update(User).where(User.id == user_id).values(access_token=token)
            )
