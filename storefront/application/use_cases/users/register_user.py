# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from storefront.application.dto.auth import RegisterUserInput
from storefront.domain.users.entities import AuthResult, User, username_from_email
from storefront.domain.users.exceptions import PasswordMismatchError, UserAlreadyExistsError
from storefront.domain.users.repositories import PasswordHasher, TokenCodec, UserRepository
from storefront.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenCodec,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, data: RegisterUserInput) -> AuthResult:
        existing = self._users.find_by_email(data.email)
        if existing:
            raise UserAlreadyExistsError()
        if data.password != data.password_confirmation:
            raise PasswordMismatchError()

        now = datetime.now(UTC)
        hashed = self._password_hasher.hash(data.password)
        user = User(
            id=0,
            name=data.name,
            email=data.email,
            username=username_from_email(data.email),
            password_hash=hashed,
            created_at=now,
            updated_at=now,
        )
        persisted = self._users.add(user)

        token = self._tokens.issue(persisted.claims())
        self._users.update_access_token(persisted.id, token)
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return AuthResult(user=persisted.profile(), token=token)
