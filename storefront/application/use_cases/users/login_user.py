# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.application.dto.auth import LoginUserInput
from storefront.domain.users.entities import AuthResult
from storefront.domain.users.exceptions import InvalidCredentialsError
from storefront.domain.users.repositories import PasswordHasher, TokenCodec, UserRepository
from storefront.shared.logging import logger


class LoginUserUseCase:
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

    def execute(self, data: LoginUserInput) -> AuthResult:
        user = self._users.find_by_email(data.email)
        password_valid = user and self._password_hasher.verify(data.password, user.password_hash)

        if not password_valid:
            logger.info("auth.login: rejected")
            raise InvalidCredentialsError()

        # Earlier tokens are not revoked; they stay valid until they expire.
        token = self._tokens.issue(user.claims())
        self._users.update_access_token(user.id, token)
        logger.info(f"auth.login: ok user_id={user.id}")
        return AuthResult(user=user.profile(), token=token)
