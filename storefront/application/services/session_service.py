# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Credential lifecycle: register, login, logout and token identification."""

from __future__ import annotations

from storefront.application.dto.auth import LoginUserInput, RegisterUserInput
from storefront.application.use_cases.users.identify_user import IdentifyUserUseCase
from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.logout_user import LogoutUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.domain.users.entities import AuthResult, UserProfile
from storefront.domain.users.repositories import PasswordHasher, TokenCodec, UserRepository
from storefront.shared.errors.validation import validate_input


class SessionService:
    """Entry point for the request layer.

    Inputs are validated for shape here; business rules (email uniqueness,
    password confirmation) are enforced by the use cases. Errors propagate
    unchanged.
    """

    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        identify_use_case: IdentifyUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._identify_use_case = identify_use_case

    @classmethod
    def build(
        cls,
        *,
        users: UserRepository,
        tokens: TokenCodec,
        password_hasher: PasswordHasher,
    ) -> SessionService:
        return cls(
            register_use_case=RegisterUserUseCase(
                users=users, tokens=tokens, password_hasher=password_hasher
            ),
            login_use_case=LoginUserUseCase(
                users=users, tokens=tokens, password_hasher=password_hasher
            ),
            logout_use_case=LogoutUserUseCase(users=users, tokens=tokens),
            identify_use_case=IdentifyUserUseCase(users=users, tokens=tokens),
        )

    def register(
        self, name: str, email: str, password: str, password_confirmation: str
    ) -> AuthResult:
        data = validate_input(
            RegisterUserInput,
            {
                "name": name,
                "email": email,
                "password": password,
                "password_confirmation": password_confirmation,
            },
        )
        return self._register_use_case.execute(data)

    def login(self, email: str, password: str) -> AuthResult:
        data = validate_input(LoginUserInput, {"email": email, "password": password})
        return self._login_use_case.execute(data)

    def logout(self, token: str) -> None:
        self._logout_use_case.execute(token)

    def identify(self, token: str) -> UserProfile:
        return self._identify_use_case.execute(token)
