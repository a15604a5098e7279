# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.shared.errors.base import ConflictError, NotFoundError, UnauthorizedError


class UserAlreadyExistsError(ConflictError):
    code = "user_already_exists"
    message = "User with this email already exists"


class PasswordMismatchError(ConflictError):
    code = "password_mismatch"
    message = "Passwords do not match"


class InvalidCredentialsError(UnauthorizedError):
    code = "invalid_credentials"
    message = "Invalid email or password"


class UserNotFoundError(NotFoundError):
    code = "user_not_found"
    message = "User not found"

    def __init__(self, user_id: int) -> None:
        super().__init__(context={"user_id": user_id})
