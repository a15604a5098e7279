"""Use-case for clearing the stored access token."""

from __future__ import annotations

from storefront.domain.users.exceptions import UserNotFoundError
from storefront.domain.users.repositories import TokenCodec, UserRepository
from storefront.shared.logging import logger


class LogoutUserUseCase:
    """Clears the user's advisory ``access_token`` field.

    The bearer token itself is self-contained and keeps verifying until it
    expires; nothing on the verification path reads the stored field.
    """

    def __init__(self, *, users: UserRepository, tokens: TokenCodec) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, token: str) -> None:
        claims = self._tokens.verify(token)
        user = self._users.find_by_id(claims.id)
        if user is None:
            raise UserNotFoundError(claims.id)
        self._users.update_access_token(user.id, None)
        logger.info(f"auth.logout: ok user_id={user.id}")
