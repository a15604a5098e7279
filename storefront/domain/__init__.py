# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .catalog.entities import NewProduct, Product
from .exceptions import InvariantViolation, InvariantViolationError
from .users.entities import AuthResult, TokenClaims, User, UserProfile

__all__ = [
    "AuthResult",
    "NewProduct",
    "Product",
    "TokenClaims",
    "User",
    "UserProfile",
    "InvariantViolation",
    "InvariantViolationError",
]
