from .base import (
    AppError,
    CacheUnavailableError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InvalidTokenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from .validation import validate_input

__all__ = [
    "AppError",
    "CacheUnavailableError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "InvalidTokenError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
    "validate_input",
]
