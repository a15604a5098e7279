from .auth import LoginUserInput, RegisterUserInput
from .catalog import CreateProductInput, UpdateProductInput

__all__ = [
    "CreateProductInput",
    "LoginUserInput",
    "RegisterUserInput",
    "UpdateProductInput",
]
