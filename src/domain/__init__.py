"""
Domain layer - Pure business logic with zero framework imports.

This package contains the registration use case for the sign-up API and
the port interfaces it depends on, keeping infrastructure behind adapters.
"""

from .ports import (
    AccountRecord,
    AccountRepository,
    AddAccountInput,
    EmailValidator,
    NewAccount,
    PasswordHasher,
)
from .registration import RegistrationUseCase

__all__ = [
    "AccountRecord",
    "AccountRepository",
    "AddAccountInput",
    "EmailValidator",
    "NewAccount",
    "PasswordHasher",
    "RegistrationUseCase",
]
