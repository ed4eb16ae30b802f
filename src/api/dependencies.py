"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the sign-up
controller and its infrastructure adapters into routes.
"""

from fastapi import Depends, Request
from psycopg_pool import AsyncConnectionPool

from src.adapters.crypto.bcrypt_hasher import BcryptPasswordHasher
from src.adapters.repository.postgres import PostgresAccountRepository
from src.adapters.validation.email_format import EmailValidatorAdapter
from src.config.settings import get_settings
from src.domain.registration import RegistrationUseCase
from src.presentation.signup import SignUpController

# Module-level singleton - EmailValidatorAdapter is stateless
_email_validator = EmailValidatorAdapter()


def get_pool(request: Request) -> AsyncConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresAccountRepository:
    """Create repository with connection pool from app state."""
    return PostgresAccountRepository(get_pool(request))


def get_password_hasher() -> BcryptPasswordHasher:
    """Create bcrypt hasher with the configured work factor."""
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_cost)


def get_email_validator() -> EmailValidatorAdapter:
    """Get email validator (singleton)."""
    return _email_validator


def get_signup_controller(
    email_validator: EmailValidatorAdapter = Depends(get_email_validator),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    repository: PostgresAccountRepository = Depends(get_repository),
) -> SignUpController:
    """
    Create sign-up controller with injected dependencies.

    Wires the hasher and repository into the registration use case, and
    the use case plus email validator into the controller.
    """
    registration = RegistrationUseCase(hasher=hasher, repository=repository)
    return SignUpController(email_validator=email_validator, registration=registration)
