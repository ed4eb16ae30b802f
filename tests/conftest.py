"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory stand-ins for the hasher, email validator and repository ports
- A valid sign-up body
"""

import itertools

import pytest

from src.domain.ports import AccountRecord, NewAccount


class FakePasswordHasher:
    """Deterministic hasher: prefixes the plaintext."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def hash(self, plaintext: str) -> str:
        self.calls.append(plaintext)
        return f"hashed:{plaintext}"


class StubEmailValidator:
    """Returns a fixed answer and records every email it was asked about."""

    def __init__(self, valid: bool = True) -> None:
        self.valid = valid
        self.calls: list[str] = []

    def is_valid(self, email: str) -> bool:
        self.calls.append(email)
        return self.valid


class InMemoryAccountRepository:
    """Stores accounts in a dict, assigning sequential string ids."""

    def __init__(self) -> None:
        self.accounts: dict[str, AccountRecord] = {}
        self._ids = itertools.count(1)

    async def create(self, account: NewAccount) -> AccountRecord:
        record = AccountRecord(
            id=str(next(self._ids)),
            name=account.name,
            email=account.email,
            password_hash=account.password_hash,
        )
        self.accounts[record.id] = record
        return record


@pytest.fixture
def hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def email_validator() -> StubEmailValidator:
    return StubEmailValidator()


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def valid_body() -> dict[str, str]:
    """Complete, consistent sign-up request body."""
    return {
        "name": "Ann",
        "email": "ann@x.com",
        "password": "p1",
        "passwordConfirmation": "p1",
    }
