"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the sign-up pipeline
requires from infrastructure, plus the value types that cross them.
Adapters implement these protocols via structural subtyping.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class AddAccountInput:
    """Validated sign-up data handed from the controller to the use case."""

    name: str
    email: str
    password: str


@dataclass(frozen=True)
class NewAccount:
    """Persistence payload. Carries the password hash, never the plaintext."""

    name: str
    email: str
    password_hash: str


@dataclass(frozen=True)
class AccountRecord:
    """Stored account, including the identifier assigned by the repository."""

    id: str
    name: str
    email: str
    password_hash: str


class PasswordHasher(Protocol):
    """Port interface for one-way password hashing."""

    async def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext password for storage.

        The work factor is fixed when the adapter is constructed. The
        returned string embeds the algorithm parameters, so verification
        never needs the work factor passed separately.

        Args:
            plaintext: User's plaintext password

        Returns:
            Self-describing password hash
        """
        ...


class EmailValidator(Protocol):
    """Port interface for syntactic email validation."""

    def is_valid(self, email: str) -> bool:
        """
        Check whether an email address is syntactically valid.

        Pure and total: implementations never raise for bad input,
        they return False.
        """
        ...


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    async def create(self, account: NewAccount) -> AccountRecord:
        """
        Persist a new account in a single atomic write.

        Args:
            account: Name, email and password hash to store

        Returns:
            The stored record with its freshly assigned identifier
        """
        ...
