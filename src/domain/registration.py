"""
Registration use case - hashes the password and stores the account.

The use case is transport-independent and performs no recovery: any
fault raised by the hasher or the repository propagates to the caller.
"""

import logging
from dataclasses import dataclass

from .ports import AccountRecord, AccountRepository, AddAccountInput, NewAccount, PasswordHasher

logger = logging.getLogger(__name__)


@dataclass
class RegistrationUseCase:
    """
    Orchestrates account creation for already-validated input.

    Exactly one hash operation and one repository write per call.
    """

    hasher: PasswordHasher
    repository: AccountRepository

    async def register(self, data: AddAccountInput) -> AccountRecord:
        """
        Register a new account.

        Args:
            data: Name, email and plaintext password

        Returns:
            The AccountRecord returned by the repository, unchanged
        """
        password_hash = await self.hasher.hash(data.password)
        account = NewAccount(name=data.name, email=data.email, password_hash=password_hash)
        record = await self.repository.create(account)
        logger.info("Account registered: %s", record.id)
        return record
