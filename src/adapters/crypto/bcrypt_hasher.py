"""
bcrypt password hasher adapter - Implements PasswordHasher protocol.

The bcrypt output ($2b$<cost>$<salt+hash>) embeds its own cost factor and
salt, so stored hashes stay verifiable if the configured cost changes.
"""

import asyncio

import bcrypt


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via the bcrypt library.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, rounds: int) -> None:
        """
        Initialize hasher with a fixed work factor.

        Args:
            rounds: bcrypt cost factor (log2 of the iteration count)
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    async def hash(self, plaintext: str) -> str:
        """
        Hash password with bcrypt in a worker thread.

        bcrypt is CPU-bound; running it off the event loop lets other
        requests progress while the hash is computed.
        """
        return await asyncio.to_thread(self._hash_sync, plaintext)

    def _hash_sync(self, plaintext: str) -> str:
        return bcrypt.hashpw(plaintext.encode(), bcrypt.gensalt(rounds=self._rounds)).decode()
