"""Password Hasher — bcrypt wrapper returning explicit Results.

Invariants:
    - Plaintext never logged, never stored
    - hash/verify run in a worker thread: bcrypt is CPU-bound and would stall the event loop
    - Only the first 72 bytes of a password are significant, for hash and verify alike;
      an oversized login candidate is a mismatch, never an error
    - A corrupt stored hash becomes Err(HASH_FAILURE)

Design Decisions:
    - Cost factor comes from settings (default 10); tests lower it for speed
"""

import asyncio

import bcrypt

from blog_api.core.result import Err, FailureKind, Ok, Result

BCRYPT_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class PasswordHasher:
    """One-way salted hashing with a configurable cost factor."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def _hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    @staticmethod
    def _verify(password: str, password_hash: str) -> bool:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))

    async def hash(self, password: str) -> Result[str]:
        try:
            return Ok(await asyncio.to_thread(self._hash, password))
        except ValueError as e:
            return Err(FailureKind.HASH_FAILURE, str(e))

    async def verify(self, password: str, password_hash: str) -> Result[bool]:
        """Ok(True) on match, Ok(False) on mismatch, Err if the hash is unusable."""
        try:
            return Ok(
                await asyncio.to_thread(self._verify, password, password_hash),
            )
        except ValueError as e:
            return Err(FailureKind.HASH_FAILURE, str(e))
