"""Password Hasher — bcrypt wrapper results.

Tests cover:
    - hash is salted (two hashes of one password differ) and verifies
    - wrong password verifies Ok(False)
    - corrupt stored hash becomes Err(HASH_FAILURE)
    - passwords past 72 bytes hash and verify instead of erroring
"""

from blog_api.core.result import Err, FailureKind, Ok
from blog_api.infrastructure.password_hasher import PasswordHasher


async def test_hash_is_salted_and_verifies():
    hasher = PasswordHasher(rounds=4)
    first = await hasher.hash("secret1")
    second = await hasher.hash("secret1")
    assert isinstance(first, Ok)
    assert first.value != second.value
    assert first.value != "secret1"
    assert await hasher.verify("secret1", first.value) == Ok(True)


async def test_cost_factor_is_embedded_in_hash():
    hashed = (await PasswordHasher(rounds=5).hash("secret1")).value
    assert hashed.split("$")[2] == "05"


async def test_wrong_password_does_not_verify():
    hasher = PasswordHasher(rounds=4)
    hashed = (await hasher.hash("secret1")).value
    assert await hasher.verify("secret2", hashed) == Ok(False)


async def test_corrupt_stored_hash_is_an_error():
    result = await PasswordHasher(rounds=4).verify("secret1", "not-a-bcrypt-hash")
    assert isinstance(result, Err)
    assert result.kind == FailureKind.HASH_FAILURE


async def test_oversized_candidate_is_a_mismatch():
    hasher = PasswordHasher(rounds=4)
    hashed = (await hasher.hash("secret1")).value
    assert await hasher.verify("p" * 80, hashed) == Ok(False)


async def test_long_password_hashes_and_verifies():
    hasher = PasswordHasher(rounds=4)
    long_password = "x" * 100
    hashed = await hasher.hash(long_password)
    assert isinstance(hashed, Ok)
    assert await hasher.verify(long_password, hashed.value) == Ok(True)
