"""One-way hashing and verification of meeting and participant passwords.

Hashing is CPU-bound (scrypt by default), so both calls run in a worker
thread and never stall the event loop.
"""

import asyncio

from werkzeug.security import check_password_hash, generate_password_hash

from .config import get_settings


async def hash_secret(secret: str) -> str:
    """Return a salted digest of `secret`; the plaintext is never stored."""
    return await asyncio.to_thread(
        generate_password_hash,
        secret,
        method=get_settings().password_hash_method,
    )


async def verify_secret(secret: str, digest: str | None) -> bool:
    """Check `secret` against a stored digest. A missing digest never matches."""
    if not digest:
        return False
    return await asyncio.to_thread(check_password_hash, digest, secret)
