"""Password hashing and session token utilities."""

import hashlib
import hmac
import secrets

from silentsos.core.config import settings

SALT_BYTES = 16
HASH_BYTES = 64
TOKEN_BYTES = 24


def hash_password(password: str, salt: str | None = None) -> tuple[str, str]:
    """Derive a PBKDF2-HMAC-SHA512 hash. Returns ``(salt, hash)``, both hex."""
    if salt is None:
        salt = secrets.token_hex(SALT_BYTES)
    derived = hashlib.pbkdf2_hmac(
        "sha512",
        password.encode(),
        salt.encode(),
        settings.password_hash_iterations,
        dklen=HASH_BYTES,
    )
    return salt, derived.hex()


def verify_password(plain: str, salt: str, hashed: str) -> bool:
    """Verify a plain password against a stored salt and hash."""
    _, candidate = hash_password(plain, salt)
    return hmac.compare_digest(candidate, hashed)


def generate_token() -> str:
    """Create an opaque session token."""
    return secrets.token_hex(TOKEN_BYTES)
