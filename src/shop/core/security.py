"""Password hashing helpers."""

import hashlib
import hmac
import secrets


def hash_password(password: str, salt: str | None = None) -> str:
    """Hash ``password`` as ``salt$sha256(salt + password)``.

    Args:
        password: Plaintext password
        salt: Hex salt; a random 16-character one is generated when omitted

    Returns:
        The encoded hash
    """
    salt = salt or secrets.token_hex(8)
    digest = hashlib.sha256((salt + password).encode("utf-8")).hexdigest()
    return f"{salt}${digest}"


def verify_password(password: str, stored: str) -> bool:
    """Check ``password`` against a hash produced by ``hash_password``."""
    salt, sep, _ = stored.partition("$")
    if not sep:
        return False
    return hmac.compare_digest(hash_password(password, salt), stored)
