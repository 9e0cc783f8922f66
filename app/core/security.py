"""Password hashing for stored credentials."""

import bcrypt

from app.core.errors import HashError

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# bcrypt only looks at the first 72 bytes of its input.
PASSWORD_MAX_BYTES = 72


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """
    Hash a plain-text password for storage. Do not store plain passwords.

    A fresh salt is generated per call, so hashing the same password twice gives
    two different values. Raises HashError when the password is longer than
    PASSWORD_MAX_BYTES (rather than silently truncating) or bcrypt fails.
    """
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > PASSWORD_MAX_BYTES:
        raise HashError(f"Password must not exceed {PASSWORD_MAX_BYTES} bytes.")
    try:
        hashed = bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds))
    except (ValueError, TypeError) as e:
        raise HashError("Password hashing failed.", cause=e) from e
    return hashed.decode("utf-8")
