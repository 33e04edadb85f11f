"""Password hashing with bcrypt."""

import bcrypt


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password; the salt and cost are embedded in the result."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash. Malformed hashes never match."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False
