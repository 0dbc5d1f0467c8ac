"""Password hashing with bcrypt.

Passwords arrive only through Create and Update schemas and leave this
module as a bcrypt hash; nothing else in the application handles the
plain text.
"""

import bcrypt

from stratum.core.config import get_settings


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt.

    Args:
        password: Plain text password (at most 72 bytes when UTF-8 encoded).

    Returns:
        str: The bcrypt hash as text.
    """
    rounds = get_settings().security_config.bcrypt_rounds
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a plain text password against a stored hash.

    Args:
        password: Plain text password.
        hashed_password: Hash produced by ``hash_password``.

    Returns:
        bool: True if the password matches.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed hash or a password bcrypt refuses to process
        return False
