"""Subscriber secret hashing."""
import bcrypt

from netpanel.errors import ValidationError

# bcrypt only looks at the first 72 bytes of its input.
MAX_SECRET_BYTES = 72


def hash_password(password: str) -> str:
    """Hash with a fresh salt; the result embeds algorithm, cost and salt."""
    raw = password.encode("utf-8")
    if len(raw) > MAX_SECRET_BYTES:
        raise ValidationError(f"Password must be at most {MAX_SECRET_BYTES} bytes")
    return bcrypt.hashpw(raw, bcrypt.gensalt()).decode("ascii")


def verify_password(plain: str, hashed: str | None) -> bool:
    """False for any mismatch, including malformed or empty stored hashes."""
    if not hashed:
        return False
    raw = plain.encode("utf-8")
    if len(raw) > MAX_SECRET_BYTES:
        return False
    try:
        return bcrypt.checkpw(raw, hashed.encode("ascii"))
    except (ValueError, UnicodeEncodeError):
        return False
