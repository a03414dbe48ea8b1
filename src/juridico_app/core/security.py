import hashlib
import hmac
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from juridico_app.core.config import get_settings


def _verify_legacy_scrypt(plain_password: str, stored: str) -> bool:
    """Verify hashes imported from the old Node backend ("salt:hash" or "hash.salt")."""
    try:
        if ":" in stored:
            salt_hex, hash_hex = stored.split(":", 1)
            salt = bytes.fromhex(salt_hex)
        else:
            hash_hex, salt_text = stored.split(".", 1)
            salt = salt_text.encode("utf-8")
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False

    derived = hashlib.scrypt(
        plain_password.encode("utf-8"), salt=salt, n=16384, r=8, p=1, dklen=len(expected)
    )
    return hmac.compare_digest(derived, expected)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify a password against a bcrypt hash (or a legacy scrypt hash)."""
    if not hashed_password:
        return False

    if hashed_password.startswith("$2"):
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )

    if ":" in hashed_password or "." in hashed_password:
        return _verify_legacy_scrypt(plain_password, hashed_password)

    return False


def get_password_hash(password: str) -> str:
    """Generate a bcrypt hash for a password."""
    salt = bcrypt.gensalt(rounds=get_settings().BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def create_access_token(data: dict, expires_delta: timedelta | None = None):
    settings = get_settings()
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload
    except JWTError:
        return None
