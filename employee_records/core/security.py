import logging
from typing import Optional
from passlib.context import CryptContext

logger = logging.getLogger(__name__)

# pbkdf2_sha256 is pure python, so no native bcrypt build is needed on deploy
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

def get_password_hash(password: str) -> str:
    """Salted one-way hash of a plaintext password."""
    return pwd_context.hash(password)

def verify_password(plain_password: Optional[str], hashed_password: Optional[str]) -> bool:
    """
    Check a claimed password against a stored hash.
    Missing values and unrecognised hash formats never verify.
    """
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("Stored password is not a recognised hash; rejecting login")
        return False
