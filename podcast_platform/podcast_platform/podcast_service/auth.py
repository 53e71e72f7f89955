from passlib.context import CryptContext
from pydantic import BaseModel
from typing import Any, Dict
import jwt

from .config import settings
from .errors import InvalidTokenError

ALGORITHM = "HS256"

# Defaults to pbkdf2_sha256 to avoid external bcrypt backend issues in some environments
pwd_context = CryptContext(schemes=[settings.PASSWORD_HASH_SCHEME], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return False on mismatch or on a stored value that is not a known hash."""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


class JwtOptions(BaseModel):
    private_key: str


class JwtService:
    """
    Issues and verifies stateless session tokens.

    Tokens carry only ``{"id": <user id>}``; there is no expiry claim and no
    revocation, validity is decided by the HS256 signature alone.
    """

    def __init__(self, options: JwtOptions):
        self.options = options

    def sign(self, user_id: int) -> str:
        return jwt.encode({"id": user_id}, self.options.private_key, algorithm=ALGORITHM)

    def verify(self, token: str) -> Dict[str, Any]:
        """
        Decode a token signed by ``sign``.

        Raises:
            InvalidTokenError: bad signature or malformed token
        """
        try:
            return jwt.decode(token, self.options.private_key, algorithms=[ALGORITHM])
        except jwt.PyJWTError as e:
            raise InvalidTokenError() from e
