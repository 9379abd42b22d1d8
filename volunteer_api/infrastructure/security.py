"""Security helpers for hashing and token generation."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from volunteer_api.config import get_settings
from volunteer_api.domain.entities import Principal, User

ALGORITHM = "HS256"

settings = get_settings()

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=settings.password_hash_rounds,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user: User, expires_delta: timedelta | None = None) -> str:
    """Sign a token identifying ``user`` by id, email and role."""

    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims = {
        "sub": str(user.id),
        "email": user.email,
        "role": user.role,
        "exp": expire,
    }
    return jwt.encode(claims, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Principal:
    """Verify ``token`` and return the caller it identifies.

    Raises ``ValueError`` when the signature, expiry or claims are invalid.
    """

    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Invalid or expired token") from exc

    subject = payload.get("sub")
    role = payload.get("role")
    if subject is None or not isinstance(role, str):
        raise ValueError("Invalid or expired token")
    try:
        user_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise ValueError("Invalid or expired token") from exc

    return Principal(user_id=user_id, email=str(payload.get("email") or ""), role=role)


__all__ = [
    "create_access_token",
    "decode_access_token",
    "get_password_hash",
    "verify_password",
]
