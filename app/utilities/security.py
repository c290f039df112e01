import logging
from typing import Optional
from datetime import datetime, timedelta, timezone
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from app.models.user.user import Role
from app.utilities.errors import Forbidden, Unauthorized
from config import JWT_SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password, hashed_password) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


# Verified against when the email is unknown so a failed login costs the same
# bcrypt round whether or not the account exists.
DUMMY_PASSWORD_HASH = hash_password("autodealer-timing-dummy")


def create_access_token(user_id: str, email: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "role": role,
        "exp": expire,
    }
    return jwt.encode(to_encode, JWT_SECRET_KEY, algorithm=ALGORITHM)


def verify_token(token: str) -> dict:
    """Decode a session token into ``{user_id, email, role}``.

    Raises Unauthorized for malformed, badly signed or expired tokens, and for
    tokens without a subject. A token without a role claim is a plain user.
    """
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise Unauthorized("Unauthorized (invalid token)")

    user_id = payload.get("sub")
    if not user_id:
        raise Unauthorized("Unauthorized (invalid token)")

    role = payload.get("role") or Role.USER.value
    return {
        "user_id": user_id,
        "email": payload.get("email"),
        "role": role,
    }


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict:
    """Authenticate: require a valid ``Authorization: Bearer <token>`` header."""
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Unauthorized (no token)")

    current_user = verify_token(credentials.credentials)
    request.state.user = current_user
    return current_user


def require_admin(current_user: dict = Depends(get_current_user)) -> dict:
    """Authorize: the authenticated identity must carry the admin role."""
    if current_user.get("role") != Role.ADMIN.value:
        logger.info("Forbidden admin request from %s", current_user.get("email"))
        raise Forbidden()
    return current_user
