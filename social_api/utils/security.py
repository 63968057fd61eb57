from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from passlib.context import CryptContext

from ..errors import AuthError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    data: Dict[str, Any],
    secret_key: str,
    algorithm: str = "HS256",
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Sign ``data`` into a JWT carrying ``iat`` and ``exp`` claims"""
    now = datetime.now(timezone.utc)
    payload = dict(data)
    payload["iat"] = int(now.timestamp())
    payload["exp"] = int(
        (now + (expires_delta or timedelta(minutes=15))).timestamp()
    )
    return jwt.encode(payload, secret_key, algorithm=algorithm)


def verify_token(
    token: Optional[str], secret_key: str, algorithm: str = "HS256"
) -> int:
    """Check the token signature and expiry and return the user id in ``sub``"""
    if not token:
        raise AuthError("Not authenticated")

    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm])
    except jwt.ExpiredSignatureError:
        raise AuthError("Token has expired")
    except jwt.InvalidTokenError:
        raise AuthError("Invalid token")

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise AuthError("Invalid token")
