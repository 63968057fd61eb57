import logging
from datetime import timedelta
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..config import Settings
from ..errors import AuthError, ValidationError
from ..models.models import User
from ..utils.security import (
    create_access_token,
    get_password_hash,
    verify_password,
)

logger = logging.getLogger(__name__)


def register(
    db: Session,
    first_name: str,
    last_name: str,
    email: str,
    password: str,
    location: str = "",
    occupation: str = "",
    picture_path: Optional[str] = None,
) -> User:
    """Create a user, storing only the salted hash of ``password``"""
    email = email.strip().lower()
    if db.query(User).filter(User.email == email).first():
        raise ValidationError("Email already registered")

    user = User(
        first_name=first_name,
        last_name=last_name,
        email=email,
        password_hash=get_password_hash(password),
        picture_path=picture_path or "",
        location=location,
        occupation=occupation,
        viewed_profile=0,
        impressions=0,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise ValidationError("Email already registered")
    db.refresh(user)

    logger.info("Registered user %s", user.user_id)
    return user


def login(
    db: Session, settings: Settings, email: str, password: str
) -> Tuple[str, User]:
    """Check credentials and issue an access token for the user"""
    user = db.query(User).filter(User.email == email.strip().lower()).first()
    if not user or not verify_password(password, user.password_hash):
        raise AuthError("Invalid credentials")

    token = create_access_token(
        data={"sub": str(user.user_id)},
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )
    logger.info("User %s logged in", user.user_id)
    return token, user
