from typing import Iterator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .config import Settings
from .utils.security import verify_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Iterator[Session]:
    """One session per request, closed once the response is built"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(
        bearer_scheme
    ),
    settings: Settings = Depends(get_settings),
) -> int:
    """Gate a route on a valid bearer token and expose the caller's id"""
    token = credentials.credentials if credentials else None
    user_id = verify_token(token, settings.secret_key, settings.algorithm)
    request.state.user_id = user_id
    return user_id
