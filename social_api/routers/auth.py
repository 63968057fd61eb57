from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import EmailStr
from sqlalchemy.orm import Session
from typing import Optional
from ..config import Settings
from ..dependencies import get_db, get_settings
from ..errors import AppError
from ..schemas.user import UserLogin, UserResponse, Token
from ..services import auth_service
from ..utils.file_handler import delete_file, save_upload_file

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=UserResponse, status_code=201)
def register(
    first_name: str = Form(..., min_length=1, max_length=50),
    last_name: str = Form(..., min_length=1, max_length=50),
    email: EmailStr = Form(...),
    password: str = Form(..., min_length=5),
    location: str = Form(""),
    occupation: str = Form(""),
    picture: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Register a new user"""
    picture_path = None
    if picture is not None and picture.filename:
        picture_path = save_upload_file(
            picture, settings.upload_dir, settings.max_file_size
        )

    try:
        return auth_service.register(
            db,
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=password,
            location=location,
            occupation=occupation,
            picture_path=picture_path,
        )
    except AppError:
        if picture_path:
            delete_file(settings.upload_dir, picture_path)
        raise


@router.post("/login", response_model=Token)
def login(
    user_credentials: UserLogin,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Authenticate user and return access token"""
    token, user = auth_service.login(
        db, settings, user_credentials.email, user_credentials.password
    )
    return {"token": token, "token_type": "bearer", "user": user}
