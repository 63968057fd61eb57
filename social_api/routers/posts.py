from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session
from typing import List, Optional
from ..config import Settings
from ..dependencies import get_current_user_id, get_db, get_settings
from ..errors import AppError
from ..schemas.post import LikeToggle, PostResponse
from ..services import post_service
from ..utils.file_handler import delete_file, save_upload_file

router = APIRouter(
    prefix="/posts",
    tags=["Posts"],
    dependencies=[Depends(get_current_user_id)],
)


@router.post("", response_model=PostResponse, status_code=201)
def create_post(
    user_id: int = Form(...),
    description: str = Form(""),
    picture: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Create a post, optionally with a picture"""
    picture_path = None
    if picture is not None and picture.filename:
        picture_path = save_upload_file(
            picture, settings.upload_dir, settings.max_file_size
        )

    try:
        return post_service.create_post(
            db, user_id, description, picture_path
        )
    except AppError:
        if picture_path:
            delete_file(settings.upload_dir, picture_path)
        raise


@router.get("", response_model=List[PostResponse])
def get_feed_posts(db: Session = Depends(get_db)):
    """Get every post, newest first"""
    return post_service.list_feed_posts(db)


@router.get("/{user_id}", response_model=List[PostResponse])
def get_user_posts(user_id: int, db: Session = Depends(get_db)):
    """Get one user's posts, newest first"""
    return post_service.list_user_posts(db, user_id)


@router.patch("/{post_id}/like", response_model=PostResponse)
def like_post(
    post_id: int, body: LikeToggle, db: Session = Depends(get_db)
):
    """Like a post, or remove the like if already present"""
    return post_service.toggle_like(db, post_id, body.user_id)
