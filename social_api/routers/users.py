from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from ..dependencies import get_current_user_id, get_db
from ..schemas.user import FriendPairResponse, FriendResponse, UserResponse
from ..services import user_service

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    dependencies=[Depends(get_current_user_id)],
)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    """Get a user's profile"""
    return user_service.get_user(db, user_id)


@router.get("/{user_id}/friends", response_model=List[FriendResponse])
def get_user_friends(user_id: int, db: Session = Depends(get_db)):
    """Get a user's friends in the order they were added"""
    return user_service.get_user_friends(db, user_id)


@router.patch("/{user_id}/{friend_id}", response_model=FriendPairResponse)
def toggle_friend(
    user_id: int, friend_id: int, db: Session = Depends(get_db)
):
    """Add or remove a friendship between two users"""
    user, friend = user_service.toggle_friend(db, user_id, friend_id)
    return {"user": user, "friend": friend}
