from pydantic import BaseModel, EmailStr
from datetime import datetime
from typing import List, Optional


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    user_id: int
    first_name: str
    last_name: str
    email: str
    picture_path: str = ""
    location: str = ""
    occupation: str = ""
    viewed_profile: int = 0
    impressions: int = 0
    friends: List[int] = []
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FriendResponse(BaseModel):
    """Public profile shown in friend lists"""

    user_id: int
    first_name: str
    last_name: str
    occupation: str = ""
    location: str = ""
    picture_path: str = ""

    class Config:
        from_attributes = True


class FriendPairResponse(BaseModel):
    user: UserResponse
    friend: UserResponse


class Token(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserResponse
