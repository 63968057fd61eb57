from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional


class LikeToggle(BaseModel):
    user_id: int


class PostResponse(BaseModel):
    post_id: int
    user_id: int
    first_name: str
    last_name: str
    location: str = ""
    user_picture_path: str = ""
    description: str
    picture_path: Optional[str] = None
    likes: List[int] = []
    like_count: int = 0
    comment_count: int = 0
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
