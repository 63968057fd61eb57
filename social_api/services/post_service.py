import logging
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from ..errors import NotFoundError
from ..models.models import Post, PostLike
from .user_service import get_user

logger = logging.getLogger(__name__)


def create_post(
    db: Session,
    user_id: int,
    description: str,
    picture_path: Optional[str] = None,
) -> Post:
    """Create a post, copying the author's display fields onto it"""
    user = get_user(db, user_id)

    post = Post(
        user_id=user.user_id,
        first_name=user.first_name,
        last_name=user.last_name,
        location=user.location,
        user_picture_path=user.picture_path,
        description=description,
        picture_path=picture_path,
        comment_count=0,
    )
    db.add(post)
    db.commit()
    db.refresh(post)

    logger.info("User %s created post %s", user_id, post.post_id)
    return post


def _newest_first(query):
    return query.options(selectinload(Post.post_likes)).order_by(
        Post.created_at.desc(), Post.post_id.desc()
    )


def list_feed_posts(db: Session) -> List[Post]:
    return _newest_first(db.query(Post)).all()


def list_user_posts(db: Session, user_id: int) -> List[Post]:
    return _newest_first(db.query(Post).filter(Post.user_id == user_id)).all()


def get_post(db: Session, post_id: int) -> Post:
    post = db.query(Post).filter(Post.post_id == post_id).first()
    if not post:
        raise NotFoundError("Post not found")
    return post


def toggle_like(db: Session, post_id: int, user_id: int) -> Post:
    """Flip ``user_id``'s membership in the post's like set"""
    post = get_post(db, post_id)
    get_user(db, user_id)

    existing = [like for like in post.post_likes if like.user_id == user_id]
    if existing:
        for like in existing:
            post.post_likes.remove(like)
        action = "unliked"
    else:
        post.post_likes.append(PostLike(user_id=user_id))
        action = "liked"

    db.commit()

    logger.info("User %s %s post %s", user_id, action, post_id)
    return post
