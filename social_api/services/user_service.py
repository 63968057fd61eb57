import logging
from typing import List, Tuple

from sqlalchemy.orm import Session

from ..errors import NotFoundError, ValidationError
from ..models.models import Friendship, User

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.user_id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def get_user_friends(db: Session, user_id: int) -> List[User]:
    """Resolve the user's friends in the order they were added.

    Friend ids that no longer resolve to a user are skipped.
    """
    user = get_user(db, user_id)
    friend_ids = user.friends
    if not friend_ids:
        return []

    found = {
        u.user_id: u
        for u in db.query(User).filter(User.user_id.in_(friend_ids)).all()
    }
    friends = []
    for friend_id in friend_ids:
        friend = found.get(friend_id)
        if friend is None:
            logger.warning(
                "User %s has dangling friend reference %s", user_id, friend_id
            )
            continue
        friends.append(friend)
    return friends


def toggle_friend(
    db: Session, user_id: int, friend_id: int
) -> Tuple[User, User]:
    """Add the friendship in both directions, or remove it if present"""
    if user_id == friend_id:
        raise ValidationError("Users cannot befriend themselves")

    user = get_user(db, user_id)
    friend = get_user(db, friend_id)

    forward = [f for f in user.friendships if f.friend_id == friend_id]
    backward = [f for f in friend.friendships if f.friend_id == user_id]

    if forward or backward:
        # delete-orphan cascade removes the rows on commit
        for row in forward:
            user.friendships.remove(row)
        for row in backward:
            friend.friendships.remove(row)
        action = "removed"
    else:
        user.friendships.append(Friendship(friend_id=friend_id))
        friend.friendships.append(Friendship(friend_id=user_id))
        action = "added"

    db.commit()

    logger.info("Friendship %s between %s and %s", action, user_id, friend_id)
    return user, friend
