from sqlalchemy import (
    JSON,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    picture_path = Column(String(255), nullable=False, default="")
    location = Column(String(100), nullable=False, default="")
    occupation = Column(String(100), nullable=False, default="")
    viewed_profile = Column(Integer, nullable=False, default=0)
    impressions = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )

    friendships = relationship(
        "Friendship",
        foreign_keys="Friendship.user_id",
        order_by="Friendship.friendship_id",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    posts = relationship("Post", back_populates="user")

    @property
    def friends(self):
        return [f.friend_id for f in self.friendships]


class Friendship(Base):
    """One direction of the symmetric friend relation"""

    __tablename__ = "friendships"

    friendship_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    friend_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship(
        "User", foreign_keys=[user_id], back_populates="friendships"
    )

    __table_args__ = (
        UniqueConstraint("user_id", "friend_id", name="unique_friendship"),
        CheckConstraint("user_id != friend_id", name="no_self_friendship"),
    )


class Post(Base):
    __tablename__ = "posts"

    post_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    # Copied from the author when the post is created, never re-synced
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    location = Column(String(100), nullable=False, default="")
    user_picture_path = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    picture_path = Column(String(255), nullable=True)
    comment_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )

    user = relationship("User", back_populates="posts")
    post_likes = relationship(
        "PostLike",
        order_by="PostLike.like_id",
        back_populates="post",
        cascade="all, delete-orphan",
    )

    @property
    def likes(self):
        return [like.user_id for like in self.post_likes]

    @property
    def like_count(self):
        return len(self.post_likes)


class PostLike(Base):
    __tablename__ = "post_likes"

    like_id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("posts.post_id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    liked_at = Column(DateTime, server_default=func.now())

    post = relationship("Post", back_populates="post_likes")

    __table_args__ = (
        UniqueConstraint("post_id", "user_id", name="unique_post_like"),
    )


class Product(Base):
    __tablename__ = "products"

    product_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=False, default=0.0)
    description = Column(Text)
    category = Column(String(100))
    rating = Column(Float, nullable=False, default=0.0)
    supply = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now())

    stat = relationship(
        "ProductStat",
        uselist=False,
        back_populates="product",
        cascade="all, delete-orphan",
    )


class ProductStat(Base):
    __tablename__ = "product_stats"

    stat_id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(
        Integer, ForeignKey("products.product_id"), unique=True, nullable=False
    )
    year = Column(Integer, nullable=False)
    yearly_sales_total = Column(Float, nullable=False, default=0.0)
    yearly_total_sold_units = Column(Integer, nullable=False, default=0)

    product = relationship("Product", back_populates="stat")


class Transaction(Base):
    __tablename__ = "transactions"

    transaction_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    cost = Column(Float, nullable=False)
    product_ids = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, server_default=func.now())
