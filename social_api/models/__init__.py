from .models import Friendship, Post, PostLike, Product, ProductStat, Transaction, User

__all__ = [
    "User",
    "Friendship",
    "Post",
    "PostLike",
    "Product",
    "ProductStat",
    "Transaction",
]
