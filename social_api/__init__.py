"""Users, friendships, posts and likes behind token authentication."""

__version__ = "1.0.0"
