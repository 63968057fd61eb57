"""Sample data for local development.

Inserts a handful of users (all with the password ``password``), a friendship
graph between them, posts with likes, and dashboard products and transactions.
Seeding is refused if any user already exists.
"""

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from .models.models import (
    Post,
    PostLike,
    Product,
    ProductStat,
    Transaction,
    User,
)
from .services import auth_service, user_service

logger = logging.getLogger(__name__)

SEED_PASSWORD = "password"

USERS = [
    {
        "first_name": "Steve",
        "last_name": "Ralph",
        "email": "aaaaaaa@gmail.com",
        "location": "San Fran, CA",
        "occupation": "Software Engineer",
    },
    {
        "first_name": "Whatcha",
        "last_name": "Doing",
        "email": "thisisanemail@gmail.com",
        "location": "New York, CA",
        "occupation": "Photographer",
    },
    {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "someguy@gmail.com",
        "location": "Canada, CA",
        "occupation": "Data Scientist Hacker",
    },
    {
        "first_name": "Harvey",
        "last_name": "Dunn",
        "email": "harveydunn@gmail.com",
        "location": "Los Angeles, CA",
        "occupation": "Journalist",
    },
]

# Pairs of indexes into USERS
FRIENDSHIPS = [(0, 1), (0, 2), (1, 3)]

POSTS = [
    (1, "Some really long random description", [0, 2]),
    (2, "Another really long random description", [0, 1, 3]),
    (3, "This one is short", []),
    (0, "Hello world", [1]),
]

PRODUCTS = [
    ("Running Shoes", 89.99, "Lightweight trainers", "footwear", 4.5, 120),
    ("Denim Jacket", 59.5, "Classic cut", "clothing", 3.8, 45),
    ("Sun Hat", 19.0, "Wide brim", "accessories", 4.1, 300),
]


def seed_database(db: Session) -> None:
    if db.query(User).first() is not None:
        logger.warning("Database already has users, skipping seed")
        return

    users = [
        auth_service.register(db, password=SEED_PASSWORD, **profile)
        for profile in USERS
    ]
    for a, b in FRIENDSHIPS:
        user_service.toggle_friend(db, users[a].user_id, users[b].user_id)

    for author, description, likers in POSTS:
        user = users[author]
        post = Post(
            user_id=user.user_id,
            first_name=user.first_name,
            last_name=user.last_name,
            location=user.location,
            user_picture_path=user.picture_path,
            description=description,
        )
        post.post_likes = [PostLike(user_id=users[i].user_id) for i in likers]
        db.add(post)

    year = datetime.utcnow().year
    products = []
    for name, price, description, category, rating, supply in PRODUCTS:
        product = Product(
            name=name,
            price=price,
            description=description,
            category=category,
            rating=rating,
            supply=supply,
        )
        units = supply // 3
        product.stat = ProductStat(
            year=year,
            yearly_sales_total=round(units * price, 2),
            yearly_total_sold_units=units,
        )
        db.add(product)
        products.append(product)
    db.flush()

    for i, user in enumerate(users):
        bought = products[: i % len(products) + 1]
        db.add(
            Transaction(
                user_id=user.user_id,
                cost=round(sum(p.price for p in bought), 2),
                product_ids=[p.product_id for p in bought],
            )
        )

    db.commit()
    logger.info(
        "Seeded %d users, %d posts, %d products",
        len(users),
        len(POSTS),
        len(products),
    )
