import pytest

from social_api.errors import ValidationError
from social_api.models.models import Post, Transaction, User
from social_api.seed import SEED_PASSWORD, USERS, seed_database
from social_api.services import dashboard_service

from .conftest import auth_headers


@pytest.fixture
def seeded_client(client):
    with client.app.state.session_factory() as db:
        seed_database(db)
    return client


@pytest.fixture
def seeded_headers(seeded_client):
    return auth_headers(seeded_client, USERS[0]["email"], SEED_PASSWORD)


def test_seed_is_idempotent(db):
    seed_database(db)
    seed_database(db)
    assert db.query(User).count() == len(USERS)
    assert db.query(Post).count() > 0


def test_seeded_friendships_are_symmetric(db):
    seed_database(db)
    for user in db.query(User).all():
        for friend_id in user.friends:
            friend = db.query(User).filter(User.user_id == friend_id).one()
            assert user.user_id in friend.friends


def test_products_include_stats(seeded_client, seeded_headers):
    response = seeded_client.get("/dashboard/products", headers=seeded_headers)
    assert response.status_code == 200
    products = response.json()
    assert len(products) == 3
    for product in products:
        assert product["stat"]["yearly_total_sold_units"] == product["supply"] // 3


def test_customers_hide_private_fields(seeded_client, seeded_headers):
    customers = seeded_client.get(
        "/dashboard/customers", headers=seeded_headers
    ).json()
    assert len(customers) == len(USERS)
    assert all("email" not in c and "password_hash" not in c for c in customers)


def test_transactions_paginate(seeded_client, seeded_headers):
    response = seeded_client.get(
        "/dashboard/transactions",
        params={"page": 0, "page_size": 3, "sort": "cost", "order": "asc"},
        headers=seeded_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == len(USERS)
    costs = [t["cost"] for t in body["transactions"]]
    assert len(costs) == 3
    assert costs == sorted(costs)

    second = seeded_client.get(
        "/dashboard/transactions",
        params={"page": 1, "page_size": 3, "sort": "cost", "order": "asc"},
        headers=seeded_headers,
    ).json()
    assert len(second["transactions"]) == len(USERS) - 3


def test_transactions_bad_sort(seeded_client, seeded_headers):
    response = seeded_client.get(
        "/dashboard/transactions",
        params={"sort": "password_hash"},
        headers=seeded_headers,
    )
    assert response.status_code == 400


def test_transactions_search_by_user(db):
    seed_database(db)
    user_id = db.query(Transaction).first().user_id

    rows, total = dashboard_service.list_transactions(db, search=str(user_id))
    assert total >= 1
    assert any(t.user_id == user_id for t in rows)


def test_transactions_bad_order(db):
    with pytest.raises(ValidationError):
        dashboard_service.list_transactions(db, order="sideways")


def test_dashboard_requires_token(client):
    assert client.get("/dashboard/products").status_code == 401
