from typing import List, Optional, Tuple

from sqlalchemy import String, cast, or_
from sqlalchemy.orm import Session, selectinload

from ..errors import ValidationError
from ..models.models import Product, Transaction, User

SORTABLE_TRANSACTION_FIELDS = {
    "cost": Transaction.cost,
    "created_at": Transaction.created_at,
    "user_id": Transaction.user_id,
}


def list_products(db: Session) -> List[Product]:
    return (
        db.query(Product)
        .options(selectinload(Product.stat))
        .order_by(Product.product_id)
        .all()
    )


def list_customers(db: Session) -> List[User]:
    return db.query(User).order_by(User.user_id).all()


def list_transactions(
    db: Session,
    page: int = 0,
    page_size: int = 20,
    sort: str = "created_at",
    order: str = "desc",
    search: Optional[str] = None,
) -> Tuple[List[Transaction], int]:
    """Return one page of transactions and the total matching count"""
    column = SORTABLE_TRANSACTION_FIELDS.get(sort)
    if column is None:
        raise ValidationError(f"Cannot sort transactions by {sort!r}")
    if order not in ("asc", "desc"):
        raise ValidationError("Order must be 'asc' or 'desc'")

    query = db.query(Transaction)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                cast(Transaction.cost, String).like(pattern),
                cast(Transaction.user_id, String).like(pattern),
            )
        )

    total = query.count()
    ordering = column.asc() if order == "asc" else column.desc()
    transactions = (
        query.order_by(ordering, Transaction.transaction_id)
        .offset(page * page_size)
        .limit(page_size)
        .all()
    )
    return transactions, total
