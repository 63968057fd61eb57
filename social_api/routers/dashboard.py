from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from ..dependencies import get_current_user_id, get_db
from ..schemas.dashboard import ProductResponse, TransactionPage
from ..schemas.user import FriendResponse
from ..services import dashboard_service

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
    dependencies=[Depends(get_current_user_id)],
)


@router.get("/products", response_model=List[ProductResponse])
def get_products(db: Session = Depends(get_db)):
    """Get all products with their yearly statistics"""
    return dashboard_service.list_products(db)


@router.get("/customers", response_model=List[FriendResponse])
def get_customers(db: Session = Depends(get_db)):
    """Get the public profile of every user"""
    return dashboard_service.list_customers(db)


@router.get("/transactions", response_model=TransactionPage)
def get_transactions(
    page: int = Query(0, ge=0),
    page_size: int = Query(20, ge=1, le=100),
    sort: str = "created_at",
    order: str = "desc",
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Get a page of transactions, optionally sorted and filtered"""
    transactions, total = dashboard_service.list_transactions(
        db,
        page=page,
        page_size=page_size,
        sort=sort,
        order=order,
        search=search,
    )
    return {"transactions": transactions, "total": total}
