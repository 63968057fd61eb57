from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional


class ProductStatResponse(BaseModel):
    year: int
    yearly_sales_total: float
    yearly_total_sold_units: int

    class Config:
        from_attributes = True


class ProductResponse(BaseModel):
    product_id: int
    name: str
    price: float
    description: Optional[str] = None
    category: Optional[str] = None
    rating: float
    supply: int
    stat: Optional[ProductStatResponse] = None

    class Config:
        from_attributes = True


class TransactionResponse(BaseModel):
    transaction_id: int
    user_id: int
    cost: float
    product_ids: List[int] = []
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TransactionPage(BaseModel):
    transactions: List[TransactionResponse]
    total: int
