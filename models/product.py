import enum
import uuid
from datetime import datetime

from sqlalchemy import Column, String, Float, Boolean, DateTime, Text, CheckConstraint
from .base import Base

DEFAULT_IMAGE_URL = "https://via.placeholder.com/300x200?text=Sustainable+Product"


class ProductCategory(str, enum.Enum):
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    FOOD_AND_BEVERAGE = "Food & Beverage"
    HOME_AND_GARDEN = "Home & Garden"
    PERSONAL_CARE = "Personal Care"
    TRANSPORTATION = "Transportation"
    ENERGY = "Energy"
    OTHER = "Other"


def generate_product_id() -> str:
    return uuid.uuid4().hex


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint(
            "sustainability_score >= 0 AND sustainability_score <= 100",
            name="ck_products_sustainability_score_range"
        ),
        CheckConstraint("price IS NULL OR price >= 0", name="ck_products_price_positive"),
    )

    id = Column(String(32), primary_key=True, default=generate_product_id)
    name = Column(String(100), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    description = Column(String(500), nullable=False)
    sustainability_score = Column(Float, nullable=False, index=True)
    # Text: may hold an inline data:image/... payload
    image_url = Column(Text, nullable=True, default=DEFAULT_IMAGE_URL)
    price = Column(Float, nullable=True)
    in_stock = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
