from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, StringConstraints, field_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, Optional, List
from datetime import datetime

from models import ProductCategory

ProductName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
ProductDescription = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]
SustainabilityScore = Annotated[float, Field(ge=0, le=100)]
Price = Annotated[float, Field(ge=0)]


def _whole_number(value):
    # 90.0 goes out as 90
    if value is not None and float(value).is_integer():
        return int(value)
    return value


Number = Annotated[float, PlainSerializer(_whole_number, when_used="json")]

# Messages reported for a failing field, keyed by JSON field name and
# pydantic error type. "required" covers missing, null and blank values.
VALIDATION_MESSAGES = {
    "name": {
        "required": "Product name is required",
        "string_too_long": "Product name cannot exceed 100 characters",
    },
    "category": {
        "required": "Category is required",
        "enum": "Category must be one of the predefined options",
    },
    "description": {
        "required": "Description is required",
        "string_too_long": "Description cannot exceed 500 characters",
    },
    "sustainabilityScore": {
        "required": "Sustainability score is required",
        "greater_than_equal": "Sustainability score must be at least 0",
        "less_than_equal": "Sustainability score cannot exceed 100",
    },
    "price": {
        "greater_than_equal": "Price must be positive",
    },
    "page": {
        "greater_than_equal": "Page must be at least 1",
    },
    "limit": {
        "greater_than_equal": "Limit must be at least 1",
    },
}

REQUIRED_FIELDS = {"name", "category", "description", "sustainabilityScore"}


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductBase(CamelModel):
    model_config = ConfigDict(use_enum_values=True)

    name: ProductName
    category: ProductCategory
    description: ProductDescription
    sustainability_score: SustainabilityScore
    image_url: Optional[str] = None
    price: Optional[Price] = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(CamelModel):
    """Fields sent on update; only the ones present in the body are written.

    Leaving a required field out is fine, sending ``null`` for it is not.
    """
    model_config = ConfigDict(use_enum_values=True)

    name: Optional[ProductName] = None
    category: Optional[ProductCategory] = None
    description: Optional[ProductDescription] = None
    sustainability_score: Optional[SustainabilityScore] = None
    image_url: Optional[str] = None
    price: Optional[Price] = None
    in_stock: Optional[bool] = None

    @field_validator("name", "category", "description", "sustainability_score", "in_stock")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class ProductResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(alias="_id")
    name: str
    category: str
    description: str
    sustainability_score: Number
    image_url: Optional[str] = None
    price: Optional[Number] = None
    in_stock: bool
    created_at: datetime
    updated_at: datetime


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_products: int
    has_next_page: bool
    has_prev_page: bool


class ProductPage(CamelModel):
    products: List[ProductResponse]
    pagination: Pagination


class CategoryStat(CamelModel):
    id: str = Field(alias="_id")
    count: int
    avg_sustainability_score: Number


class TopProduct(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(alias="_id")
    name: str
    sustainability_score: Number
    category: str


class ProductStats(CamelModel):
    category_stats: List[CategoryStat]
    top_sustainable_products: List[TopProduct]


class ImageUploadResponse(CamelModel):
    message: str
    image_url: str
    filename: str


class MessageResponse(BaseModel):
    message: str
