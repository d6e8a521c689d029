from .product import (
    ProductBase,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    Pagination,
    ProductPage,
    CategoryStat,
    TopProduct,
    ProductStats,
    ImageUploadResponse,
    MessageResponse,
    VALIDATION_MESSAGES,
    REQUIRED_FIELDS,
)

__all__ = [
    "ProductBase", "ProductCreate", "ProductUpdate", "ProductResponse",
    "Pagination", "ProductPage", "CategoryStat", "TopProduct", "ProductStats",
    "ImageUploadResponse", "MessageResponse",
    "VALIDATION_MESSAGES", "REQUIRED_FIELDS",
]
