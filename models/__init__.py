from .base import Base
from .product import Product, ProductCategory, DEFAULT_IMAGE_URL

__all__ = [
    "Base",
    "Product",
    "ProductCategory",
    "DEFAULT_IMAGE_URL",
]
