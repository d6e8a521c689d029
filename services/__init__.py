from .product_service import ProductService, InvalidProductId
from .image_service import ImageService, ImageUploadError

__all__ = ["ProductService", "InvalidProductId", "ImageService", "ImageUploadError"]
