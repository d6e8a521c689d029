from fastapi import APIRouter, Depends, UploadFile, File, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from database import get_db
import schemas
from services import ProductService, ImageService, ImageUploadError
from utils import CatalogError, setup_logger

logger = setup_logger("catalog.routes")

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=schemas.ProductPage)
async def get_products(
    search: str = "",
    category: str = "",
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    sort_by: str = Query("sustainabilityScore", alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder"),
    db: Session = Depends(get_db)
):
    """Search, filter and paginate products"""
    try:
        products, total = ProductService.search_products(
            db, search, category, page, limit, sort_by, sort_order
        )
    except Exception as e:
        logger.exception("Error fetching products")
        raise CatalogError.server_error("Error fetching products", e)

    return schemas.ProductPage(
        products=[schemas.ProductResponse.model_validate(p) for p in products],
        pagination=schemas.Pagination(**ProductService.paginate(total, page, limit)),
    )


@router.get("/categories", response_model=List[str])
async def get_categories(db: Session = Depends(get_db)):
    """Categories currently used by at least one product"""
    try:
        return ProductService.get_categories(db)
    except Exception as e:
        logger.exception("Error fetching categories")
        raise CatalogError.server_error("Error fetching categories", e)


@router.get("/stats", response_model=schemas.ProductStats)
async def get_stats(db: Session = Depends(get_db)):
    """Per-category counts and average scores, plus the top 3 products"""
    try:
        stats = ProductService.get_stats(db)
    except Exception as e:
        logger.exception("Error fetching stats")
        raise CatalogError.server_error("Error fetching statistics", e)

    return schemas.ProductStats(
        category_stats=[schemas.CategoryStat(**row) for row in stats["category_stats"]],
        top_sustainable_products=[
            schemas.TopProduct.model_validate(p) for p in stats["top_sustainable_products"]
        ],
    )


@router.get("/{product_id}", response_model=schemas.ProductResponse)
async def get_product(product_id: str, db: Session = Depends(get_db)):
    """Get a single product by ID"""
    try:
        product = ProductService.get_product(db, product_id)
    except Exception as e:
        logger.exception("Error fetching product")
        raise CatalogError.server_error("Error fetching product", e)
    if not product:
        raise CatalogError.not_found()
    return product


@router.post("/upload", response_model=schemas.ImageUploadResponse)
async def upload_image(image: Optional[UploadFile] = File(None)):
    """Store an uploaded image and return the URL it is served from"""
    if not image or not image.filename:
        raise CatalogError(400, "No image file provided")

    try:
        filename = await ImageService.save_image(image)
    except ImageUploadError as e:
        raise CatalogError(400, str(e))
    except Exception as e:
        logger.exception("Error uploading image")
        raise CatalogError.server_error("Error uploading image", e)

    return schemas.ImageUploadResponse(
        message="Image uploaded successfully",
        image_url=ImageService.public_url(filename),
        filename=filename,
    )


@router.post("", response_model=schemas.ProductResponse, status_code=201)
async def create_product(product: schemas.ProductCreate, db: Session = Depends(get_db)):
    """Create a new product"""
    try:
        return ProductService.create_product(db, product.model_dump())
    except Exception as e:
        logger.exception("Error creating product")
        raise CatalogError.server_error("Error creating product", e)


@router.put("/{product_id}", response_model=schemas.ProductResponse)
async def update_product(
    product_id: str,
    product: schemas.ProductUpdate,
    db: Session = Depends(get_db)
):
    """Overwrite the fields present in the body"""
    try:
        db_product = ProductService.get_product(db, product_id)
        if db_product:
            db_product = ProductService.update_product(
                db, db_product, product.model_dump(exclude_unset=True)
            )
    except Exception as e:
        logger.exception("Error updating product")
        raise CatalogError.server_error("Error updating product", e)
    if not db_product:
        raise CatalogError.not_found()
    return db_product


@router.delete("/{product_id}", response_model=schemas.MessageResponse)
async def delete_product(product_id: str, db: Session = Depends(get_db)):
    """Delete a product"""
    try:
        db_product = ProductService.get_product(db, product_id)
        if db_product:
            ProductService.delete_product(db, db_product)
    except Exception as e:
        logger.exception("Error deleting product")
        raise CatalogError.server_error("Error deleting product", e)
    if not db_product:
        raise CatalogError.not_found()
    return {"message": "Product deleted successfully"}
