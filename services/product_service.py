import math
import uuid
from typing import List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from models import Product, DEFAULT_IMAGE_URL
from utils import setup_logger

logger = setup_logger("catalog.services")

ALL_CATEGORIES = "All"

# Largest OFFSET/LIMIT the store accepts (signed 64-bit)
MAX_SQL_INT = 2 ** 63 - 1

# JSON field name -> sortable column
SORT_FIELDS = {
    "_id": Product.id,
    "name": Product.name,
    "category": Product.category,
    "sustainabilityScore": Product.sustainability_score,
    "price": Product.price,
    "inStock": Product.in_stock,
    "createdAt": Product.created_at,
    "updatedAt": Product.updated_at,
}


class InvalidProductId(ValueError):
    pass


def parse_product_id(product_id: str) -> str:
    """Normalize an identifier to the 32-char hex form the store assigns."""
    try:
        return uuid.UUID(product_id).hex
    except (ValueError, AttributeError, TypeError):
        raise InvalidProductId(f"Cast to id failed for value \"{product_id}\"")


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ProductService:
    @staticmethod
    def search_products(
        db: Session,
        search: str = "",
        category: str = "",
        page: int = 1,
        limit: int = 10,
        sort_by: str = "sustainabilityScore",
        sort_order: str = "desc",
    ) -> Tuple[List[Product], int]:
        """Return one page of matching products and the total match count."""
        query = db.query(Product)

        if search:
            pattern = f"%{_escape_like(search)}%"
            query = query.filter(or_(
                Product.name.ilike(pattern, escape="\\"),
                Product.description.ilike(pattern, escape="\\"),
            ))

        if category and category != ALL_CATEGORIES:
            query = query.filter(Product.category == category)

        total = query.count()

        skip = (page - 1) * limit
        if skip >= total:
            return [], total

        # Unknown fields leave only the id ordering
        ordering = []
        column = SORT_FIELDS.get(sort_by)
        if column is not None:
            ordering.append(column.desc() if sort_order == "desc" else column.asc())
        ordering.append(Product.id.asc())

        products = (
            query.order_by(*ordering)
            .offset(min(skip, MAX_SQL_INT))
            .limit(min(limit, MAX_SQL_INT))
            .all()
        )
        return products, total

    @staticmethod
    def paginate(total: int, page: int, limit: int) -> dict:
        total_pages = math.ceil(total / limit)
        return {
            "current_page": page,
            "total_pages": total_pages,
            "total_products": total,
            "has_next_page": page < total_pages,
            "has_prev_page": page > 1,
        }

    @staticmethod
    def get_categories(db: Session) -> List[str]:
        rows = db.query(Product.category).distinct().order_by(Product.category).all()
        return [row[0] for row in rows]

    @staticmethod
    def get_stats(db: Session) -> dict:
        count = func.count(Product.id)
        category_rows = (
            db.query(
                Product.category,
                count.label("product_count"),
                func.avg(Product.sustainability_score).label("avg_score"),
            )
            .group_by(Product.category)
            .order_by(count.desc(), Product.category.asc())
            .all()
        )
        top_products = (
            db.query(Product)
            .order_by(Product.sustainability_score.desc(), Product.id.asc())
            .limit(3)
            .all()
        )
        return {
            "category_stats": [
                {"id": row.category, "count": row.product_count, "avg_sustainability_score": float(row.avg_score)}
                for row in category_rows
            ],
            "top_sustainable_products": top_products,
        }

    @staticmethod
    def get_product(db: Session, product_id: str) -> Optional[Product]:
        return db.query(Product).filter(Product.id == parse_product_id(product_id)).first()

    @staticmethod
    def create_product(db: Session, product_data: dict) -> Product:
        # Inline data:image/... payloads are stored verbatim
        if not product_data.get("image_url"):
            product_data["image_url"] = DEFAULT_IMAGE_URL
        db_product = Product(**product_data)
        try:
            db.add(db_product)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(db_product)
        logger.info("Created product %s (%s)", db_product.id, db_product.name)
        return db_product

    @staticmethod
    def update_product(db: Session, db_product: Product, update_data: dict) -> Product:
        for key, value in update_data.items():
            setattr(db_product, key, value)
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(db_product)
        logger.info("Updated product %s fields=%s", db_product.id, sorted(update_data))
        return db_product

    @staticmethod
    def delete_product(db: Session, db_product: Product):
        product_id = db_product.id
        try:
            db.delete(db_product)
            db.commit()
        except Exception:
            db.rollback()
            raise
        logger.info("Deleted product %s", product_id)
