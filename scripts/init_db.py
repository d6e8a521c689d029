import sys
import os

# Add parent directory to path so we can import from root
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import Base, engine, SessionLocal
from models import Product, ProductCategory
from sqlalchemy import func
from utils import setup_logger

logger = setup_logger("catalog.scripts")

SAMPLE_PRODUCTS = [
    {
        "name": "Bamboo Toothbrush Set",
        "category": ProductCategory.PERSONAL_CARE.value,
        "description": "Biodegradable bamboo handles with plant-based bristles, pack of four",
        "sustainability_score": 92,
        "price": 12.99,
    },
    {
        "name": "Solar Power Bank",
        "category": ProductCategory.ELECTRONICS.value,
        "description": "20000mAh power bank with an integrated solar panel and recycled aluminium shell",
        "sustainability_score": 78,
        "price": 49.5,
    },
    {
        "name": "Organic Cotton T-Shirt",
        "category": ProductCategory.CLOTHING.value,
        "description": "GOTS certified organic cotton, dyed with low-impact pigments",
        "sustainability_score": 85,
        "price": 24.0,
    },
    {
        "name": "Fair Trade Coffee Beans",
        "category": ProductCategory.FOOD_AND_BEVERAGE.value,
        "description": "Shade-grown arabica roasted in small batches, compostable packaging",
        "sustainability_score": 81,
        "price": 15.75,
    },
    {
        "name": "Recycled Glass Planter",
        "category": ProductCategory.HOME_AND_GARDEN.value,
        "description": "Hand-blown planter made from post-consumer glass bottles",
        "sustainability_score": 74,
        "price": 32.0,
    },
    {
        "name": "Folding E-Bike",
        "category": ProductCategory.TRANSPORTATION.value,
        "description": "Lightweight commuter e-bike with a replaceable, recyclable battery pack",
        "sustainability_score": 88,
        "price": 1199.0,
    },
    {
        "name": "Home Wind Turbine",
        "category": ProductCategory.ENERGY.value,
        "description": "Rooftop micro turbine rated at 400W for off-grid setups",
        "sustainability_score": 90,
        "price": 649.0,
    },
    {
        "name": "Beeswax Food Wraps",
        "category": ProductCategory.OTHER.value,
        "description": "Reusable alternative to plastic cling film, set of three sizes",
        "sustainability_score": 95,
        "price": 18.0,
        "in_stock": False,
    },
]


def init_database():
    """Create tables and seed sample products into an empty catalog"""
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        products_count = db.query(func.count(Product.id)).scalar()
        if products_count == 0:
            db.add_all([Product(**data) for data in SAMPLE_PRODUCTS])
            db.commit()
            logger.info("Added %d products", len(SAMPLE_PRODUCTS))
        else:
            logger.info("Catalog already has %d products, skipping seed", products_count)
        logger.info("Database initialized successfully!")
    except Exception:
        logger.exception("Error initializing database")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    init_database()
