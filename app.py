from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

import config
from database import engine
from models import Base
from routes import api_router
from utils import register_exception_handlers, setup_logger

logger = setup_logger("catalog")

# Create uploads directory if it doesn't exist
try:
    config.UPLOADS_DIR.mkdir(parents=True, exist_ok=True)
except (OSError, PermissionError) as e:
    logger.warning("Could not create upload directory %s: %s", config.UPLOADS_DIR, e)

# Create tables
Base.metadata.create_all(bind=engine)

app = FastAPI(title="Sustainable Product Catalog API", version=config.API_VERSION)

register_exception_handlers(app)

# Serve uploaded images at /uploads/<filename>
app.mount(
    "/uploads",
    StaticFiles(directory=str(config.UPLOADS_DIR), check_dir=False),
    name="uploads"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)

logger.info("Catalog API ready (uploads in %s)", config.UPLOADS_DIR)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
