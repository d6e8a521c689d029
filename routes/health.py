from fastapi import APIRouter

import config

router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Health check endpoint"""
    return {
        "status": "online",
        "message": "Sustainable Product Catalog API is running",
        "version": config.API_VERSION
    }


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}
