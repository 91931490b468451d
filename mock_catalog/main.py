"""
Mock Catalog Application

A local stand-in for the remote products API, used for development and
integration tests.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from dotenv import load_dotenv

from powerplay.core.config import get_settings
from powerplay.core.logging_config import configure_logging
from .database import product_db
from .routes import router as products_router

# Load environment variables
load_dotenv()

configure_logging(get_settings())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Mock Catalog starting up...")
    logger.info(f"Serving {len(product_db.products)} products")
    yield
    logger.info("Mock Catalog shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Mock Catalog",
    description="Simulated paginated products API",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(products_router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "mock-catalog"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mock_catalog.main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
    )
