# storefront/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI
from sqlmodel import Session

from storefront.core.config import get_settings
from storefront.core.errors import register_exception_handlers
from storefront.database import create_db_and_tables, engine

# Import models so SQLModel metadata is populated before create_all()
from storefront.models import product as _product_models  # noqa: F401
from storefront.models import cart as _cart_models  # noqa: F401

# Routers
from storefront.routers.products import router as products_router
from storefront.routers.categories import router as categories_router
from storefront.routers.cart import router as cart_router
from storefront.routers.seo import router as seo_router
from storefront.routers.products import service as product_service

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Create tables in the configured store.
      - Seed the catalog when it is empty (SEED_ON_STARTUP).

    Shutdown:
      - Nothing to clean up; the default store is process memory.
    """
    logger.info("🔄 Startup: preparing store (%s)...", engine.url.get_backend_name())
    try:
        create_db_and_tables()
        if settings.SEED_ON_STARTUP:
            with Session(engine) as session:
                inserted = product_service.seed_catalog(session, settings.SEED_PRODUCTS_PATH)
            logger.info("✅ Startup: store ready, %s product(s) seeded.", inserted)
        else:
            logger.info("✅ Startup: store ready, seeding disabled.")
    except Exception as e:
        logger.error(f"❌ Startup: store initialisation FAILED: {e}")
        raise
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# JSON API under /api, SEO files at the site root
app.include_router(products_router, prefix=settings.API_PREFIX)
app.include_router(categories_router, prefix=settings.API_PREFIX)
app.include_router(cart_router, prefix=settings.API_PREFIX)
app.include_router(seo_router)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "storefront"}
