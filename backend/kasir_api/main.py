"""
Application factory for the Kasir API.

``create_app`` wires storage, repositories and services once, at
startup, according to ``Settings.STORAGE_BACKEND``.  Run with::

    uvicorn kasir_api.main:app --reload
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kasir_api.api import categories, health, products
from kasir_api.core.config import Settings, settings as default_settings
from kasir_api.core.exceptions import register_exception_handlers
from kasir_api.core.logging_config import setup_logging
from kasir_api.db import migration
from kasir_api.db.seeder import DEMO_CATEGORIES, DEMO_PRODUCTS, Seeder
from kasir_api.db.session import create_db_engine, ensure_database
from kasir_api.repositories import (
    InMemoryCategoryRepository,
    InMemoryProductRepository,
    SqlCategoryRepository,
    SqlProductRepository,
)
from kasir_api.services import CategoryService, ProductService

logger = logging.getLogger(__name__)


def bootstrap_database(app: FastAPI, settings: Settings) -> None:
    """Run migrations and seeders as configured."""
    engine = app.state.engine
    if settings.RUN_MIGRATIONS:
        migration.migrate(engine)
    if settings.RUN_SEEDERS:
        Seeder(engine).run()


def build_services(app: FastAPI, settings: Settings) -> None:
    if settings.is_sql:
        engine = create_db_engine(settings.DATABASE_URL)
        app.state.engine = engine
        category_repo = SqlCategoryRepository(engine)
        product_repo = SqlProductRepository(engine)
    else:
        app.state.engine = None
        category_repo = InMemoryCategoryRepository(DEMO_CATEGORIES)
        product_repo = InMemoryProductRepository(DEMO_PRODUCTS)

    app.state.category_service = CategoryService(category_repo)
    app.state.product_service = ProductService(product_repo, category_repo)
    logger.info("Using %s storage", settings.STORAGE_BACKEND)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.is_sql:
            if settings.CREATE_DATABASE:
                ensure_database(settings.DATABASE_URL)
            bootstrap_database(app, settings)
        logger.info("Server running in %s mode", settings.ENV)

        yield

        if app.state.engine is not None:
            app.state.engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="API for managing categories and products",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    build_services(app, settings)

    app.include_router(categories.router)
    app.include_router(products.router)
    app.include_router(health.router)

    return app


app = create_app()
