import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import IntegrityError

from gallery.core.config import config
from gallery.core.db import registry  # noqa: F401
from gallery.core.db.engine import check_database_connection
from gallery.core.exceptions import (
    DatabaseError,
    global_exception_handler,
    integrity_error_handler,
)
from gallery.core.response_interceptor import (
    SuccessResponseInterceptor,
    CustomAPIRoute,
)
from gallery.modules.categories.router import router as categories_router
from gallery.modules.dashboards.router import router as dashboards_router
from gallery.modules.templates.router import router as templates_router
from gallery.modules.elements.router import router as elements_router
from gallery.modules.contents.router import router as contents_router
from gallery.modules.authors.router import router as authors_router
from gallery.modules.records.router import router as records_router

# Configure logging to output to console
logging.basicConfig(
    level=config.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)
logger.info("Starting Gallery API...")

app = FastAPI(
    title="Gallery API",
    description="Dashboards, their templates, elements and contents",
    version="1.0.0",
)

# Override the default route class to support skip_interceptor decorator
app.router.route_class = CustomAPIRoute

app.add_exception_handler(IntegrityError, integrity_error_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add Success Response Interceptor (must be added after CORS)
app.add_middleware(SuccessResponseInterceptor)

# Include routers with /api prefix
app.include_router(categories_router, prefix="/api")
app.include_router(dashboards_router, prefix="/api")
app.include_router(templates_router, prefix="/api")
app.include_router(elements_router, prefix="/api")
app.include_router(contents_router, prefix="/api")
app.include_router(authors_router, prefix="/api")
app.include_router(records_router, prefix="/api")


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness plus a round trip to the database."""
    if not await check_database_connection():
        raise DatabaseError("Database unavailable")
    return {"status": "ok", "database": "ok"}
