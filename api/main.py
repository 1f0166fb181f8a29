# api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.envelope import EnvelopeRoute
from api.errors import setup_error_handling
from api.routes import authors, books
from core.config import CORS_ORIGINS, configure_logging
from core.sa.database import Database, get_default_database

logger = logging.getLogger(__name__)

health = APIRouter(route_class=EnvelopeRoute)

@health.get("/")
def root():
    return {"status": "ok"}


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the API bound to a database (the configured one by default)"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create the schema on startup, release connections on shutdown"""
        if app.state.database is None:
            app.state.database = get_default_database()
        app.state.database.init_db()
        yield
        app.state.database.dispose()

    app = FastAPI(
        title="Library Catalog",
        description="Authors and books with pagination, filtering and soft-delete",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.database = database

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    setup_error_handling(app)

    app.include_router(health, tags=["Health"])
    app.include_router(authors.router)
    app.include_router(books.router)
    return app


configure_logging()

# FastAPI app instance is exported for use by uvicorn (uvicorn api.main:app)
app = create_app()
