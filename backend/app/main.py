import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from app.core.config import settings
from app.core.database import dispose_db, init_db
from app.core.logging import setup_logging
from app.api.error_handlers import register_error_handlers
from app.api.routes import auth, products, users

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage app lifecycle events.

    Startup: wait for the database (with backoff) and create missing tables
    Shutdown: close the connection pool
    """
    init_db()
    yield
    dispose_db()


app = FastAPI(
    title="Inventory API",
    description="Users and products over a relational store",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware - any origin by default
# Credentials are only allowed when origins are listed explicitly
cors_origins = settings.get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials="*" not in cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every inbound request as METHOD /path?query"""
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    logger.info(f"{request.method} {target}")
    return await call_next(request)


register_error_handlers(app)

# Account routes live under /api, CRUD routes at the root
app.include_router(auth.router, prefix="/api")
app.include_router(products.router)
app.include_router(users.router)


@app.get("/")
async def root():
    """Root endpoint - API information"""
    return {"message": "Inventory API", "version": "1.0.0"}


@app.get("/health")
async def health():
    """Health check endpoint - used by monitoring/deployment tools"""
    return {"status": "healthy"}


def run() -> None:
    """Serve the app on the configured host and port"""
    logger.info(f"Server running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
