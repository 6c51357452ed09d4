"""
Main FastAPI application
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backoffice.config import get_settings
from backoffice.api import invoices, orders, packages, pricing, quotes
from backoffice.utils.logger import configure_logging, get_logger

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.DEBUG)
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} started")
    yield
    logger.info(f"{settings.APP_NAME} shutting down")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(pricing.router, prefix="/api/pricing", tags=["Pricing"])
app.include_router(quotes.router, prefix="/api/quotes", tags=["Quotes"])
app.include_router(invoices.router, prefix="/api/invoices", tags=["Invoices"])
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
app.include_router(packages.router, prefix="/api/packages", tags=["Packages"])


@app.get("/")
async def root():
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "backoffice.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
