import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import contact, products, rfq
from app.core.config import settings
from app.core.email_config import get_mail_config
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.core.middleware import RequestIdMiddleware

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# OpenAPI Tags Metadata
# =============================================================================
tags_metadata = [
    {
        "name": "contact",
        "description": "**Contact** - Public contact form relayed to the sales or general inbox.",
    },
    {
        "name": "rfq",
        "description": "**Request for Quote** - Product quote requests relayed to sales, answered with a reference id.",
    },
    {
        "name": "products",
        "description": "**Products** - Read-only product catalog (gum arabic, myrrh, opoponax, frankincense).",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    mail_config = get_mail_config()
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    if not mail_config.smtp_host:
        logger.warning("SMTP_HOST is not set; contact and RFQ submissions will fail")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
## EAST Hides Lead API

Contact and request-for-quote intake for the EAST Hides website, plus the
read-only product catalog.
    """,
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID", "Accept", "Accept-Language"],
)

# Request ID Tracing
app.add_middleware(RequestIdMiddleware)

# Register global exception handlers
register_exception_handlers(app)

app.include_router(contact.router, prefix=settings.API_PREFIX, tags=["contact"])
app.include_router(rfq.router, prefix=settings.API_PREFIX, tags=["rfq"])
app.include_router(products.router, prefix=settings.API_PREFIX, tags=["products"])


@app.get("/health", summary="Health check")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
    }


@app.get("/", summary="API root")
async def root():
    """Root endpoint with API info"""
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "docs": "/docs",
        "health": "/health",
    }
