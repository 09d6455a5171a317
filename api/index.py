"""
SBT Storefront - Main FastAPI Application

Single entry point for the catalog and cart APIs.
Deployed as one serverless function on Vercel.
"""
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.db import SUPABASE_SERVICE_ROLE_KEY, SUPABASE_URL
from core.logging import get_logger
from core.routers import admin_router, cart_router, catalog_router
from core.services.database import close_database, init_database

logger = get_logger(__name__)

# Comma-separated storefront origins allowed to send the cart cookie
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:5000").split(",")
    if origin.strip()
]


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    if SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY:
        await init_database()
    else:
        logger.warning("SUPABASE_URL/SUPABASE_SERVICE_ROLE_KEY not set; catalog endpoints disabled")
    yield
    # Shutdown
    await close_database()


app = FastAPI(
    title="SBT Storefront",
    description="Product catalog, cart and WhatsApp checkout API",
    version="1.0.0",
    lifespan=lifespan,
)

# Cart cookies need credentials, so origins are listed explicitly
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog_router)
app.include_router(cart_router)
app.include_router(admin_router, prefix="/api/admin")


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "sbt-storefront"}
