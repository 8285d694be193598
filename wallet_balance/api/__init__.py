"""
Wallet Balance API Application Factory
"""

from fastapi import FastAPI

from .. import __version__
from .addresses import router as addresses_router
from .wallets import router as wallets_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title="Wallet Balance API",
        description="Solana wallet address validation and balance calculation",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.include_router(addresses_router, prefix="/addresses", tags=["Addresses"])
    app.include_router(wallets_router, prefix="/wallets", tags=["Wallets"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "wallet_balance_api",
            "version": __version__
        }

    @app.get("/")
    async def get_api_info():
        """Get API information"""
        return {
            "name": "Wallet Balance API",
            "version": __version__,
            "endpoints": {
                "docs": "/docs",
                "health": "/health",
                "validate_address": "/addresses/{address}/validate",
                "wallet_balance": "/wallets/{address}/balance",
            }
        }

    return app


app = create_app()
