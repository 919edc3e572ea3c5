"""
CRM Desk - Customers, Inventory & Orders
FastAPI Application Entry Point
"""
import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from typing import Optional
import logging
import os

import crm
from crm import __version__
from crm.core import settings, Database
from crm.web.router import web_router
from crm.api.router import api_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the application around a store handle (one from settings by default)"""
    if database is None:
        database = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    
    # Lifespan for startup/shutdown
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: open store and create tables if not exist
        app.state.database.open()
        logger.info(f"{settings.APP_NAME} starting on port {settings.APP_PORT}")
        
        yield
        
        # Shutdown
        app.state.database.close()
        logger.info(f"{settings.APP_NAME} shutting down")
    
    app = FastAPI(
        title=settings.APP_NAME,
        description="Customers, Inventory & Orders",
        version=__version__,
        lifespan=lifespan
    )
    app.state.database = database
    
    # Mount static files
    static_path = os.path.join(os.path.dirname(crm.__file__), "static")
    app.mount("/static", StaticFiles(directory=static_path), name="static")
    
    # Include routers
    app.include_router(web_router)
    app.include_router(api_router, prefix="/api")
    
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.APP_PORT,
        reload=settings.DEBUG
    )
