"""
API Router - JSON Endpoints
"""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
import logging

from crm.api.customers import router as customers_router
from crm.api.inventory import router as inventory_router
from crm.api.orders import router as orders_router

logger = logging.getLogger(__name__)

api_router = APIRouter(tags=["API"])

# Include sub-routers
api_router.include_router(customers_router)
api_router.include_router(inventory_router)
api_router.include_router(orders_router)

# ===================== HEALTH =====================

@api_router.get("/health")
async def health(request: Request):
    database = request.app.state.database
    if not database.is_open:
        return JSONResponse(status_code=500, content={"status": "error", "message": "Database not connected"})
    
    try:
        database.ping()
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(status_code=500, content={"status": "error", "message": str(e)})
    
    return {"status": "ok", "message": "Database connected"}
