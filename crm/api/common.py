"""
Shared helpers for JSON endpoints
"""
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session
import logging

from crm.schemas.order import OrderDetails

logger = logging.getLogger(__name__)

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})

def input_error(exc: ValueError) -> JSONResponse:
    """400 response for a rejected payload"""
    if isinstance(exc, ValidationError):
        err = exc.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ()))
        message = f"Invalid {field}: {err.get('msg')}" if field else err.get("msg")
    else:
        message = str(exc)
    return error_response(400, message)

def server_error(db: Session, exc: Exception, message: str = "Internal server error") -> JSONResponse:
    """Roll back the session and report the raw error"""
    db.rollback()
    logger.exception(f"{message}: {exc}")
    return JSONResponse(status_code=500, content={"message": message, "error": str(exc)})

def parse_order_details(payload) -> OrderDetails:
    """Build order details from a camelCase request object"""
    if not isinstance(payload, dict):
        raise ValueError("Order details must be an object")
    return OrderDetails(
        status=payload.get("status"),
        remarks=payload.get("remarks"),
        mode_of_payment=payload.get("modeOfPayment"),
        total_amount=payload.get("totalAmount"),
        discount=payload.get("discount"),
        paid_amount=payload.get("paidAmount"),
        due_amount=payload.get("dueAmount")
    )
