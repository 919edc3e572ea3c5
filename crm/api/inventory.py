"""
Inventory API - add and look up items
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from uuid import UUID
import logging

from crm.core import get_db
from crm.schemas.item import ItemCreate
from crm.services import ItemService
from .common import error_response, input_error, server_error
from .serializers import item_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inventory", tags=["Inventory"])


@router.post("/add-item", status_code=201)
async def add_item(data: dict, db: Session = Depends(get_db)):
    required = ("itemName", "itemPrice", "itemInventory")
    if any(data.get(field) in (None, "") for field in required):
        return error_response(400, "All fields are required: itemName, itemPrice, itemInventory.")
    
    try:
        item_data = ItemCreate(
            item_name=data.get("itemName"),
            item_price=data.get("itemPrice"),
            item_inventory=data.get("itemInventory")
        )
        item = ItemService.create_item(db, item_data)
    except ValueError as e:
        db.rollback()
        return input_error(e)
    except Exception as e:
        return server_error(db, e)
    
    return {"message": "Item added to inventory successfully", "item": item_to_dict(item)}


@router.get("/get-item")
async def list_items(db: Session = Depends(get_db)):
    """All items; an empty inventory is not an error"""
    items = ItemService.get_items(db)
    return {"message": "Items retrieved successfully", "items": [item_to_dict(i) for i in items]}


@router.post("/get-item")
async def find_item(data: dict, db: Session = Depends(get_db)):
    """Single item by id, or items whose name starts with itemName"""
    item_name = data.get("itemName")
    item_id = data.get("id")
    if not item_name and not item_id:
        return error_response(400, "itemName or id is required")
    
    if item_id:
        try:
            item = ItemService.get_item_by_id(db, UUID(str(item_id)))
        except ValueError:
            item = None
        
        if not item:
            return error_response(404, "Item not found")
        return {"message": "Item found", "item": item_to_dict(item)}
    
    items = ItemService.search_items(db, str(item_name))
    if not items:
        return error_response(404, "Item not found")
    
    return {"message": "Items found", "items": [item_to_dict(i) for i in items]}
