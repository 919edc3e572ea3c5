"""
Item Service - Business Logic for Inventory Items
"""
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from crm.models import Item
from crm.schemas.item import ItemCreate

logger = logging.getLogger(__name__)

def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")

class ItemService:
    """Inventory business logic"""
    
    @staticmethod
    def get_items(db: Session) -> List[Item]:
        """Get all items, oldest first"""
        return db.query(Item).order_by(Item.created_at).all()
    
    @staticmethod
    def get_item_by_id(db: Session, item_id: UUID) -> Optional[Item]:
        """Get item by ID"""
        return db.query(Item).filter(Item.id == item_id).first()
    
    @staticmethod
    def search_items(db: Session, name_prefix: str) -> List[Item]:
        """Case-insensitive prefix match on item name"""
        return db.query(Item).filter(
            Item.item_name.ilike(f"{_escape_like(name_prefix)}%", escape="\\")
        ).order_by(Item.item_name).all()
    
    @staticmethod
    def create_item(db: Session, item_data: ItemCreate) -> Item:
        """Create new item"""
        item = Item(
            item_name=item_data.item_name,
            item_price=item_data.item_price,
            item_inventory=item_data.item_inventory,
            total_sold=0
        )
        
        db.add(item)
        db.commit()
        db.refresh(item)
        logger.info(f"Added item {item.id}: {item.item_name}")
        return item
