"""
Base Model Mixins
"""
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Uuid
import uuid

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class UUIDMixin:
    """Mixin for UUID primary key"""
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

class TimestampMixin:
    """Mixin for created_at and updated_at timestamps"""
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
