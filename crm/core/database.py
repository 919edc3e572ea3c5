import logging
from typing import Optional

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


class Database:
    """
    Store handle owning the engine and session factory.

    Built from a URL, opened once at application startup and closed at
    shutdown. Routes receive sessions through `get_db`.
    """
    
    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None
    
    @property
    def is_open(self) -> bool:
        return self.engine is not None
    
    def open(self, create_tables: bool = True) -> "Database":
        if self.is_open:
            return self
        
        connect_args = {}
        engine_kwargs = {"echo": self.echo, "pool_pre_ping": True}
        if self.url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
            # In-memory SQLite must share one connection across sessions
            if ":memory:" in self.url or self.url.rstrip("/") == "sqlite:":
                engine_kwargs["poolclass"] = StaticPool
        
        self.engine = create_engine(self.url, connect_args=connect_args, **engine_kwargs)
        
        # Enable WAL Mode for file-backed SQLite
        if self.url.startswith("sqlite") and "poolclass" not in engine_kwargs:
            @event.listens_for(self.engine, "connect")
            def set_sqlite_pragma(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA journal_mode=WAL")
                cursor.close()
        
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        
        if create_tables:
            # Register mappers before create_all
            from crm import models  # noqa: F401
            Base.metadata.create_all(bind=self.engine)
        
        logger.info(f"Database opened: {self.engine.url.render_as_string(hide_password=True)}")
        return self
    
    def close(self):
        if not self.is_open:
            return
        self.engine.dispose()
        self.engine = None
        self.SessionLocal = None
        logger.info("Database closed")
    
    def session(self) -> Session:
        if not self.is_open:
            raise RuntimeError("Database is not open")
        return self.SessionLocal()
    
    def ping(self) -> bool:
        """Run a trivial query to check connectivity"""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True


# Dependency for FastAPI
def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
