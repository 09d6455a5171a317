# Services Module
from .database import Database, get_database, init_database

__all__ = ["Database", "get_database", "init_database"]
