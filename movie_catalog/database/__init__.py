"""
Database module for the movie catalog.

This module provides database models, connection management, and CRUD operations
for the SQLite database using SQLAlchemy ORM.
"""

from movie_catalog.database.models import Base, Movie, Review, WatchHistory
from movie_catalog.database.connection import DatabaseManager, get_db_manager
from movie_catalog.database.init_db import init_database, verify_schema
from movie_catalog.database import crud

__all__ = [
    # Models
    'Base',
    'Movie',
    'Review',
    'WatchHistory',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Initialization
    'init_database',
    'verify_schema',
    # CRUD module
    'crud',
]
