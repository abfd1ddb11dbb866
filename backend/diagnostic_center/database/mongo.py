"""
MongoDB connection helpers.
"""

from fastapi import Depends
from pymongo.database import Database

from diagnostic_center.context import AppContext, get_context


def get_db(context: AppContext = Depends(get_context)) -> Database:
    """Database handle of the running application."""
    # PyMongo manages connection pooling automatically; nothing to close per request.
    return context.db
