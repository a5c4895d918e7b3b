"""
API route handlers.
"""

from movie_catalog.api.routers import movies, reviews, watch_history, system

__all__ = ["movies", "reviews", "watch_history", "system"]
