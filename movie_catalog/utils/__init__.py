"""
Shared utilities package.

This package contains the logging configuration used by the API and scripts.
"""

from movie_catalog.utils.logging_config import setup_logging, get_logger

__all__ = ['setup_logging', 'get_logger']
