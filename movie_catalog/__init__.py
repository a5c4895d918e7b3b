"""
Movie Catalog Application Package.

This package contains the catalog services, the watch history workflow,
database operations, the REST API, and the Streamlit front end.
"""

__version__ = "1.0.0"
