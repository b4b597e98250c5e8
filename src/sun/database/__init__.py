"""
Database module for the Sun backend
"""

from .connection import Datasource, Datasources, to_async_url

__all__ = ["Datasource", "Datasources", "to_async_url"]
