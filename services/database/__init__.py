"""PostgreSQL connections for the repositories and the schema tool."""

from .connection import get_connection, ConnectionManager

__all__ = ['get_connection', 'ConnectionManager']
