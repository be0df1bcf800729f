from .base import DatabaseManager

__all__ = ["DatabaseManager"]
