# bnk_extractor/utils/db/__init__.py
"""SQLite export of decoded banks."""
from .manager import DatabaseManager
from .schema import ALL_TABLES

__all__ = ['DatabaseManager', 'ALL_TABLES']
