# bnk_extractor/utils/__init__.py
"""Logging and database helpers."""
from .logging import setup_logging

__all__ = ['setup_logging']
