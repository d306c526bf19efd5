# bnk_extractor/chunks/bkhd/__init__.py
"""BKHD (Bank Header) chunk parser."""
from .parser import BkhdChunk
from .header import BankHeader

__all__ = ['BkhdChunk', 'BankHeader']
