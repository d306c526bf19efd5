# bnk_extractor/chunks/didx/__init__.py
"""DIDX (Data Index) parser."""
from .parser import DidxChunk
from .entry import IndexEntry

__all__ = ['DidxChunk', 'IndexEntry']
