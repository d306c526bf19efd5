# bnk_extractor/chunks/__init__.py
"""SoundBank chunk parsers package."""
from .base import BaseChunk, ChunkHeader, ChunkParsingError, TruncatedError, MalformedError
from .bkhd import BkhdChunk
from .didx import DidxChunk
from .data import DataChunk
from .stid import StidChunk
from .hirc import HircChunk

__all__ = [
    'BaseChunk',
    'ChunkHeader',
    'ChunkParsingError',
    'TruncatedError',
    'MalformedError',
    'BkhdChunk',
    'DidxChunk',
    'DataChunk',
    'StidChunk',
    'HircChunk',
]
