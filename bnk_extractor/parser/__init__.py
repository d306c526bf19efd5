# bnk_extractor/parser/__init__.py
"""SoundBank file parser module."""
from .file_parser import BankFileParser, ChunkRegistry
from .reader import BinaryReader, swap32, maybe_swap32
from .state import BankState, BankSession

__all__ = [
    'BankFileParser',
    'ChunkRegistry',
    'BinaryReader',
    'swap32',
    'maybe_swap32',
    'BankState',
    'BankSession'
]
