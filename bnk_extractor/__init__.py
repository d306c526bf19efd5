# bnk_extractor/__init__.py
"""Wwise SoundBank decoder and payload extractor package."""
from .parser import BankFileParser, BankSession
from .chunks import ChunkParsingError, TruncatedError, MalformedError
from .extractor import extract_payloads, ExtractionResult
from .report import format_object_report, write_object_report
from .processor import BankProcessor, ExtractorConfig

__version__ = '0.1.0'

__all__ = [
    'BankFileParser',
    'BankSession',
    'ChunkParsingError',
    'TruncatedError',
    'MalformedError',
    'extract_payloads',
    'ExtractionResult',
    'format_object_report',
    'write_object_report',
    'BankProcessor',
    'ExtractorConfig'
]
