# bnk_extractor/chunks/didx/entry.py
from dataclasses import dataclass
import struct
from typing import Dict, Any

from ..base import TruncatedError

@dataclass(frozen=True)
class IndexEntry:
    """Single entry in the DIDX chunk.
    
    Locates one embedded payload inside the DATA chunk.
    Each entry is 12 bytes.
    """
    id: int         # Payload id, also the output file name
    offset: int     # Relative to the first byte of DATA payload
    size: int       # Payload length in bytes

    SIZE = 12
    
    @classmethod
    def from_bytes(cls, data: bytes, entry_index: int = 0) -> 'IndexEntry':
        """Parse a single DIDX entry from bytes."""
        try:
            return cls(*struct.unpack('<3I', data[:cls.SIZE]))
        except struct.error as e:
            raise TruncatedError(f"Failed to parse DIDX entry {entry_index}: {e}")
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert entry to dictionary format."""
        return {
            'id': self.id,
            'offset': self.offset,
            'size': self.size
        }
